"""
Services package for XMLTV

Serialization and parsing of XMLTV documents.
"""
from xmltv.services.parser_service import (
    InvalidDocumentError,
    loads,
    parse_xmltv_file,
    unmarshal,
)
from xmltv.services.serializer_service import dump, dumps, marshal

__all__ = [
    'InvalidDocumentError',
    'dump',
    'dumps',
    'loads',
    'marshal',
    'parse_xmltv_file',
    'unmarshal',
]
