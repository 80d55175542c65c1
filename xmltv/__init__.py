"""
Typed data model and (de)serializer for the XMLTV program guide format

    >>> import xmltv
    >>> tv = xmltv.loads(data)
    >>> xmltv.dumps(tv)
"""
from xmltv.models import *  # noqa: F401,F403
from xmltv.models import __all__ as _models_all
from xmltv.scalars import MalformedTimestampError, XMLTVTime
from xmltv.services import (
    InvalidDocumentError,
    dump,
    dumps,
    loads,
    marshal,
    parse_xmltv_file,
    unmarshal,
)

__version__ = "0.1.0"

Time = XMLTVTime
Bool = bool
load = parse_xmltv_file

__all__ = [
    *_models_all,
    'XMLTVTime',
    'Time',
    'Bool',
    'MalformedTimestampError',
    'InvalidDocumentError',
    'marshal',
    'unmarshal',
    'dumps',
    'loads',
    'dump',
    'load',
    'parse_xmltv_file',
]
