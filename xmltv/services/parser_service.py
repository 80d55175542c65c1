"""
XMLTV parser service

Reads an lxml element tree back into XMLTV nodes. The whole document is
materialized; any malformed timestamp or integer aborts the parse.
"""
import logging
import re
from enum import Enum
from pathlib import Path

from lxml import etree # type: ignore

from xmltv.config import settings
from xmltv.models import TV
from xmltv.scalars import MalformedTimestampError, boolean, timestamp
from xmltv.schema import Codec, FieldSpec, Position, element_fields, node_fields
from xmltv.utils.file_operations import read_document_bytes
from xmltv.utils.logging_helpers import log_document_summary, log_section_end, log_section_start

logger = logging.getLogger(__name__)

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

_ATTRIBUTE_DECODERS = {
    Codec.BOOLEAN: boolean.decode_attribute,
    Codec.DATETIME_SECONDS: timestamp.decode_attribute,
}

_ELEMENT_DECODERS = {
    Codec.BOOLEAN: boolean.decode_element,
    Codec.DATETIME_DAY: timestamp.decode_element,
}


class InvalidDocumentError(ValueError):
    """Raised when a document cannot be mapped onto the XMLTV schema"""
    pass


def parse_xmltv_file(file_path: Path | str, cls: type = TV):
    """
    Parse an XMLTV file (plain or gzip-compressed)

    Args:
        file_path: Path to XMLTV file
        cls: Node type expected at the document root

    Returns:
        Fully populated root node

    Raises:
        etree.XMLSyntaxError: If XML is malformed
        MalformedTimestampError: If a date/time field does not match its grammar
        InvalidDocumentError: If the root element or an integer field is wrong
        FileNotFoundError: If file doesn't exist
        OSError: If file can't be read
    """
    logger.debug(f"Parsing XMLTV file: {file_path}")
    node = loads(read_document_bytes(file_path), cls)
    log_document_summary(logger, f"Loaded {file_path}", node)
    return node


def loads(data: bytes | str, cls: type = TV):
    """
    Parse an XMLTV document held in memory

    Text input is encoded as UTF-8 before parsing, so it must not declare a
    different encoding.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")

    parser = etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        huge_tree=settings.huge_tree,
    )
    try:
        root = etree.fromstring(data, parser=parser)
    except etree.XMLSyntaxError as e:
        logger.error(f"XML parsing error: {e}")
        raise

    return unmarshal(root, cls)


def unmarshal(element: etree._Element, cls: type = TV):
    """
    Build a node from an lxml element

    Raises:
        InvalidDocumentError: If the element is not the node's tag
        MalformedTimestampError: If a date/time field does not match its grammar
    """
    name = etree.QName(element).localname
    if name != cls.TAG:
        raise InvalidDocumentError(f"Expected element <{cls.TAG}> but found <{name}>")

    log_section_start(logger, f"decoding <{name}>")
    node = _decode_node(element, cls)
    log_section_end(logger, f"decoding <{name}>")
    return node


def _decode_node(element: etree._Element, cls: type):
    node = cls()

    for attr_name, spec in node_fields(cls):
        if spec.position is Position.ATTRIBUTE:
            raw = element.get(spec.name)
            if raw is not None:
                setattr(node, attr_name, _decode_attribute(spec, raw, element))
        elif spec.position is Position.TEXT:
            setattr(node, attr_name, _decode_scalar(spec, _chardata(element), element))

    consumers = element_fields(cls)
    for sub in element:
        if not isinstance(sub.tag, str):
            continue  # comments, processing instructions, entities

        entry = consumers.get(etree.QName(sub).localname)
        if entry is None:
            continue

        attr_name, spec = entry
        if spec.position is Position.ELEMENT:
            setattr(node, attr_name, _decode_element(spec, sub))
        elif spec.repeated:
            getattr(node, attr_name).append(_decode_node(sub, spec.value_type))
        else:
            # last occurrence wins
            setattr(node, attr_name, _decode_node(sub, spec.value_type))

    return node


def _chardata(element: etree._Element) -> str:
    """Text of the element itself: leading text plus the tails of its children"""
    parts = [element.text or ""]
    parts.extend(sub.tail or "" for sub in element)
    return "".join(parts)


def _decode_attribute(spec: FieldSpec, raw: str, element: etree._Element):
    if spec.codec is Codec.NONE:
        return _decode_scalar(spec, raw, element)

    try:
        return _ATTRIBUTE_DECODERS[spec.codec](raw, spec.name)
    except MalformedTimestampError as e:
        logger.error(f"Invalid '{spec.name}' attribute on <{element.tag}> (line {element.sourceline}): {e}")
        raise


def _decode_element(spec: FieldSpec, element: etree._Element):
    try:
        return _ELEMENT_DECODERS[spec.codec](_chardata(element), spec.name)
    except MalformedTimestampError as e:
        logger.error(f"Invalid <{spec.name}> element (line {element.sourceline}): {e}")
        raise


def _decode_scalar(spec: FieldSpec, raw: str, element: etree._Element):
    value_type = spec.value_type
    if value_type is str:
        return raw

    if issubclass(value_type, int):
        number = _parse_int(raw, spec, element)
        return _coerce_enum(value_type, number) if issubclass(value_type, Enum) else number

    if issubclass(value_type, Enum):
        return _coerce_enum(value_type, raw)

    raise TypeError(f"Unsupported field type {value_type!r} for '{spec.name}'")


def _parse_int(raw: str, spec: FieldSpec, element: etree._Element) -> int:
    """Parse integer text; surrounding whitespace is ignored and empty text is 0"""
    stripped = raw.strip()
    if not stripped:
        return 0
    if not _INTEGER_PATTERN.fullmatch(stripped):
        where = f"'{spec.name}' attribute" if spec.name else "text"
        raise InvalidDocumentError(
            f"Invalid integer '{raw}' in {where} of <{element.tag}> (line {element.sourceline})"
        )
    return int(stripped)


def _coerce_enum(enum_type: type[Enum], value):
    """Return the enum member for value, or value itself when it is not a member"""
    try:
        return enum_type(value)
    except ValueError:
        logger.debug(f"Keeping unrecognized {enum_type.__name__} value {value!r}")
        return value
