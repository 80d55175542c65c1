"""
XMLTV serializer service

Walks a node tree and builds the matching lxml element tree, handing
boolean and timestamp fields to the scalar codecs.
"""
import logging
from enum import Enum
from pathlib import Path

from lxml import etree # type: ignore

from xmltv.config import settings
from xmltv.scalars import boolean, timestamp
from xmltv.schema import Codec, FieldSpec, Position, node_fields
from xmltv.utils.file_operations import write_file_atomically
from xmltv.utils.logging_helpers import log_document_summary, log_section_end, log_section_start

logger = logging.getLogger(__name__)

_ATTRIBUTE_ENCODERS = {
    Codec.BOOLEAN: boolean.encode_attribute,
    Codec.DATETIME_SECONDS: timestamp.encode_attribute,
}

_ELEMENT_ENCODERS = {
    Codec.BOOLEAN: boolean.encode_element,
    Codec.DATETIME_DAY: timestamp.encode_element,
}


def marshal(node, tag: str | None = None) -> etree._Element:
    """
    Build an lxml element for a node

    Args:
        node: Any XMLTV node (TV, Programme, ...)
        tag: Element name, defaults to the node's own tag

    Returns:
        Detached element holding the whole subtree
    """
    element = etree.Element(tag or type(node).TAG)
    log_section_start(logger, f"encoding <{element.tag}>")
    _encode_node(node, element)
    log_section_end(logger, f"encoding <{element.tag}>")
    return element


def dumps(
    node,
    *,
    encoding: str | None = None,
    xml_declaration: bool | None = None,
    pretty_print: bool | None = None,
    doctype: str | None = None
) -> bytes:
    """
    Serialize a node to XML bytes

    Unset keyword arguments fall back to xmltv.config.settings. Pass
    doctype='' to suppress a doctype configured in settings.
    """
    if doctype is None:
        doctype = settings.doctype

    return etree.tostring(
        marshal(node),
        encoding=encoding or settings.encoding,
        xml_declaration=settings.xml_declaration if xml_declaration is None else xml_declaration,
        pretty_print=settings.pretty_print if pretty_print is None else pretty_print,
        doctype=doctype or None,
    )


def dump(node, file_path: Path | str, **kwargs) -> Path:
    """
    Serialize a node to a file

    The write is atomic; a '.gz' suffix produces gzip output. Keyword
    arguments are passed to dumps().
    """
    data = dumps(node, **kwargs)
    file_path = write_file_atomically(file_path, data, compresslevel=settings.gzip_compresslevel)
    log_document_summary(logger, f"Wrote {file_path}", node)
    return file_path


def _encode_node(node, element: etree._Element) -> None:
    for attr_name, spec in node_fields(type(node)):
        value = getattr(node, attr_name)

        if spec.position is Position.ATTRIBUTE:
            text = _encode_attribute(spec, value)
            if text is not None:
                element.set(spec.name, text)

        elif spec.position is Position.ELEMENT:
            # presence-only elements carry no false state
            if spec.name in boolean.PRESENCE_ONLY_ELEMENTS and not value:
                continue
            text = _ELEMENT_ENCODERS[spec.codec](value, spec.name)
            if text is not None:
                sub = etree.SubElement(element, spec.name)
                if text:
                    sub.text = text

        elif spec.position is Position.CHILD:
            items = value if spec.repeated else ([] if value is None else [value])
            for item in items:
                _encode_node(item, etree.SubElement(element, spec.name))

        elif value is not None:
            _append_text(element, _format_scalar(value))


def _encode_attribute(spec: FieldSpec, value) -> str | None:
    if spec.codec is not Codec.NONE:
        return _ATTRIBUTE_ENCODERS[spec.codec](value, spec.name)
    if value is None:
        return None

    text = _format_scalar(value)
    if spec.omit_empty and not text:
        return None
    return text


def _format_scalar(value) -> str:
    if isinstance(value, Enum):
        value = value.value
    return str(value)


def _append_text(element: etree._Element, text: str) -> None:
    """Add character data after whatever the element already holds"""
    if not text:
        return
    if len(element):
        last = element[-1]
        last.tail = (last.tail or "") + text
    else:
        element.text = (element.text or "") + text
