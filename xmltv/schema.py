"""
Declarative schema for XMLTV nodes

Each node is a dataclass; each of its fields carries a FieldSpec in its
metadata telling the tree walker where the value lives in XML and which
scalar codec, if any, formats it.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from typing import Any


SCHEMA_KEY = "xmltv"


class Position(Enum):
    ATTRIBUTE = "attribute"
    ELEMENT = "element"  # scalar child element, e.g. <date>19901011</date>
    CHILD = "child"      # nested node
    TEXT = "text"        # character data of the node itself


class Codec(Enum):
    NONE = "none"
    BOOLEAN = "boolean"
    DATETIME_SECONDS = "datetime-seconds"
    DATETIME_DAY = "datetime-day"


# Positions each codec may be declared at.
_CODEC_POSITIONS = {
    Codec.NONE: {Position.ATTRIBUTE, Position.CHILD, Position.TEXT},
    Codec.BOOLEAN: {Position.ATTRIBUTE, Position.ELEMENT},
    Codec.DATETIME_SECONDS: {Position.ATTRIBUTE},
    Codec.DATETIME_DAY: {Position.ELEMENT},
}


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Where a field lives in XML and how its value is formatted"""
    name: str | None
    position: Position
    codec: Codec = Codec.NONE
    value_type: Any = str
    repeated: bool = False
    omit_empty: bool = False

    def __post_init__(self):
        if self.position not in _CODEC_POSITIONS[self.codec]:
            raise ValueError(
                f"Codec {self.codec.value} cannot be used at {self.position.value} position "
                f"(field '{self.name}')"
            )
        if self.position is Position.CHILD and not dataclasses.is_dataclass(self.value_type):
            raise ValueError(f"Child field '{self.name}' must declare a node type")
        if self.repeated and self.position is not Position.CHILD:
            raise ValueError(f"Only child nodes can repeat (field '{self.name}')")
        if self.position is Position.TEXT and self.name is not None:
            raise ValueError("Character data fields have no XML name")


def attribute(name: str, value_type: Any = str, *, codec: Codec = Codec.NONE,
              default: Any = None, omit_empty: bool = False):
    """Declare a field stored as an XML attribute"""
    spec = FieldSpec(name, Position.ATTRIBUTE, codec, value_type, omit_empty=omit_empty)
    return _declare(spec, default)


def element(name: str, *, codec: Codec):
    """Declare a scalar stored as the text of its own child element"""
    value_type = bool if codec is Codec.BOOLEAN else None
    return _declare(FieldSpec(name, Position.ELEMENT, codec, value_type), None)


def child(name: str, node_type: type):
    """Declare an optional nested node"""
    return _declare(FieldSpec(name, Position.CHILD, value_type=node_type), None)


def children(name: str, node_type: type):
    """Declare a repeated nested node"""
    spec = FieldSpec(name, Position.CHILD, value_type=node_type, repeated=True)
    return field(default_factory=list, metadata={SCHEMA_KEY: spec})


def chardata(value_type: Any = str, *, default: Any = ""):
    """Declare the node's character data"""
    return _declare(FieldSpec(None, Position.TEXT, value_type=value_type), default)


def _declare(spec: FieldSpec, default: Any):
    return field(default=default, metadata={SCHEMA_KEY: spec})


@lru_cache(maxsize=None)
def node_fields(node_type: type) -> tuple[tuple[str, FieldSpec], ...]:
    """Return (attribute name, FieldSpec) pairs in declaration order"""
    if not dataclasses.is_dataclass(node_type):
        raise TypeError(f"{node_type.__name__} is not an XMLTV node")
    return tuple(
        (f.name, f.metadata[SCHEMA_KEY])
        for f in dataclasses.fields(node_type)
        if SCHEMA_KEY in f.metadata
    )


@lru_cache(maxsize=None)
def element_fields(node_type: type) -> dict[str, tuple[str, FieldSpec]]:
    """Map XML element names to the ELEMENT/CHILD fields that consume them"""
    return {
        spec.name: (attr_name, spec)
        for attr_name, spec in node_fields(node_type)
        if spec.position in (Position.ELEMENT, Position.CHILD)
    }
