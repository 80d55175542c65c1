"""
Date and Time codec

XMLTV writes timestamps in two grammars depending on position:
attributes carry the full ``YYYYMMDDhhmmss ±hhmm`` form, elements carry the
date-only ``YYYYMMDD`` form. This module keeps both grammars and the
"zero means no value" convention in one place.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone


ATTRIBUTE_GRAMMAR = "YYYYMMDDhhmmss +hhmm"
ELEMENT_GRAMMAR = "YYYYMMDD"

_ATTRIBUTE_PATTERN = re.compile(
    r"([0-9]{4})([0-9]{2})([0-9]{2})([0-9]{2})([0-9]{2})([0-9]{2}) ([+-])([0-9]{2})([0-9]{2})"
)
_ELEMENT_PATTERN = re.compile(r"([0-9]{4})([0-9]{2})([0-9]{2})")


class MalformedTimestampError(ValueError):
    """Raised when timestamp text does not match the grammar of its position"""

    def __init__(self, text: str, grammar: str):
        super().__init__(f"Invalid XMLTV timestamp '{text}': expected '{grammar}'")
        self.text = text
        self.grammar = grammar


@dataclass(frozen=True, slots=True, eq=False)
class XMLTVTime:
    """A point in time with a fixed UTC offset, or the zero value.

    ``XMLTVTime()`` is the zero value: it means "no timestamp" and is not the
    same thing as a schema field left as ``None``. Naive datetimes are taken
    to be UTC.
    """
    value: datetime | None = None

    def __post_init__(self):
        if self.value is not None and self.value.tzinfo is None:
            object.__setattr__(self, "value", self.value.replace(tzinfo=timezone.utc))

    @property
    def is_zero(self) -> bool:
        return self.value is None

    def _key(self):
        if self.value is None:
            return None
        return (self.value, self.value.utcoffset())

    def __eq__(self, other):
        if not isinstance(other, XMLTVTime):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self) -> str:
        if self.value is None:
            return "XMLTVTime()"
        return f"XMLTVTime({self.value.isoformat()})"


def _format_offset(value: datetime) -> str:
    offset = value.utcoffset() or timedelta(0)
    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{sign}{minutes // 60:02d}{minutes % 60:02d}"


def _format_date(value: datetime) -> str:
    return f"{value.year:04d}{value.month:02d}{value.day:02d}"


def encode_attribute(value: XMLTVTime | None, name: str) -> str | None:
    """
    Format a timestamp for attribute position

    Args:
        value: Timestamp, or None when the field is absent
        name: Attribute name being written

    Returns:
        Attribute text like '20220401000000 +0000', or None to omit the attribute
    """
    if value is None or value.is_zero:
        return None

    dt = value.value
    return (
        f"{_format_date(dt)}{dt.hour:02d}{dt.minute:02d}{dt.second:02d} "
        f"{_format_offset(dt)}"
    )


def encode_element(value: XMLTVTime | None, name: str) -> str | None:
    """
    Format a timestamp for element position

    Returns None to omit the element, '' for the zero value and
    'YYYYMMDD' otherwise.
    """
    if value is None:
        return None
    if value.is_zero:
        return ""
    return _format_date(value.value)


def decode_attribute(text: str, name: str) -> XMLTVTime:
    """
    Parse attribute text in the full timestamp grammar

    Args:
        text: Attribute value like '20080715003000 -0600'
        name: Attribute name being read

    Returns:
        XMLTVTime keeping the offset found in the text; zero for empty text

    Raises:
        MalformedTimestampError: If non-empty text does not match the grammar
    """
    if text == "":
        return XMLTVTime()

    match = _ATTRIBUTE_PATTERN.fullmatch(text)
    if match is None:
        raise MalformedTimestampError(text, ATTRIBUTE_GRAMMAR)

    year, month, day, hour, minute, second, sign, tz_hours, tz_mins = match.groups()
    tz_offset = timedelta(hours=int(tz_hours), minutes=int(tz_mins))
    if sign == "-":
        tz_offset = -tz_offset

    try:
        return XMLTVTime(datetime(
            int(year), int(month), int(day),
            int(hour), int(minute), int(second),
            tzinfo=timezone(tz_offset),
        ))
    except ValueError as e:
        raise MalformedTimestampError(text, ATTRIBUTE_GRAMMAR) from e


def decode_element(text: str, name: str) -> XMLTVTime:
    """
    Parse element text in the date-only grammar

    The result is midnight UTC of that date; empty text is the zero value.

    Raises:
        MalformedTimestampError: If non-empty text does not match the grammar
    """
    if text == "":
        return XMLTVTime()

    match = _ELEMENT_PATTERN.fullmatch(text)
    if match is None:
        raise MalformedTimestampError(text, ELEMENT_GRAMMAR)

    year, month, day = match.groups()
    try:
        return XMLTVTime(datetime(int(year), int(month), int(day), tzinfo=timezone.utc))
    except ValueError as e:
        raise MalformedTimestampError(text, ELEMENT_GRAMMAR) from e
