"""
Scalar codecs for XMLTV attribute and element values
"""
from xmltv.scalars import boolean, timestamp
from xmltv.scalars.boolean import PRESENCE_ONLY_ELEMENTS
from xmltv.scalars.timestamp import MalformedTimestampError, XMLTVTime

__all__ = [
    'boolean',
    'timestamp',
    'PRESENCE_ONLY_ELEMENTS',
    'MalformedTimestampError',
    'XMLTVTime',
]
