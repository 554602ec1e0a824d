from .gpx_types import Fix, parse_datetime, format_datetime
from .formatting import LINE_ENDING, INDENT, XML_DECLARATION, CDATA_PATTERN, indent
from .kinematics import bearing, distance, speed

__all__ = [
    'Fix',
    'parse_datetime',
    'format_datetime',
    'LINE_ENDING',
    'INDENT',
    'XML_DECLARATION',
    'CDATA_PATTERN',
    'indent',
    'bearing',
    'distance',
    'speed',
]
