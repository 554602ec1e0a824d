"""
Conversion between GPX text values and typed values.

Parsing never raises: text that cannot be read yields None (or 0 for the
integer types). Formatting clamps values that are out of their GPX range
to "0".
"""

import logging
import re
import threading
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple

from dateutil import tz

logger = logging.getLogger(__name__)

UTC = tz.tzutc()
DATETIME_OUTPUT_FORMAT = '%Y-%m-%dT%H:%M:%SZ'

_OFFSET_COLON = re.compile(r'([+-]\d{2}):(\d{2})$')

_formats_lock = threading.Lock()
_datetime_formats: Optional[Tuple[Tuple[str, bool], ...]] = None


class Fix(Enum):
    """Type of GPS fix."""
    NONE = 'none'
    TWO_D = '2d'
    THREE_D = '3d'
    DGPS = 'dgps'
    PPS = 'pps'


def _parse_float(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def _parse_int(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def parse_latitude(value: Optional[str]) -> Optional[float]:
    """Latitudes are not range checked when read."""
    return _parse_float(value)


def format_latitude(latitude: float) -> str:
    if -90 <= latitude <= 90:
        return repr(float(latitude))
    return '0'


def parse_longitude(value: Optional[str]) -> Optional[float]:
    return _parse_float(value)


def format_longitude(longitude: float) -> str:
    if -180 <= longitude <= 180:
        return repr(float(longitude))
    return '0'


def parse_degrees(value: Optional[str]) -> Optional[float]:
    """Magnetic variation, course and other angles."""
    return _parse_float(value)


def format_degrees(degrees: float) -> str:
    if 0 <= degrees <= 360:
        return repr(float(degrees))
    return '0'


def parse_decimal(value: Optional[str]) -> Optional[float]:
    return _parse_float(value)


def format_decimal(decimal: float) -> str:
    return repr(float(decimal))


def parse_non_negative_integer(value: Optional[str]) -> int:
    """
    Parse a nonNegativeInteger.

    Zero and negative values read as 0, the same as unreadable text.
    """
    number = _parse_int(value)
    if number is not None and number > 0:
        return number
    return 0


def format_non_negative_integer(number: int) -> str:
    if number > 0:
        return str(number)
    return '0'


def parse_dgps_station(value: Optional[str]) -> int:
    number = _parse_int(value)
    if number is not None and 0 <= number <= 1023:
        return number
    return 0


def format_dgps_station(station: int) -> str:
    if 0 <= station <= 1023:
        return str(station)
    return '0'


def parse_fix(value: Optional[str]) -> Fix:
    """Anything that is not a known fix name reads as Fix.NONE."""
    if value is None:
        return Fix.NONE
    try:
        return Fix(value)
    except ValueError:
        return Fix.NONE


def format_fix(fix: Fix) -> str:
    return fix.value


def _get_datetime_formats() -> Tuple[Tuple[str, bool], ...]:
    """
    Get the accepted date formats, built once on first use.

    Returns:
        Tuple of (strptime format, has offset) in the order they are tried
    """
    global _datetime_formats
    if _datetime_formats is None:
        with _formats_lock:
            if _datetime_formats is None:
                _datetime_formats = (
                    ('%Y-%m-%dT%H:%M:%SZ', False),
                    ('%Y-%m-%dT%H:%M:%S.%fZ', False),
                    ('%Y-%m-%dT%H:%M:%S%z', True),
                    ('%Y-%m-%d', False),
                    ('%Y-%m', False),
                    ('%Y', False),
                )
    return _datetime_formats


def parse_datetime(value: Optional[str]) -> Optional[datetime]:
    """
    Parse a GPX dateTime into an aware UTC datetime.

    Accepted forms, tried in order: 2002-03-12T18:36:28Z,
    2002-03-12T18:36:28.123Z, 2002-03-12T18:36:28+01:00, 2002-03-12,
    2002-03 and 2002.
    """
    if not value:
        return None
    text = value.strip()
    for date_format, has_offset in _get_datetime_formats():
        candidate = _OFFSET_COLON.sub(r'\1\2', text) if has_offset else text
        try:
            parsed = datetime.strptime(candidate, date_format)
        except ValueError:
            continue
        if has_offset:
            return parsed.astimezone(UTC)
        return parsed.replace(tzinfo=UTC)
    logger.debug(f"Unreadable date: {value}")
    return None


def format_datetime(value: datetime) -> str:
    """Format as YYYY-MM-DDThh:mm:ssZ in UTC; naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).strftime(DATETIME_OUTPUT_FORMAT)
