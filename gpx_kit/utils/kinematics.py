import math
from datetime import datetime
from typing import Optional

# Mean Earth radius in meters
EARTH_RADIUS_M = 6371008.8


def bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Initial great circle bearing from the first point to the second.

    Returns:
        Bearing in degrees, 0-360 (0/360 is North, 90 is East)
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    dlon = math.radians(lon2 - lon1)

    y = math.sin(dlon) * math.cos(lat2_rad)
    x = math.cos(lat1_rad) * math.sin(lat2_rad) - math.sin(lat1_rad) * math.cos(lat2_rad) * math.cos(dlon)
    return (math.degrees(math.atan2(y, x)) + 360) % 360


def distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Haversine distance between two points.

    Returns:
        Distance in meters
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    dlat = lat2_rad - lat1_rad
    dlon = math.radians(lon2 - lon1)

    a = math.sin(dlat / 2) ** 2 + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_M * c


def speed(lat1: float, lon1: float, time1: Optional[datetime],
          lat2: float, lon2: float, time2: Optional[datetime]) -> float:
    """
    Average speed between two timed points in m/s.

    Returns 0 when either time is missing or both times are equal.
    """
    if time1 is None or time2 is None:
        return 0.0
    seconds = (time2 - time1).total_seconds()
    if seconds == 0:
        return 0.0
    return distance(lat1, lon1, lat2, lon2) / seconds
