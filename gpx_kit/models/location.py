from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Sequence

from ..utils.kinematics import bearing, speed


@dataclass
class LocationRecord:
    """
    A position with derived motion, as produced from points.

    Course is in degrees (0-360, 0 is North), speed in m/s and altitude
    in meters (0 when the point has no elevation).
    """

    latitude: float
    longitude: float
    altitude: float = 0.0
    course: float = 0.0
    speed: float = 0.0
    timestamp: Optional[datetime] = None

    @property
    def coordinate(self):
        return (self.latitude, self.longitude)


def locations_from_points(points: Sequence) -> List[LocationRecord]:
    """
    Convert an ordered sequence of points to location records.

    Points need latitude, longitude, elevation and time attributes; those
    without a position are skipped. Course and speed look at the next
    point, the last point repeats the values of the one before it.

    Args:
        points: Waypoint-family or Point elements

    Returns:
        List of LocationRecord, one per positioned point
    """
    positioned = [p for p in points if p.latitude is not None and p.longitude is not None]
    records: List[LocationRecord] = []
    for index, point in enumerate(positioned):
        if index + 1 < len(positioned):
            following = positioned[index + 1]
            course = bearing(point.latitude, point.longitude, following.latitude, following.longitude)
            point_speed = speed(point.latitude, point.longitude, point.time,
                                following.latitude, following.longitude, following.time)
        elif records:
            course = records[-1].course
            point_speed = records[-1].speed
        else:
            course = 0.0
            point_speed = 0.0

        if point.time is None:
            point_speed = 0.0
        records.append(LocationRecord(
            latitude=point.latitude,
            longitude=point.longitude,
            altitude=point.elevation if point.elevation is not None else 0.0,
            course=course,
            speed=point_speed,
            timestamp=point.time,
        ))
    return records
