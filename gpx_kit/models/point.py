from datetime import datetime
from typing import List, Optional, Sequence, Tuple

from ..diagnostics import Diagnostics
from ..parsers.xml_node import XMLNode
from ..utils.formatting import add_property
from ..utils.gpx_types import (
    format_datetime, format_decimal, format_latitude, format_longitude, parse_datetime,
    parse_decimal, parse_latitude, parse_longitude,
)
from .element import GPXElement
from .location import LocationRecord, locations_from_points


class GPXPoint(GPXElement):
    """
    A geographic point with optional elevation and time.

    Lighter than a waypoint: values are stored typed, so unreadable text is
    reported and dropped on parse.
    """

    TAG_NAME = 'pt'

    def __init__(self, latitude: Optional[float] = None, longitude: Optional[float] = None,
                 elevation: Optional[float] = None, time: Optional[datetime] = None):
        super().__init__()
        self.latitude = latitude
        self.longitude = longitude
        self.elevation = elevation
        self.time = time

    @classmethod
    def from_location(cls, location: LocationRecord) -> 'GPXPoint':
        return cls(location.latitude, location.longitude, location.altitude, location.timestamp)

    def location(self) -> Optional[LocationRecord]:
        """Location record for this point, None without a position."""
        if self.latitude is None or self.longitude is None:
            return None
        return LocationRecord(
            latitude=self.latitude,
            longitude=self.longitude,
            altitude=self.elevation if self.elevation is not None else 0.0,
            timestamp=self.time,
        )

    def _hydrate(self, node: XMLNode, diagnostics: Diagnostics) -> None:
        elevation_text = self._child_text(node, 'ele', diagnostics)
        self.elevation = parse_decimal(elevation_text)
        self._number_warning(diagnostics, 'ele', elevation_text, self.elevation)

        time_text = self._child_text(node, 'time', diagnostics)
        self.time = parse_datetime(time_text)
        self._number_warning(diagnostics, 'time', time_text, self.time)

        latitude_text = self._attribute(node, 'lat', diagnostics, required=True)
        self.latitude = parse_latitude(latitude_text)
        self._number_warning(diagnostics, 'lat', latitude_text, self.latitude)

        longitude_text = self._attribute(node, 'lon', diagnostics, required=True)
        self.longitude = parse_longitude(longitude_text)
        self._number_warning(diagnostics, 'lon', longitude_text, self.longitude)

    def _attributes(self) -> Sequence[Tuple[str, Optional[str]]]:
        return (
            ('lat', format_latitude(self.latitude) if self.latitude is not None else None),
            ('lon', format_longitude(self.longitude) if self.longitude is not None else None),
        )

    def _add_child_tags(self, buffer: List[str], level: int) -> None:
        if self.elevation is not None:
            add_property(buffer, format_decimal(self.elevation), 'ele', level)
        if self.time is not None:
            add_property(buffer, format_datetime(self.time), 'time', level)


class GPXPointSegment(GPXElement):
    """An ordered sequence of points, such as a polyline or polygon."""

    TAG_NAME = 'ptseg'

    def __init__(self):
        super().__init__()
        self.points: List[GPXPoint] = []

    def new_point(self, latitude: float, longitude: float) -> GPXPoint:
        point = GPXPoint(latitude, longitude)
        self.add_point(point)
        return point

    def new_point_with_location(self, location: LocationRecord) -> GPXPoint:
        point = GPXPoint.from_location(location)
        self.add_point(point)
        return point

    def add_point(self, point: GPXPoint) -> None:
        self._add_to(self.points, point)

    def add_points(self, points: Sequence[GPXPoint]) -> None:
        for point in points:
            self.add_point(point)

    def remove_point(self, point: GPXPoint) -> None:
        self._remove_from(self.points, point)

    def locations(self) -> List[LocationRecord]:
        return locations_from_points(self.points)

    def coordinates(self) -> List[Tuple[float, float]]:
        return [
            (point.latitude, point.longitude)
            for point in self.points
            if point.latitude is not None and point.longitude is not None
        ]

    def _hydrate(self, node: XMLNode, diagnostics: Diagnostics) -> None:
        self.points = self._child_elements(node, GPXPoint, diagnostics)

    def _add_child_tags(self, buffer: List[str], level: int) -> None:
        for point in self.points:
            point.write_to(buffer, level)
