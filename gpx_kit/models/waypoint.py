"""
Waypoint and its route/track variants.

Every value is stored as the text found in the document and converted on
access through typed properties, so a parsed point is written back
exactly as it was read.
"""

from typing import List, Optional, Sequence, Tuple

from ..diagnostics import Diagnostics
from ..parsers.xml_node import XMLNode
from ..utils.formatting import add_property
from ..utils.gpx_types import (
    Fix, format_datetime, format_decimal, format_degrees, format_dgps_station, format_fix,
    format_latitude, format_longitude, format_non_negative_integer, parse_datetime,
    parse_decimal, parse_degrees, parse_dgps_station, parse_fix, parse_latitude,
    parse_longitude, parse_non_negative_integer,
)
from .element import CodedValue, GPXElement
from .extensions import GPXExtensions
from .link import GPXLink
from .location import LocationRecord

# (attribute holding the raw text, child tag) for the values written before the links
_LEADING_VALUES = (
    ('elevation_value', 'ele'),
    ('time_value', 'time'),
    ('course_value', 'course'),
    ('speed_value', 'speed'),
    ('magnetic_variation_value', 'magvar'),
    ('geoid_height_value', 'geoidheight'),
    ('name', 'name'),
    ('comment', 'cmt'),
    ('desc', 'desc'),
    ('source', 'src'),
)

# the same for the values written after the links
_TRAILING_VALUES = (
    ('symbol', 'sym'),
    ('type', 'type'),
    ('fix_value', 'fix'),
    ('satellites_value', 'sat'),
    ('horizontal_dilution_value', 'hdop'),
    ('vertical_dilution_value', 'vdop'),
    ('position_dilution_value', 'pdop'),
    ('age_of_dgps_data_value', 'ageofdgpsdata'),
    ('dgps_id_value', 'dgpsid'),
)


class GPXWaypoint(GPXElement):
    """
    A point of interest, or named feature on a map.

    Latitude and longitude are required; everything else is optional.
    """

    TAG_NAME = 'wpt'

    latitude = CodedValue('latitude_value', parse_latitude, format_latitude)
    longitude = CodedValue('longitude_value', parse_longitude, format_longitude)
    elevation = CodedValue('elevation_value', parse_decimal, format_decimal)
    time = CodedValue('time_value', parse_datetime, format_datetime)
    course = CodedValue('course_value', parse_degrees, format_degrees)
    speed = CodedValue('speed_value', parse_decimal, format_decimal)
    magnetic_variation = CodedValue('magnetic_variation_value', parse_degrees, format_degrees)
    geoid_height = CodedValue('geoid_height_value', parse_decimal, format_decimal)
    satellites = CodedValue('satellites_value', parse_non_negative_integer, format_non_negative_integer)
    horizontal_dilution = CodedValue('horizontal_dilution_value', parse_decimal, format_decimal)
    vertical_dilution = CodedValue('vertical_dilution_value', parse_decimal, format_decimal)
    position_dilution = CodedValue('position_dilution_value', parse_decimal, format_decimal)
    age_of_dgps_data = CodedValue('age_of_dgps_data_value', parse_decimal, format_decimal)
    dgps_id = CodedValue('dgps_id_value', parse_dgps_station, format_dgps_station)

    def __init__(self, latitude: Optional[float] = None, longitude: Optional[float] = None):
        super().__init__()
        self.latitude_value: Optional[str] = None
        self.longitude_value: Optional[str] = None
        for attribute, _ in _LEADING_VALUES + _TRAILING_VALUES:
            setattr(self, attribute, None)
        self.links: List[GPXLink] = []
        self.extensions: Optional[GPXExtensions] = None
        self.latitude = latitude
        self.longitude = longitude

    @classmethod
    def from_location(cls, location: LocationRecord) -> 'GPXWaypoint':
        """Create a point at a location, keeping its altitude and timestamp."""
        point = cls(location.latitude, location.longitude)
        point.elevation = location.altitude
        point.time = location.timestamp
        return point

    @property
    def fix(self) -> Fix:
        return parse_fix(self.fix_value)

    @fix.setter
    def fix(self, value: Optional[Fix]) -> None:
        self.fix_value = format_fix(value) if value is not None else None

    def location(self) -> Optional[LocationRecord]:
        """Location record for this point, None without a position."""
        if self.latitude is None or self.longitude is None:
            return None
        return LocationRecord(
            latitude=self.latitude,
            longitude=self.longitude,
            altitude=self.elevation if self.elevation is not None else 0.0,
            course=self.course if self.course is not None else 0.0,
            speed=self.speed if self.speed is not None else 0.0,
            timestamp=self.time,
        )

    # Links

    def new_link(self, href: str) -> GPXLink:
        link = GPXLink(href)
        self.add_link(link)
        return link

    def add_link(self, link: GPXLink) -> None:
        self._add_to(self.links, link)

    def add_links(self, links: Sequence[GPXLink]) -> None:
        for link in links:
            self.add_link(link)

    def remove_link(self, link: GPXLink) -> None:
        self._remove_from(self.links, link)

    def _hydrate(self, node: XMLNode, diagnostics: Diagnostics) -> None:
        for attribute, tag in _LEADING_VALUES + _TRAILING_VALUES:
            setattr(self, attribute, self._child_text(node, tag, diagnostics))
        self.links = self._child_elements(node, GPXLink, diagnostics)
        self.extensions = self._child_element(node, GPXExtensions, diagnostics)
        self.latitude_value = self._attribute(node, 'lat', diagnostics, required=True)
        self.longitude_value = self._attribute(node, 'lon', diagnostics, required=True)

    def _attributes(self) -> Sequence[Tuple[str, Optional[str]]]:
        return (('lat', self.latitude_value), ('lon', self.longitude_value))

    def _add_child_tags(self, buffer: List[str], level: int) -> None:
        for attribute, tag in _LEADING_VALUES:
            add_property(buffer, getattr(self, attribute), tag, level)
        for link in self.links:
            link.write_to(buffer, level)
        for attribute, tag in _TRAILING_VALUES:
            add_property(buffer, getattr(self, attribute), tag, level)
        if self.extensions is not None:
            self.extensions.write_to(buffer, level)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(lat={self.latitude_value}, lon={self.longitude_value}, name={self.name!r})"


class GPXRoutePoint(GPXWaypoint):
    """A waypoint that is part of a route."""

    TAG_NAME = 'rtept'


class GPXTrackPoint(GPXWaypoint):
    """A waypoint that is part of a track segment."""

    TAG_NAME = 'trkpt'
