from typing import List, Optional, Sequence, Tuple

from ..diagnostics import Diagnostics
from ..parsers.xml_node import XMLNode
from .element import GPXElement
from .extensions import GPXExtensions
from .location import LocationRecord, locations_from_points
from .path import GPXPathElement
from .waypoint import GPXTrackPoint


class GPXTrackSegment(GPXElement):
    """
    A continuous span of track points.

    A track is split into several segments when the GPS receiver lost its
    fix or was turned off.
    """

    TAG_NAME = 'trkseg'

    def __init__(self):
        super().__init__()
        self.track_points: List[GPXTrackPoint] = []
        self.extensions: Optional[GPXExtensions] = None

    def new_track_point(self, latitude: float, longitude: float) -> GPXTrackPoint:
        point = GPXTrackPoint(latitude, longitude)
        self.add_track_point(point)
        return point

    def new_track_point_with_location(self, location: LocationRecord) -> GPXTrackPoint:
        point = GPXTrackPoint.from_location(location)
        self.add_track_point(point)
        return point

    def add_track_point(self, point: GPXTrackPoint) -> None:
        self._add_to(self.track_points, point)

    def add_track_points(self, points: Sequence[GPXTrackPoint]) -> None:
        for point in points:
            self.add_track_point(point)

    def remove_track_point(self, point: GPXTrackPoint) -> None:
        self._remove_from(self.track_points, point)

    def locations(self) -> List[LocationRecord]:
        return locations_from_points(self.track_points)

    def coordinates(self) -> List[Tuple[float, float]]:
        return [(record.latitude, record.longitude) for record in self.locations()]

    def _hydrate(self, node: XMLNode, diagnostics: Diagnostics) -> None:
        self.extensions = self._child_element(node, GPXExtensions, diagnostics)
        self.track_points = self._child_elements(node, GPXTrackPoint, diagnostics)

    def _add_child_tags(self, buffer: List[str], level: int) -> None:
        if self.extensions is not None:
            self.extensions.write_to(buffer, level)
        for point in self.track_points:
            point.write_to(buffer, level)


class GPXTrack(GPXPathElement):
    """An ordered list of track segments describing a recorded path."""

    TAG_NAME = 'trk'

    def __init__(self):
        super().__init__()
        self.track_segments: List[GPXTrackSegment] = []

    def new_track_segment(self) -> GPXTrackSegment:
        segment = GPXTrackSegment()
        self.add_track_segment(segment)
        return segment

    def add_track_segment(self, segment: GPXTrackSegment) -> None:
        self._add_to(self.track_segments, segment)

    def add_track_segments(self, segments: Sequence[GPXTrackSegment]) -> None:
        for segment in segments:
            self.add_track_segment(segment)

    def remove_track_segment(self, segment: GPXTrackSegment) -> None:
        self._remove_from(self.track_segments, segment)

    def new_track_point(self, latitude: float, longitude: float) -> GPXTrackPoint:
        """Add a point to the last segment, creating one if the track has none."""
        if self.track_segments:
            segment = self.track_segments[-1]
        else:
            segment = self.new_track_segment()
        return segment.new_track_point(latitude, longitude)

    def _hydrate(self, node: XMLNode, diagnostics: Diagnostics) -> None:
        super()._hydrate(node, diagnostics)
        self.track_segments = self._child_elements(node, GPXTrackSegment, diagnostics)

    def _add_child_tags(self, buffer: List[str], level: int) -> None:
        super()._add_child_tags(buffer, level)
        for segment in self.track_segments:
            segment.write_to(buffer, level)

    def __repr__(self) -> str:
        return f"GPXTrack(name={self.name!r}, segments={len(self.track_segments)})"
