from typing import List, Sequence, Tuple

from ..diagnostics import Diagnostics
from ..parsers.xml_node import XMLNode
from .location import LocationRecord, locations_from_points
from .path import GPXPathElement
from .waypoint import GPXRoutePoint


class GPXRoute(GPXPathElement):
    """An ordered list of route points leading to a destination."""

    TAG_NAME = 'rte'

    def __init__(self):
        super().__init__()
        self.route_points: List[GPXRoutePoint] = []

    def new_route_point(self, latitude: float, longitude: float) -> GPXRoutePoint:
        point = GPXRoutePoint(latitude, longitude)
        self.add_route_point(point)
        return point

    def new_route_point_with_location(self, location: LocationRecord) -> GPXRoutePoint:
        point = GPXRoutePoint.from_location(location)
        self.add_route_point(point)
        return point

    def add_route_point(self, point: GPXRoutePoint) -> None:
        self._add_to(self.route_points, point)

    def add_route_points(self, points: Sequence[GPXRoutePoint]) -> None:
        for point in points:
            self.add_route_point(point)

    def remove_route_point(self, point: GPXRoutePoint) -> None:
        self._remove_from(self.route_points, point)

    def locations(self) -> List[LocationRecord]:
        return locations_from_points(self.route_points)

    def coordinates(self) -> List[Tuple[float, float]]:
        return [(record.latitude, record.longitude) for record in self.locations()]

    def _hydrate(self, node: XMLNode, diagnostics: Diagnostics) -> None:
        super()._hydrate(node, diagnostics)
        self.route_points = self._child_elements(node, GPXRoutePoint, diagnostics)

    def _add_child_tags(self, buffer: List[str], level: int) -> None:
        super()._add_child_tags(buffer, level)
        for point in self.route_points:
            point.write_to(buffer, level)

    def __repr__(self) -> str:
        return f"GPXRoute(name={self.name!r}, points={len(self.route_points)})"
