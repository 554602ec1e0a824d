"""
Root element of a GPX document.

Example:
    root = GPXRoot('my-app')
    waypoint = root.new_waypoint(42.398167, -71.083339)
    waypoint.name = '205A'
    text = root.gpx()
"""

from typing import Dict, List, Optional, Sequence, Tuple

from ..diagnostics import Diagnostics
from ..parsers.xml_node import XMLNode
from ..utils.formatting import LINE_ENDING, XML_DECLARATION
from .element import GPXElement
from .extensions import GPXExtensions
from .metadata import GPXMetadata
from .route import GPXRoute
from .track import GPXTrack
from .waypoint import GPXWaypoint

NAMESPACE_PREFIX = 'xmlns:'


def split_keywords(text: Optional[str]) -> Optional[List[str]]:
    """Split a comma separated keyword string, trimming each keyword."""
    if text is None:
        return None
    return [keyword.strip() for keyword in text.split(',')]


class GPXRoot(GPXElement):
    """
    The <gpx> element holding metadata, waypoints, routes and tracks.

    version and creator are always written; they fall back to
    DEFAULT_VERSION and DEFAULT_CREATOR when not given.
    """

    TAG_NAME = 'gpx'
    SCHEMA = 'http://www.topografix.com/GPX/1/1'
    DEFAULT_VERSION = '1.1'
    DEFAULT_CREATOR = 'gpx_kit'

    def __init__(self, creator: Optional[str] = None):
        super().__init__()
        self.version = self.DEFAULT_VERSION
        self.creator = creator or self.DEFAULT_CREATOR
        self.metadata: Optional[GPXMetadata] = None
        self.waypoints: List[GPXWaypoint] = []
        self.routes: List[GPXRoute] = []
        self.tracks: List[GPXTrack] = []
        self.extensions: Optional[GPXExtensions] = None
        # text of a non standard <keywords> child of <gpx>
        self.keywords_text: Optional[str] = None
        # prefix -> uri of the xmlns:prefix declarations
        self.namespaces: Dict[str, str] = {}

    @property
    def schema(self) -> str:
        return self.SCHEMA

    @property
    def keywords(self) -> Optional[List[str]]:
        """Keywords of the document; the metadata keywords are the fallback."""
        keywords = split_keywords(self.keywords_text)
        if keywords is None and self.metadata is not None:
            keywords = split_keywords(self.metadata.keywords)
        return keywords

    # Waypoints

    def new_waypoint(self, latitude: float, longitude: float) -> GPXWaypoint:
        waypoint = GPXWaypoint(latitude, longitude)
        self.add_waypoint(waypoint)
        return waypoint

    def add_waypoint(self, waypoint: GPXWaypoint) -> None:
        self._add_to(self.waypoints, waypoint)

    def add_waypoints(self, waypoints: Sequence[GPXWaypoint]) -> None:
        for waypoint in waypoints:
            self.add_waypoint(waypoint)

    def remove_waypoint(self, waypoint: GPXWaypoint) -> None:
        self._remove_from(self.waypoints, waypoint)

    # Routes

    def new_route(self) -> GPXRoute:
        route = GPXRoute()
        self.add_route(route)
        return route

    def add_route(self, route: GPXRoute) -> None:
        self._add_to(self.routes, route)

    def add_routes(self, routes: Sequence[GPXRoute]) -> None:
        for route in routes:
            self.add_route(route)

    def remove_route(self, route: GPXRoute) -> None:
        self._remove_from(self.routes, route)

    # Tracks

    def new_track(self) -> GPXTrack:
        track = GPXTrack()
        self.add_track(track)
        return track

    def add_track(self, track: GPXTrack) -> None:
        self._add_to(self.tracks, track)

    def add_tracks(self, tracks: Sequence[GPXTrack]) -> None:
        for track in tracks:
            self.add_track(track)

    def remove_track(self, track: GPXTrack) -> None:
        self._remove_from(self.tracks, track)

    def _hydrate(self, node: XMLNode, diagnostics: Diagnostics) -> None:
        self.version = self._attribute(node, 'version', diagnostics, required=True) or self.version
        self.creator = self._attribute(node, 'creator', diagnostics, required=True) or self.creator
        self.namespaces = {
            name[len(NAMESPACE_PREFIX):]: value
            for name, value in node.attributes
            if name.startswith(NAMESPACE_PREFIX)
        }
        self.metadata = self._child_element(node, GPXMetadata, diagnostics)
        self.keywords_text = self._child_text(node, 'keywords', diagnostics)
        self.waypoints = self._child_elements(node, GPXWaypoint, diagnostics)
        self.routes = self._child_elements(node, GPXRoute, diagnostics)
        self.tracks = self._child_elements(node, GPXTrack, diagnostics)
        self.extensions = self._child_element(node, GPXExtensions, diagnostics)

    def _attributes(self) -> Sequence[Tuple[str, Optional[str]]]:
        attributes = [('xmlns', self.SCHEMA), ('version', self.version), ('creator', self.creator)]
        attributes.extend((NAMESPACE_PREFIX + prefix, uri) for prefix, uri in self.namespaces.items())
        return attributes

    def _add_open_tag(self, buffer: List[str], level: int) -> None:
        buffer.append(XML_DECLARATION + LINE_ENDING)
        super()._add_open_tag(buffer, level)

    def _add_child_tags(self, buffer: List[str], level: int) -> None:
        if self.metadata is not None:
            self.metadata.write_to(buffer, level)
        for waypoint in self.waypoints:
            waypoint.write_to(buffer, level)
        for route in self.routes:
            route.write_to(buffer, level)
        for track in self.tracks:
            track.write_to(buffer, level)
        if self.extensions is not None:
            self.extensions.write_to(buffer, level)

    def __repr__(self) -> str:
        return (f"GPXRoot(creator={self.creator!r}, waypoints={len(self.waypoints)}, "
                f"routes={len(self.routes)}, tracks={len(self.tracks)})")
