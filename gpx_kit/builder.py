"""
Fluent builder turning recorded positions into a GPX document.

Positions are stored as a single route, a single one-segment track or a
list of waypoints, depending on the saving preference.
"""

import logging
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from .models.location import LocationRecord
from .models.root import GPXRoot
from .models.route import GPXRoute
from .models.track import GPXTrack, GPXTrackSegment
from .models.waypoint import GPXRoutePoint, GPXTrackPoint, GPXWaypoint

logger = logging.getLogger(__name__)


class SavingPreference(Enum):
    """Kind of element positions are stored as."""
    ROUTE = 'route'
    TRACKS = 'tracks'
    WAYPOINTS = 'waypoints'


class DocumentBuilder:
    """
    Build GPX documents from location records or coordinates.

    Examples:
        >>> text = DocumentBuilder(creator="my-logger") \\
        ...     .with_coordinates([(42.39, -71.08), (42.40, -71.09)]) \\
        ...     .export()

        Starting from an existing document:
        >>> builder = DocumentBuilder(root=result.root, saving_preference=SavingPreference.WAYPOINTS)
        >>> builder.with_locations(records).build()
    """

    def __init__(self, creator: Optional[str] = None,
                 saving_preference: SavingPreference = SavingPreference.TRACKS,
                 root: Optional[GPXRoot] = None):
        """
        Initialize document builder.

        Args:
            creator: Creator written in the document (ignored when root is given)
            saving_preference: How positions are stored
            root: Existing document to add to
        """
        self.root = root if root is not None else GPXRoot(creator)
        self.saving_preference = saving_preference

    def with_locations(self, locations: Sequence[LocationRecord]) -> 'DocumentBuilder':
        """Store location records, keeping their altitude and timestamp."""
        self._store(len(locations), lambda point_class: [point_class.from_location(loc) for loc in locations])
        return self

    def with_coordinates(self, coordinates: Sequence[Tuple[float, float]]) -> 'DocumentBuilder':
        """Store bare (latitude, longitude) pairs."""
        self._store(len(coordinates), lambda point_class: [point_class(lat, lon) for lat, lon in coordinates])
        return self

    def _store(self, count: int, make_points: Callable[[type], List[GPXWaypoint]]) -> None:
        if count == 0:
            logger.debug("No positions to store")
            return

        if self.saving_preference is SavingPreference.ROUTE:
            route = GPXRoute()
            route.add_route_points(make_points(GPXRoutePoint))
            self.root.add_route(route)
        elif self.saving_preference is SavingPreference.WAYPOINTS:
            self.root.add_waypoints(make_points(GPXWaypoint))
        else:
            segment = GPXTrackSegment()
            segment.add_track_points(make_points(GPXTrackPoint))
            track = GPXTrack()
            track.add_track_segment(segment)
            self.root.add_track(track)
        logger.debug(f"Stored {count} positions as {self.saving_preference.value}")

    def build(self) -> GPXRoot:
        return self.root

    def export(self) -> str:
        """GPX text of the document built so far."""
        return self.root.gpx()
