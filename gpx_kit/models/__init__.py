from .element import GPXElement, CodedValue
from .location import LocationRecord, locations_from_points
from .link import GPXLink
from .email import GPXEmail
from .copyright import GPXCopyright
from .person import GPXPerson, GPXAuthor
from .bounds import GPXBounds
from .extensions import (
    GPXExtensions,
    VendorExtension,
    GarminTrackPointExtensions,
    TrailsTrackExtensions,
    TrailsTrackPointExtensions,
)
from .waypoint import GPXWaypoint, GPXRoutePoint, GPXTrackPoint
from .point import GPXPoint, GPXPointSegment
from .path import GPXPathElement
from .route import GPXRoute
from .track import GPXTrack, GPXTrackSegment
from .metadata import GPXMetadata
from .root import GPXRoot

__all__ = [
    'GPXElement',
    'CodedValue',
    'LocationRecord',
    'locations_from_points',
    'GPXLink',
    'GPXEmail',
    'GPXCopyright',
    'GPXPerson',
    'GPXAuthor',
    'GPXBounds',
    'GPXExtensions',
    'VendorExtension',
    'GarminTrackPointExtensions',
    'TrailsTrackExtensions',
    'TrailsTrackPointExtensions',
    'GPXWaypoint',
    'GPXRoutePoint',
    'GPXTrackPoint',
    'GPXPoint',
    'GPXPointSegment',
    'GPXPathElement',
    'GPXRoute',
    'GPXTrack',
    'GPXTrackSegment',
    'GPXMetadata',
    'GPXRoot',
]
