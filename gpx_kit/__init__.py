"""
gpx_kit - parse, build and write GPX 1.1 documents.
"""

from .diagnostics import Diagnostics, FormatWarning, MalformedDocumentError
from .document import GPXParser, ParseResult, parse, to_gpx, write_file
from .builder import DocumentBuilder, SavingPreference
from .models import (
    GPXElement,
    GPXRoot,
    GPXMetadata,
    GPXWaypoint,
    GPXRoutePoint,
    GPXTrackPoint,
    GPXRoute,
    GPXTrack,
    GPXTrackSegment,
    GPXPoint,
    GPXPointSegment,
    GPXLink,
    GPXPerson,
    GPXAuthor,
    GPXEmail,
    GPXCopyright,
    GPXBounds,
    GPXExtensions,
    GarminTrackPointExtensions,
    TrailsTrackExtensions,
    TrailsTrackPointExtensions,
    LocationRecord,
)
from .utils.gpx_types import Fix

__version__ = '0.1.0'

__all__ = [
    'Diagnostics',
    'FormatWarning',
    'MalformedDocumentError',
    'GPXParser',
    'ParseResult',
    'parse',
    'to_gpx',
    'write_file',
    'DocumentBuilder',
    'SavingPreference',
    'GPXElement',
    'GPXRoot',
    'GPXMetadata',
    'GPXWaypoint',
    'GPXRoutePoint',
    'GPXTrackPoint',
    'GPXRoute',
    'GPXTrack',
    'GPXTrackSegment',
    'GPXPoint',
    'GPXPointSegment',
    'GPXLink',
    'GPXPerson',
    'GPXAuthor',
    'GPXEmail',
    'GPXCopyright',
    'GPXBounds',
    'GPXExtensions',
    'GarminTrackPointExtensions',
    'TrailsTrackExtensions',
    'TrailsTrackPointExtensions',
    'LocationRecord',
    'Fix',
]
