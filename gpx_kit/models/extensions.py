"""
Extensions container and the vendor extensions it understands.

Vendor elements keep the raw text of their children and expose typed
properties over it, so values are written back exactly as read.
"""

from typing import ClassVar, List, Optional, Tuple

from ..diagnostics import Diagnostics
from ..parsers.xml_node import XMLNode
from ..utils.formatting import add_property
from ..utils.gpx_types import (
    format_decimal, format_non_negative_integer, parse_decimal, parse_non_negative_integer,
)
from .element import CodedValue, GPXElement


class VendorExtension(GPXElement):
    """Vendor element made of single-value child elements."""

    # (attribute holding the raw text, child tag) in output order
    PROPERTIES: ClassVar[Tuple[Tuple[str, str], ...]] = ()

    def __init__(self):
        super().__init__()
        for attribute, _ in self.PROPERTIES:
            setattr(self, attribute, None)

    def _hydrate(self, node: XMLNode, diagnostics: Diagnostics) -> None:
        for attribute, tag in self.PROPERTIES:
            setattr(self, attribute, self._child_text(node, tag, diagnostics))

    def _add_child_tags(self, buffer: List[str], level: int) -> None:
        for attribute, tag in self.PROPERTIES:
            add_property(buffer, getattr(self, attribute), tag, level)


class GarminTrackPointExtensions(VendorExtension):
    """Garmin TrackPointExtension v2 (heart rate, cadence, speed, course)."""

    TAG_NAME = 'gpxtpx:TrackPointExtension'
    PROPERTIES = (
        ('heart_rate_value', 'gpxtpx:hr'),
        ('cadence_value', 'gpxtpx:cad'),
        ('speed_value', 'gpxtpx:speed'),
        ('course_value', 'gpxtpx:course'),
    )

    heart_rate = CodedValue('heart_rate_value', parse_non_negative_integer, format_non_negative_integer)
    cadence = CodedValue('cadence_value', parse_non_negative_integer, format_non_negative_integer)
    speed = CodedValue('speed_value', parse_decimal, format_decimal)
    course = CodedValue('course_value', parse_decimal, format_decimal)


class TrailsTrackExtensions(VendorExtension):
    """trails.io track extension carrying the activity type."""

    TAG_NAME = 'trailsio:TrackExtension'
    PROPERTIES = (('activity', 'trailsio:activity'),)


class TrailsTrackPointExtensions(VendorExtension):
    """trails.io track point extension (accuracies and step count)."""

    TAG_NAME = 'trailsio:TrackPointExtension'
    PROPERTIES = (
        ('horizontal_accuracy_value', 'trailsio:hacc'),
        ('vertical_accuracy_value', 'trailsio:vacc'),
        ('steps_value', 'trailsio:steps'),
    )

    horizontal_accuracy = CodedValue('horizontal_accuracy_value', parse_decimal, format_decimal)
    vertical_accuracy = CodedValue('vertical_accuracy_value', parse_decimal, format_decimal)
    steps = CodedValue('steps_value', parse_non_negative_integer, format_non_negative_integer)


class GPXExtensions(GPXElement):
    """Container for vendor specific elements."""

    TAG_NAME = 'extensions'

    def __init__(self):
        super().__init__()
        self.garmin: Optional[GarminTrackPointExtensions] = None
        self.trails_track: Optional[TrailsTrackExtensions] = None
        self.trails_track_point: Optional[TrailsTrackPointExtensions] = None

    def _hydrate(self, node: XMLNode, diagnostics: Diagnostics) -> None:
        self.garmin = self._child_element(node, GarminTrackPointExtensions, diagnostics)
        self.trails_track = self._child_element(node, TrailsTrackExtensions, diagnostics)
        self.trails_track_point = self._child_element(node, TrailsTrackPointExtensions, diagnostics)

    def _add_child_tags(self, buffer: List[str], level: int) -> None:
        for extension in (self.garmin, self.trails_track, self.trails_track_point):
            if extension is not None:
                extension.write_to(buffer, level)
