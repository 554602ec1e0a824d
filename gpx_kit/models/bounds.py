from typing import Optional, Sequence, Tuple

from ..diagnostics import Diagnostics
from ..parsers.xml_node import XMLNode
from ..utils.gpx_types import format_latitude, format_longitude, parse_latitude, parse_longitude
from .element import GPXElement


class GPXBounds(GPXElement):
    """Two lat/lon pairs defining the extent of an element."""

    TAG_NAME = 'bounds'

    def __init__(self, min_latitude: Optional[float] = None, min_longitude: Optional[float] = None,
                 max_latitude: Optional[float] = None, max_longitude: Optional[float] = None):
        super().__init__()
        self.min_latitude = min_latitude
        self.min_longitude = min_longitude
        self.max_latitude = max_latitude
        self.max_longitude = max_longitude

    def _hydrate(self, node: XMLNode, diagnostics: Diagnostics) -> None:
        for field_name, attribute, parse in (
            ('min_latitude', 'minlat', parse_latitude),
            ('min_longitude', 'minlon', parse_longitude),
            ('max_latitude', 'maxlat', parse_latitude),
            ('max_longitude', 'maxlon', parse_longitude),
        ):
            text = self._attribute(node, attribute, diagnostics, required=True)
            value = parse(text)
            self._number_warning(diagnostics, attribute, text, value)
            setattr(self, field_name, value)

    def _attributes(self) -> Sequence[Tuple[str, Optional[str]]]:
        def latitude(value):
            return format_latitude(value) if value is not None else None

        def longitude(value):
            return format_longitude(value) if value is not None else None

        return (
            ('minlat', latitude(self.min_latitude)),
            ('minlon', longitude(self.min_longitude)),
            ('maxlat', latitude(self.max_latitude)),
            ('maxlon', longitude(self.max_longitude)),
        )
