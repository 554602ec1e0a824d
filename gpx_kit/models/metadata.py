from datetime import datetime
from typing import List, Optional

from ..diagnostics import Diagnostics
from ..parsers.xml_node import XMLNode
from ..utils.formatting import add_property
from ..utils.gpx_types import format_datetime, parse_datetime
from .bounds import GPXBounds
from .copyright import GPXCopyright
from .element import GPXElement
from .extensions import GPXExtensions
from .link import GPXLink
from .person import GPXAuthor

# time value that is never written out
UNSET_TIME = '0'


class GPXMetadata(GPXElement):
    """Information about the document: name, author, copyright, extent."""

    TAG_NAME = 'metadata'

    def __init__(self, name: Optional[str] = None, desc: Optional[str] = None):
        super().__init__()
        self.name = name
        self.desc = desc
        self.author: Optional[GPXAuthor] = None
        self.copyright: Optional[GPXCopyright] = None
        self.link: Optional[GPXLink] = None
        self.time_value = ''
        self.keywords: Optional[str] = None
        self.bounds: Optional[GPXBounds] = None
        self.extensions: Optional[GPXExtensions] = None

    @property
    def time(self) -> Optional[datetime]:
        return parse_datetime(self.time_value)

    @time.setter
    def time(self, value: Optional[datetime]) -> None:
        self.time_value = format_datetime(value) if value is not None else ''

    def _hydrate(self, node: XMLNode, diagnostics: Diagnostics) -> None:
        self.name = self._child_text(node, 'name', diagnostics)
        self.desc = self._child_text(node, 'desc', diagnostics)
        self.author = self._child_element(node, GPXAuthor, diagnostics)
        self.copyright = self._child_element(node, GPXCopyright, diagnostics)
        self.link = self._child_element(node, GPXLink, diagnostics)
        self.time_value = self._child_text(node, 'time', diagnostics) or ''
        self.keywords = self._child_text(node, 'keywords', diagnostics)
        self.bounds = self._child_element(node, GPXBounds, diagnostics)
        self.extensions = self._child_element(node, GPXExtensions, diagnostics)

    def _add_child_tags(self, buffer: List[str], level: int) -> None:
        add_property(buffer, self.name, 'name', level)
        add_property(buffer, self.desc, 'desc', level)
        for child in (self.author, self.copyright, self.link):
            if child is not None:
                child.write_to(buffer, level)
        add_property(buffer, self.time_value, 'time', level, default=UNSET_TIME)
        add_property(buffer, self.keywords, 'keywords', level)
        for child in (self.bounds, self.extensions):
            if child is not None:
                child.write_to(buffer, level)
