from typing import List, Optional, Sequence

from ..diagnostics import Diagnostics
from ..parsers.xml_node import XMLNode
from ..utils.formatting import add_property
from ..utils.gpx_types import format_non_negative_integer, parse_non_negative_integer
from .element import CodedValue, GPXElement
from .extensions import GPXExtensions
from .link import GPXLink


class GPXPathElement(GPXElement):
    """
    Descriptive fields shared by routes and tracks.

    Children are written as name, cmt, desc, src, links, number, type and
    extensions; subclasses append their points after them.
    """

    number = CodedValue('number_value', parse_non_negative_integer, format_non_negative_integer)

    def __init__(self):
        super().__init__()
        self.name: Optional[str] = None
        self.comment: Optional[str] = None
        self.desc: Optional[str] = None
        self.source: Optional[str] = None
        self.links: List[GPXLink] = []
        self.number_value: Optional[str] = None
        self.type: Optional[str] = None
        self.extensions: Optional[GPXExtensions] = None

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
        self.name = self._child_text(node, 'name', diagnostics)
        self.comment = self._child_text(node, 'cmt', diagnostics)
        self.desc = self._child_text(node, 'desc', diagnostics)
        self.source = self._child_text(node, 'src', diagnostics)
        self.links = self._child_elements(node, GPXLink, diagnostics)
        self.number_value = self._child_text(node, 'number', diagnostics)
        self.type = self._child_text(node, 'type', diagnostics)
        self.extensions = self._child_element(node, GPXExtensions, diagnostics)

    def _add_child_tags(self, buffer: List[str], level: int) -> None:
        add_property(buffer, self.name, 'name', level)
        add_property(buffer, self.comment, 'cmt', level)
        add_property(buffer, self.desc, 'desc', level)
        add_property(buffer, self.source, 'src', level)
        for link in self.links:
            link.write_to(buffer, level)
        add_property(buffer, self.number_value, 'number', level)
        add_property(buffer, self.type, 'type', level)
        if self.extensions is not None:
            self.extensions.write_to(buffer, level)
