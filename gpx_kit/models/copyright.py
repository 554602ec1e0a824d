from datetime import datetime
from typing import List, Optional, Sequence, Tuple

from ..diagnostics import Diagnostics
from ..parsers.xml_node import XMLNode
from ..utils.formatting import add_property
from ..utils.gpx_types import format_datetime, parse_datetime
from .element import GPXElement


class GPXCopyright(GPXElement):
    """Copyright holder and license of a document."""

    TAG_NAME = 'copyright'

    def __init__(self, author: Optional[str] = None, year: Optional[datetime] = None,
                 license: Optional[str] = None):
        super().__init__()
        self.author = author
        self.year = year
        self.license = license

    @classmethod
    def with_author(cls, author: str) -> 'GPXCopyright':
        return cls(author)

    def _hydrate(self, node: XMLNode, diagnostics: Diagnostics) -> None:
        self.author = self._attribute(node, 'author', diagnostics, required=True)
        year_text = self._child_text(node, 'year', diagnostics)
        self.year = parse_datetime(year_text)
        self._number_warning(diagnostics, 'year', year_text, self.year)
        self.license = self._child_text(node, 'license', diagnostics)

    def _attributes(self) -> Sequence[Tuple[str, Optional[str]]]:
        return (('author', self.author),)

    def _add_child_tags(self, buffer: List[str], level: int) -> None:
        year = format_datetime(self.year) if self.year is not None else None
        add_property(buffer, year, 'year', level)
        add_property(buffer, self.license, 'license', level)
