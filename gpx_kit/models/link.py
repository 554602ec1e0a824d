from typing import List, Optional, Sequence, Tuple

from ..diagnostics import Diagnostics
from ..parsers.xml_node import XMLNode
from ..utils.formatting import add_property
from .element import GPXElement


class GPXLink(GPXElement):
    """
    A link to an external resource (web page, digital photo, video clip,
    etc) with additional information.
    """

    TAG_NAME = 'link'

    def __init__(self, href: Optional[str] = None, text: Optional[str] = None,
                 mimetype: Optional[str] = None):
        super().__init__()
        self.href = href
        self.text = text
        self.mimetype = mimetype

    def _hydrate(self, node: XMLNode, diagnostics: Diagnostics) -> None:
        self.href = self._attribute(node, 'href', diagnostics, required=True)
        self.text = self._child_text(node, 'text', diagnostics)
        self.mimetype = self._child_text(node, 'type', diagnostics)

    def _attributes(self) -> Sequence[Tuple[str, Optional[str]]]:
        return (('href', self.href),)

    def _add_child_tags(self, buffer: List[str], level: int) -> None:
        add_property(buffer, self.text, 'text', level)
        add_property(buffer, self.mimetype, 'type', level)

    def __repr__(self) -> str:
        return f"GPXLink(href={self.href!r})"
