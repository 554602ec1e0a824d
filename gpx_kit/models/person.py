from typing import List, Optional

from ..diagnostics import Diagnostics
from ..parsers.xml_node import XMLNode
from ..utils.formatting import add_property
from .element import GPXElement
from .email import GPXEmail
from .link import GPXLink


class GPXPerson(GPXElement):
    """A person or organization."""

    TAG_NAME = 'person'

    def __init__(self, name: Optional[str] = None, email: Optional[GPXEmail] = None,
                 link: Optional[GPXLink] = None):
        super().__init__()
        self.name = name
        self.email = email
        self.link = link
        for child in (email, link):
            if child is not None:
                child.parent = self

    def _hydrate(self, node: XMLNode, diagnostics: Diagnostics) -> None:
        self.name = self._child_text(node, 'name', diagnostics)
        self.email = self._child_element(node, GPXEmail, diagnostics)
        self.link = self._child_element(node, GPXLink, diagnostics)

    def _add_child_tags(self, buffer: List[str], level: int) -> None:
        add_property(buffer, self.name, 'name', level)
        if self.email is not None:
            self.email.write_to(buffer, level)
        if self.link is not None:
            self.link.write_to(buffer, level)


class GPXAuthor(GPXPerson):
    """The person or organization who created a document."""

    TAG_NAME = 'author'
