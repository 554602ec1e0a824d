from typing import Optional, Sequence, Tuple

from ..diagnostics import Diagnostics
from ..parsers.xml_node import XMLNode
from .element import GPXElement


class GPXEmail(GPXElement):
    """An email address, broken into id and domain to hinder harvesting."""

    TAG_NAME = 'email'

    def __init__(self, email_id: Optional[str] = None, domain: Optional[str] = None):
        super().__init__()
        self.email_id = email_id
        self.domain = domain

    @classmethod
    def with_id(cls, email_id: str, domain: str) -> 'GPXEmail':
        return cls(email_id, domain)

    @property
    def address(self) -> Optional[str]:
        """Full address, or None while either half is missing."""
        if self.email_id is None or self.domain is None:
            return None
        return f"{self.email_id}@{self.domain}"

    def _hydrate(self, node: XMLNode, diagnostics: Diagnostics) -> None:
        self.email_id = self._attribute(node, 'id', diagnostics, required=True)
        self.domain = self._attribute(node, 'domain', diagnostics, required=True)

    def _attributes(self) -> Sequence[Tuple[str, Optional[str]]]:
        return (('id', self.email_id), ('domain', self.domain))

    def __repr__(self) -> str:
        return f"GPXEmail({self.address!r})"
