"""Generic, untyped XML tree produced by the tree builders."""

from typing import Iterator, List, Optional, Tuple


class XMLNode:
    """
    A single element of the generic XML tree.

    Attributes are kept in document order as (name, value) pairs. A node
    with children never carries text; builders clear it once the first
    child is attached.
    """

    def __init__(self, name: str, parent: Optional['XMLNode'] = None):
        self.name = name
        self.text: Optional[str] = None
        self.attributes: List[Tuple[str, str]] = []
        self.children: List['XMLNode'] = []
        self.parent: Optional['XMLNode'] = None
        if parent is not None:
            parent.append_child(self)

    def append_child(self, child: 'XMLNode') -> None:
        """Attach child as the last child of this node."""
        child.parent = self
        self.children.append(child)
        self.text = None

    def add_attribute(self, name: str, value: str) -> None:
        self.attributes.append((name, value))

    def value_of_attribute(self, name: str) -> Optional[str]:
        """Return the value of the first attribute called name."""
        for attribute_name, value in self.attributes:
            if attribute_name == name:
                return value
        return None

    def child_named(self, name: str) -> Optional['XMLNode']:
        """Return the first child element called name."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    def children_named(self, name: str) -> List['XMLNode']:
        return [child for child in self.children if child.name == name]

    def next_sibling_named(self, name: str) -> Optional['XMLNode']:
        """Return the first later sibling called name."""
        if self.parent is None:
            return None
        siblings = self.parent.children
        index = next(i for i, sibling in enumerate(siblings) if sibling is self)
        for sibling in siblings[index + 1:]:
            if sibling.name == name:
                return sibling
        return None

    def iter(self) -> Iterator['XMLNode']:
        """Iterate over this node and all descendants in document order."""
        yield self
        for child in self.children:
            yield from child.iter()

    def __repr__(self) -> str:
        return f"XMLNode({self.name!r}, attributes={len(self.attributes)}, children={len(self.children)})"
