"""
Base class of every typed GPX element.

An element knows its tag name, how to read itself from a generic XMLNode
and how to write itself back as GPX text. Hydration never stops on
schema problems: missing required values and duplicated single children
are reported to a Diagnostics collector and the field is left empty.
"""

import logging
import weakref
from abc import ABC
from typing import Any, Callable, ClassVar, List, Optional, Sequence, Tuple, Type, TypeVar

from ..diagnostics import Diagnostics
from ..parsers.xml_node import XMLNode
from ..utils.formatting import add_close_tag, add_open_tag, format_attributes

logger = logging.getLogger(__name__)

E = TypeVar('E', bound='GPXElement')


class GPXElement(ABC):
    """
    Common behaviour of typed GPX elements.

    Subclasses set TAG_NAME and override _hydrate, _attributes and
    _add_child_tags as needed. The parent link is weak: it only serves to
    detach an element when it is removed from its container.
    """

    TAG_NAME: ClassVar[str] = ''

    def __init__(self):
        self._parent_ref: Optional[weakref.ref] = None

    @property
    def parent(self) -> Optional['GPXElement']:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @parent.setter
    def parent(self, value: Optional['GPXElement']) -> None:
        self._parent_ref = weakref.ref(value) if value is not None else None

    @classmethod
    def from_node(cls: Type[E], node: XMLNode, parent: Optional['GPXElement'] = None,
                  diagnostics: Optional[Diagnostics] = None) -> E:
        """
        Create an element from a generic XML node.

        Args:
            node: Node whose name matches TAG_NAME
            parent: Owning element, if any
            diagnostics: Collector for format warnings (a fresh one is used if omitted)

        Returns:
            The hydrated element
        """
        element = cls()
        element.parent = parent
        element._hydrate(node, diagnostics if diagnostics is not None else Diagnostics())
        return element

    def _hydrate(self, node: XMLNode, diagnostics: Diagnostics) -> None:
        """Read fields from node. Elements without content keep the default."""
        pass

    # Hydration helpers

    def _attribute(self, node: XMLNode, name: str, diagnostics: Diagnostics,
                   required: bool = False) -> Optional[str]:
        value = node.value_of_attribute(name)
        if value is None and required:
            diagnostics.add_warning(self.TAG_NAME, f"{self.TAG_NAME} element requires {name} attribute.")
        return value

    def _child_text(self, node: XMLNode, name: str, diagnostics: Diagnostics,
                    required: bool = False) -> Optional[str]:
        """
        Get the text of the first child called name.

        Args:
            node: Node to search
            name: Child element name
            diagnostics: Collector for format warnings
            required: Warn when the child is missing

        Returns:
            The child text, or None when the child is missing or empty
        """
        child = node.child_named(name)
        if child is None:
            if required:
                diagnostics.add_warning(self.TAG_NAME, f"{self.TAG_NAME} element requires {name} element.")
            return None
        if child.text is None:
            return None
        return child.text

    def _child_element(self, node: XMLNode, element_class: Type[E], diagnostics: Diagnostics,
                       required: bool = False) -> Optional[E]:
        """
        Hydrate the single child of a given element class.

        Only the first matching child is used; further ones are reported.
        """
        tag = element_class.TAG_NAME
        child = node.child_named(tag)
        if child is None:
            if required:
                diagnostics.add_warning(self.TAG_NAME, f"{self.TAG_NAME} element requires {tag} element.")
            return None
        if child.next_sibling_named(tag) is not None:
            diagnostics.add_warning(self.TAG_NAME, f"{self.TAG_NAME} element has more than one {tag} element.")
        return element_class.from_node(child, self, diagnostics)

    def _child_elements(self, node: XMLNode, element_class: Type[E], diagnostics: Diagnostics) -> List[E]:
        return [
            element_class.from_node(child, self, diagnostics)
            for child in node.children_named(element_class.TAG_NAME)
        ]

    def _number_warning(self, diagnostics: Diagnostics, name: str, text: Optional[str],
                        value: object) -> None:
        """Report text that is present but could not be read as a number."""
        if text is not None and value is None:
            diagnostics.add_warning(self.TAG_NAME, f"{self.TAG_NAME} element has an invalid {name} value.", text)

    # Collections

    def _add_to(self, collection: List[E], element: E) -> None:
        """Append element unless this very instance is already present."""
        if any(existing is element for existing in collection):
            return
        element.parent = self
        collection.append(element)

    def _remove_from(self, collection: List[E], element: E) -> None:
        """Remove one occurrence of this very instance and detach it."""
        for index, existing in enumerate(collection):
            if existing is element:
                del collection[index]
                element.parent = None
                return
        logger.debug(f"{element.TAG_NAME} element is not a child of {self.TAG_NAME}")

    # Serialization

    def gpx(self) -> str:
        """Serialize this element, and everything below it, as GPX text."""
        buffer: List[str] = []
        self.write_to(buffer, 0)
        return ''.join(buffer)

    def write_to(self, buffer: List[str], level: int) -> None:
        """
        Append this element to an output buffer.

        Args:
            buffer: Output fragments, joined by the caller
            level: Indentation level of the open and close tags
        """
        self._add_open_tag(buffer, level)
        self._add_child_tags(buffer, level + 1)
        self._add_close_tag(buffer, level)

    def _attributes(self) -> Sequence[Tuple[str, Optional[str]]]:
        """Attributes of the open tag in output order."""
        return ()

    def _add_open_tag(self, buffer: List[str], level: int) -> None:
        add_open_tag(buffer, self.TAG_NAME, level, format_attributes(self._attributes()))

    def _add_child_tags(self, buffer: List[str], level: int) -> None:
        pass

    def _add_close_tag(self, buffer: List[str], level: int) -> None:
        add_close_tag(buffer, self.TAG_NAME, level)


class CodedValue:
    """
    Typed view over a raw text field of an element.

    The raw text is kept for output; reading converts it with parse and
    assigning converts with format. Assigning None clears the field.

    Example:
        elevation = CodedValue('elevation_value', parse_decimal, format_decimal)
    """

    def __init__(self, raw_name: str, parse: Callable[[str], Any], format: Callable[[Any], str]):
        self.raw_name = raw_name
        self.parse = parse
        self.format = format

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        raw = getattr(instance, self.raw_name)
        return self.parse(raw) if raw is not None else None

    def __set__(self, instance, value) -> None:
        setattr(instance, self.raw_name, self.format(value) if value is not None else None)
