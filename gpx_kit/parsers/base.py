import re
from abc import ABC, abstractmethod
from typing import List, Optional

from ..diagnostics import MalformedDocumentError
from .xml_node import XMLNode

_ENTITY_PATTERN = re.compile(r'&(amp|lt|gt|quot|apos|#[0-9]+|#x[0-9a-fA-F]+);')
_NAMED_ENTITIES = {'amp': '&', 'lt': '<', 'gt': '>', 'quot': '"', 'apos': "'"}

# highest code point and the surrogate block, which no reference may name
MAX_CODE_POINT = 0x10FFFF
SURROGATES = range(0xD800, 0xE000)


def decode_entities(value: str, offset: Optional[int] = None) -> str:
    """
    Replace predefined XML entities and character references.

    Args:
        value: Text or attribute value outside any CDATA section
        offset: Position of value in the document, used in errors

    Raises:
        MalformedDocumentError: If a character reference names no character
    """
    if '&' not in value:
        return value

    def replace(match: 're.Match[str]') -> str:
        entity = match.group(1)
        if not entity.startswith('#'):
            return _NAMED_ENTITIES[entity]
        hexadecimal = entity.startswith('#x')
        digits = entity[2:] if hexadecimal else entity[1:]
        # more significant digits than this is beyond MAX_CODE_POINT in either base
        code = int(digits, 16 if hexadecimal else 10) if len(digits.lstrip('0')) <= 7 else None
        if code is None or code == 0 or code > MAX_CODE_POINT or code in SURROGATES:
            position = offset + match.start() if offset is not None else None
            raise MalformedDocumentError(f"Invalid character reference &{entity};", offset=position)
        return chr(code)

    return _ENTITY_PATTERN.sub(replace, value)


class TreeBuilder(ABC):
    """Base interface for builders turning GPX text into a generic XML tree."""

    @abstractmethod
    def build(self, text: str) -> XMLNode:
        """
        Build the generic XML tree for a fully decoded document.

        Args:
            text: Complete document text

        Returns:
            The root XMLNode of the document

        Raises:
            MalformedDocumentError: If no root element can be built
        """
        pass

    @abstractmethod
    def get_names(self) -> List[str]:
        """
        Get the names this builder is registered under.

        Returns:
            List of builder names (e.g., ['scanner'])
        """
        pass
