"""
Single pass scanner building the generic XML tree from a text buffer.

The scanner walks the decoded document once, from left to right. Each
'<' starts a lexical unit: a comment, a CDATA run, a closing tag, a
processing instruction or declaration, or an opening tag. Only elements,
attributes and text end up in the tree.

Example:
    root = BufferScanner().build('<gpx version="1.1"><wpt lat="1" lon="2"/></gpx>')
    assert root.children[0].value_of_attribute('lat') == '1'
"""

import logging
from enum import Enum
from typing import List, Optional, Tuple

from ..diagnostics import MalformedDocumentError
from ..utils.formatting import unescape_cdata
from .base import TreeBuilder, decode_entities
from .xml_node import XMLNode

logger = logging.getLogger(__name__)

COMMENT_START = '<!--'
COMMENT_END = '-->'
CDATA_START = '<![CDATA['
CDATA_END = ']]>'


class AttributeState(Enum):
    """States of the attribute scanner inside an opening tag."""
    SEEKING_NAME = 'seeking_name'
    IN_NAME = 'in_name'
    SEEKING_VALUE = 'seeking_value'
    IN_VALUE = 'in_value'
    IN_VALUE_CDATA = 'in_value_cdata'


class BufferScanner(TreeBuilder):
    """Hand written tree builder working on the whole document text."""

    def get_names(self) -> List[str]:
        return ['scanner']

    def build(self, text: str) -> XMLNode:
        root: Optional[XMLNode] = None
        parent: Optional[XMLNode] = None
        # text runs seen since the current parent was opened
        pending: List[str] = []
        length = len(text)
        k = 0

        while k < length:
            start = text.find('<', k)
            if start == -1:
                if parent is not None:
                    pending.append(decode_entities(text[k:], k))
                break
            if parent is not None and start > k:
                pending.append(decode_entities(text[k:start], k))

            if text.startswith(COMMENT_START, start):
                end = text.find(COMMENT_END, start + len(COMMENT_START))
                if end == -1:
                    raise MalformedDocumentError("Unterminated comment", offset=start)
                k = end + len(COMMENT_END)
                continue

            if text.startswith(CDATA_START, start):
                content_start = start + len(CDATA_START)
                end = text.find(CDATA_END, content_start)
                if end == -1:
                    raise MalformedDocumentError("Unterminated CDATA section", offset=start)
                if parent is not None:
                    pending.append(unescape_cdata(text[content_start:end]))
                k = end + len(CDATA_END)
                continue

            if text.startswith('</', start):
                end = text.find('>', start + 2)
                if end == -1:
                    raise MalformedDocumentError("Closing tag has no end", offset=start)
                if parent is None:
                    logger.debug(f"Ignoring stray closing tag {text[start:end + 1]} at offset {start}")
                else:
                    self._finish_element(parent, pending)
                    parent = parent.parent
                    pending = []
                k = end + 1
                continue

            if text.startswith('<?', start) or text.startswith('<!', start):
                k = self._find_markup_end(text, start) + 1
                continue

            node, end, self_closing = self._scan_tag(text, start)
            if parent is not None:
                parent.append_child(node)
            elif root is None:
                root = node
            else:
                logger.debug(f"Ignoring extra top-level element {node.name} at offset {start}")
            if not self_closing:
                parent = node
                pending = []
            k = end + 1

        if parent is not None:
            logger.debug(f"Element {parent.name} is not closed at end of document")
            while parent is not None:
                self._finish_element(parent, pending)
                pending = []
                parent = parent.parent

        if root is None:
            raise MalformedDocumentError("No root element found", offset=length)
        return root

    @staticmethod
    def _finish_element(node: XMLNode, pending: List[str]) -> None:
        """Set the text of a closed element; elements with children keep none."""
        if node.children:
            node.text = None
        else:
            node.text = ''.join(pending).strip() or None

    @staticmethod
    def _find_markup_end(text: str, start: int) -> int:
        """Find the '>' ending a declaration, skipping CDATA runs."""
        position = start + 2
        while True:
            end = text.find('>', position)
            if end == -1:
                raise MalformedDocumentError("Declaration has no end", offset=start)
            cdata = text.find(CDATA_START, position, end)
            if cdata == -1:
                return end
            cdata_end = text.find(CDATA_END, cdata + len(CDATA_START))
            if cdata_end == -1:
                raise MalformedDocumentError("Unterminated CDATA section", offset=cdata)
            position = cdata_end + len(CDATA_END)

    def _scan_tag(self, text: str, start: int) -> Tuple[XMLNode, int, bool]:
        """
        Scan an opening or self-closing tag.

        Args:
            text: Document text
            start: Offset of the '<' opening the tag

        Returns:
            Tuple of (new node, offset of the closing '>', self-closing flag)
        """
        length = len(text)
        i = start + 1
        while i < length and not text[i].isspace() and text[i] not in '/><':
            i += 1
        name = text[start + 1:i]
        if not name:
            raise MalformedDocumentError("Element without a name", offset=start)
        node = XMLNode(name)

        state = AttributeState.SEEKING_NAME
        name_start = i
        attribute_name = ''
        quote = ''
        segment_start = i
        value_parts: List[str] = []

        while i < length:
            chr_ = text[i]

            if state is AttributeState.IN_VALUE_CDATA:
                if text.startswith(CDATA_END, i):
                    value_parts.append(text[segment_start:i])
                    i += len(CDATA_END)
                    segment_start = i
                    state = AttributeState.IN_VALUE
                    continue
                i += 1
                continue

            if state is AttributeState.IN_VALUE:
                if text.startswith(CDATA_START, i):
                    value_parts.append(decode_entities(text[segment_start:i], segment_start))
                    i += len(CDATA_START)
                    segment_start = i
                    state = AttributeState.IN_VALUE_CDATA
                    continue
                if chr_ == quote:
                    value_parts.append(decode_entities(text[segment_start:i], segment_start))
                    node.add_attribute(attribute_name, ''.join(value_parts))
                    value_parts = []
                    state = AttributeState.SEEKING_NAME
                i += 1
                continue

            # outside of attribute values
            if chr_ == '>':
                return node, i, text[i - 1] == '/'
            if chr_ == '<':
                if not text.startswith(CDATA_START, i):
                    raise MalformedDocumentError(f"Unexpected '<' inside tag {name}", offset=i)
                cdata_end = text.find(CDATA_END, i + len(CDATA_START))
                if cdata_end == -1:
                    raise MalformedDocumentError("Unterminated CDATA section", offset=i)
                i = cdata_end + len(CDATA_END)
                continue

            if state is AttributeState.SEEKING_NAME:
                if not chr_.isspace() and chr_ != '/':
                    name_start = i
                    state = AttributeState.IN_NAME
            elif state is AttributeState.IN_NAME:
                if chr_.isspace() or chr_ == '=':
                    attribute_name = text[name_start:i]
                    state = AttributeState.SEEKING_VALUE
                elif chr_ == '/':
                    state = AttributeState.SEEKING_NAME
            elif state is AttributeState.SEEKING_VALUE:
                if chr_ == '"' or chr_ == "'":
                    quote = chr_
                    segment_start = i + 1
                    state = AttributeState.IN_VALUE
                elif not chr_.isspace() and chr_ != '=':
                    # the previous name had no value; this starts a new one
                    name_start = i
                    state = AttributeState.IN_NAME
            i += 1

        if state in (AttributeState.IN_VALUE, AttributeState.IN_VALUE_CDATA):
            raise MalformedDocumentError(f"Unterminated attribute value in tag {name}", offset=start)
        raise MalformedDocumentError(f"Tag {name} has no end", offset=start)
