"""
Tree builder driven by the incremental events of the lxml pull parser.

lxml resolves namespaces, so qualified names come back as '{uri}local'.
The builder maps them back to the literal 'prefix:local' form used by the
rest of the library and re-creates the xmlns declarations as ordinary
attributes. Those declarations are listed before the element's other
attributes, so attribute order can differ from the scanner when a
document interleaves them.
"""

import logging
from typing import Dict, List, Optional, Tuple

from lxml import etree

from ..diagnostics import MalformedDocumentError
from ..utils.formatting import ESCAPED_CDATA_TERMINATOR
from .base import TreeBuilder
from .scanner import BufferScanner
from .xml_node import XMLNode

logger = logging.getLogger(__name__)

XML_NAMESPACE = 'http://www.w3.org/XML/1998/namespace'


class EventTreeBuilder(TreeBuilder):
    """Build the generic XML tree from start/end events fed chunk by chunk."""

    CHUNK_SIZE = 64 * 1024

    def get_names(self) -> List[str]:
        return ['events']

    def build(self, text: str) -> XMLNode:
        parser = etree.XMLPullParser(
            events=('start', 'end', 'start-ns'),
            remove_comments=True,
            remove_pis=True,
            resolve_entities=False,
            strip_cdata=False,
            encoding='utf-8',
        )
        data = text.encode('utf-8')
        assembly = TreeAssembly()

        try:
            for start in range(0, len(data), self.CHUNK_SIZE):
                parser.feed(data[start:start + self.CHUNK_SIZE])
                assembly.handle_events(parser.read_events())
            parser.close()
            assembly.handle_events(parser.read_events())
        except etree.XMLSyntaxError as e:
            line, column = e.position
            logger.debug(f"Event tokenizer failed: {e.msg}")
            raise MalformedDocumentError(e.msg, line=line, column=column) from e

        if assembly.root is None:
            raise MalformedDocumentError("No root element found")
        return assembly.root


class TreeAssembly:
    """
    State of a single build: the open nodes and the prefixes in scope.

    A new assembly is used for every document, so one builder can serve
    several parses at the same time.
    """

    def __init__(self):
        self.root: Optional[XMLNode] = None
        self.stack: List[XMLNode] = []
        self.prefixes: List[Dict[str, str]] = [{XML_NAMESPACE: 'xml'}]
        self.declared: List[Tuple[str, str]] = []

    def handle_events(self, events) -> None:
        for event, payload in events:
            if event == 'start-ns':
                self.declared.append(payload)
            elif event == 'start':
                self.start_element(payload)
            elif event == 'end':
                self.end_element(payload)

    def start_element(self, element) -> None:
        prefixes = dict(self.prefixes[-1])
        node = XMLNode('')
        for prefix, uri in self.declared:
            prefixes[uri] = prefix or ''
            node.add_attribute(f"xmlns:{prefix}" if prefix else 'xmlns', uri)
        self.declared = []
        self.prefixes.append(prefixes)

        node.name = self._local_name(element.tag, prefixes)
        for name, value in element.attrib.items():
            node.add_attribute(self._local_name(name, prefixes), value)

        if self.stack:
            self.stack[-1].append_child(node)
        else:
            self.root = node
        self.stack.append(node)

    def end_element(self, element) -> None:
        node = self.stack.pop()
        self.prefixes.pop()
        if node.children:
            return
        text = ''.join(element.itertext())
        if ESCAPED_CDATA_TERMINATOR in text:
            text = self._cdata_aware_text(element)
        node.text = text.strip() or None

    @staticmethod
    def _cdata_aware_text(element) -> str:
        """
        Text of a leaf with the terminator escape reversed inside CDATA only.

        lxml merges CDATA and plain text; the element is written back with
        its CDATA sections kept and rescanned to tell them apart.
        """
        markup = etree.tostring(element, encoding='unicode', with_tail=False)
        return BufferScanner().build(markup).text or ''

    @staticmethod
    def _local_name(qualified: str, prefixes: Dict[str, str]) -> str:
        """Turn '{uri}local' back into 'prefix:local'."""
        if not qualified.startswith('{'):
            return qualified
        uri, local = qualified[1:].split('}', 1)
        prefix = prefixes.get(uri, '')
        return f"{prefix}:{local}" if prefix else local
