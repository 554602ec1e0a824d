"""
Reading and writing whole GPX documents.

Sources are read completely before parsing starts: bytes, files and URLs
are all reduced to text, turned into a generic XML tree by a tree builder
and hydrated into a GPXRoot.

Example:
    parser = GPXParser()
    result = parser.parse('tracks/mystic_basin_trail.gpx')
    for warning in result.diagnostics.warnings:
        print(warning)
    print(len(result.root.tracks))
"""

import asyncio
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Union

import requests

from .diagnostics import Diagnostics, FormatWarning, MalformedDocumentError
from .models.root import GPXRoot
from .parsers import DEFAULT_BUILDER, TreeBuilderFactory

logger = logging.getLogger(__name__)

Source = Union[str, bytes, bytearray, Path]

_URL_PATTERN = re.compile(r'^https?://', re.IGNORECASE)
BYTE_ORDER_MARK = '\ufeff'


@dataclass
class ParseResult:
    """Typed document together with the warnings found while building it."""

    root: GPXRoot
    diagnostics: Diagnostics = field(default_factory=Diagnostics)

    @property
    def warnings(self):
        return self.diagnostics.warnings


class GPXParser:
    """
    Parse GPX documents from text, bytes, files or URLs.

    Args:
        builder: Name of the tree builder ('scanner' or 'events')
        session: Optional requests.Session for dependency injection (testing)
        timeout: HTTP request timeout in seconds
        on_warning: Callable receiving each FormatWarning as it is found
    """

    DEFAULT_TIMEOUT = 15
    USER_AGENT = "gpx-kit/0.1 (GPX parser)"

    def __init__(self, builder: str = DEFAULT_BUILDER, session: Optional[requests.Session] = None,
                 timeout: int = DEFAULT_TIMEOUT,
                 on_warning: Optional[Callable[[FormatWarning], None]] = None):
        self._builder = TreeBuilderFactory.get_builder(builder)
        self._session = session or requests.Session()
        self._timeout = timeout
        self._on_warning = on_warning
        self._session.headers.setdefault("User-Agent", self.USER_AGENT)

    def parse(self, source: Source) -> ParseResult:
        """
        Parse a document from any supported source.

        Strings starting with '<' are GPX text, http(s) URLs are fetched and
        any other string is a file path.

        Raises:
            MalformedDocumentError: If no document can be read or built
        """
        if isinstance(source, (bytes, bytearray)):
            return self.parse_bytes(bytes(source))
        if isinstance(source, Path):
            return self.parse_file(source)
        if source.lstrip(BYTE_ORDER_MARK).lstrip().startswith('<'):
            return self.parse_string(source)
        if _URL_PATTERN.match(source):
            return self.parse_url(source)
        return self.parse_file(source)

    async def parse_async(self, source: Source) -> ParseResult:
        """Run parse in a worker thread; the result is the same."""
        return await asyncio.to_thread(self.parse, source)

    def parse_string(self, text: str) -> ParseResult:
        diagnostics = Diagnostics(listeners=[self._on_warning] if self._on_warning else [])
        node = self._builder.build(text.lstrip(BYTE_ORDER_MARK))
        if node.name != GPXRoot.TAG_NAME:
            logger.debug(f"Root element is {node.name}, reading it as {GPXRoot.TAG_NAME}")
        root = GPXRoot.from_node(node, None, diagnostics)
        logger.info(
            f"Parsed GPX document: {len(root.waypoints)} waypoints, {len(root.routes)} routes, "
            f"{len(root.tracks)} tracks, {len(diagnostics.warnings)} warnings"
        )
        return ParseResult(root, diagnostics)

    def parse_bytes(self, data: bytes) -> ParseResult:
        try:
            text = data.decode('utf-8-sig')
        except UnicodeDecodeError as e:
            raise MalformedDocumentError(f"Document is not valid UTF-8: {e.reason}", offset=e.start) from e
        return self.parse_string(text)

    def parse_file(self, path: Union[str, Path]) -> ParseResult:
        path = Path(path)
        logger.info(f"Reading GPX file {path}")
        try:
            data = path.read_bytes()
        except OSError as e:
            raise MalformedDocumentError(f"Cannot read {path}: {e}") from e
        return self.parse_bytes(data)

    def parse_url(self, url: str) -> ParseResult:
        logger.info(f"Fetching GPX document from {url}")
        try:
            response = self._session.get(url, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.warning(f"GPX fetch failed for {url}: {e}")
            raise MalformedDocumentError(f"Cannot fetch {url}: {e}") from e
        return self.parse_bytes(response.content)


def parse(source: Source, **kwargs) -> ParseResult:
    """Parse a document with a GPXParser built from kwargs."""
    return GPXParser(**kwargs).parse(source)


def to_gpx(root: GPXRoot) -> str:
    return root.gpx()


def write_file(root: GPXRoot, path: Union[str, Path]) -> None:
    """Write a document as UTF-8, keeping its CRLF line endings."""
    path = Path(path)
    path.write_bytes(root.gpx().encode('utf-8'))
    logger.info(f"Wrote GPX file {path}")
