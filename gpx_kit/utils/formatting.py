"""
Text layout shared by every element serializer.

Output uses tab indentation and CRLF line endings. Property values made
only of safe characters are written as-is; anything else is wrapped in a
CDATA section.
"""

import re
from typing import List, Optional, Sequence, Tuple
from xml.sax.saxutils import escape

LINE_ENDING = '\r\n'
INDENT = '\t'
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

# a match means the value has to go into CDATA
CDATA_PATTERN = re.compile(r'[^a-zA-Z0-9.,+\-/*!=\'"()\[\]{}!$%@?_;: #\t\r\n]')
CDATA_TERMINATOR = ']]>'
ESCAPED_CDATA_TERMINATOR = ']]&gt;'


def indent(level: int) -> str:
    """Indentation for a nesting depth: one tab per level."""
    return INDENT * level


def needs_cdata(value: str) -> bool:
    return CDATA_PATTERN.search(value) is not None


def escape_cdata(value: str) -> str:
    return value.replace(CDATA_TERMINATOR, ESCAPED_CDATA_TERMINATOR)


def unescape_cdata(value: str) -> str:
    """Reverse escape_cdata on text read back from a document."""
    return value.replace(ESCAPED_CDATA_TERMINATOR, CDATA_TERMINATOR)


def escape_attribute(value: str) -> str:
    return escape(value, {'"': '&quot;'})


def format_attributes(attributes: Sequence[Tuple[str, Optional[str]]]) -> str:
    """
    Build the attribute part of an open tag.

    Args:
        attributes: (name, value) pairs in output order; None values are skipped

    Returns:
        String like ' lat="1.0" lon="2.0"', empty when nothing is present
    """
    return ''.join(
        f' {name}="{escape_attribute(value)}"'
        for name, value in attributes
        if value is not None
    )


def add_open_tag(buffer: List[str], tag: str, level: int, attributes: str = '') -> None:
    buffer.append(f"{indent(level)}<{tag}{attributes}>{LINE_ENDING}")


def add_close_tag(buffer: List[str], tag: str, level: int) -> None:
    buffer.append(f"{indent(level)}</{tag}>{LINE_ENDING}")


def add_property(buffer: List[str], value: Optional[str], tag: str, level: int,
                 default: Optional[str] = None, attribute: Optional[str] = None) -> None:
    """
    Write a single <tag>value</tag> line.

    Nothing is written when the value is missing, empty or equal to default.

    Args:
        buffer: Output fragments
        value: Text value of the property
        tag: Tag name
        level: Indentation level of the line
        default: Value that is never written
        attribute: Preformatted attribute string for the open tag
    """
    if not value:
        return
    if default is not None and value == default:
        return

    attribute_text = f" {attribute}" if attribute else ''
    if needs_cdata(value):
        buffer.append(
            f"{indent(level)}<{tag}{attribute_text}><![CDATA[{escape_cdata(value)}]]></{tag}>{LINE_ENDING}"
        )
    else:
        buffer.append(f"{indent(level)}<{tag}{attribute_text}>{value}</{tag}>{LINE_ENDING}")
