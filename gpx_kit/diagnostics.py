"""
Diagnostics for GPX parsing.

This module provides the recoverable format warnings collected while
typed elements are hydrated, and the fatal error raised when a document
cannot be turned into an XML tree at all.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class FormatWarning:
    """Represents a single recoverable problem found in a GPX document."""

    element: str
    message: str
    value: Any = None

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message} (value: {self.value})"
        return self.message


@dataclass
class Diagnostics:
    """
    Collector for format warnings raised during hydration.

    Listeners act as the notification sink: each one is called with every
    warning as soon as it is recorded.
    """

    warnings: List[FormatWarning] = field(default_factory=list)
    listeners: List[Callable[[FormatWarning], None]] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        """Check if any warning was recorded."""
        return len(self.warnings) > 0

    def add_warning(self, element: str, message: str, value: Any = None) -> FormatWarning:
        """Record a warning and notify listeners."""
        warning = FormatWarning(element, message, value)
        self.warnings.append(warning)
        logger.warning(f"Invalid GPX format: {warning}")
        for listener in self.listeners:
            listener(warning)
        return warning

    def get_messages(self) -> List[str]:
        """Get all warning messages as strings."""
        return [str(warning) for warning in self.warnings]

    def __str__(self) -> str:
        if self.has_warnings:
            return f"{len(self.warnings)} warnings"
        return "No warnings"


class MalformedDocumentError(Exception):
    """Exception raised when no XML tree can be built from the input."""

    def __init__(self, message: str, offset: Optional[int] = None,
                 line: Optional[int] = None, column: Optional[int] = None):
        """
        Initialize malformed document error.

        Args:
            message: Error message
            offset: Character offset into the decoded text, when known
            line: Line number reported by the tokenizer, when known
            column: Column number reported by the tokenizer, when known
        """
        super().__init__(message)
        self.offset = offset
        self.line = line
        self.column = column

    def __str__(self) -> str:
        message = super().__str__()
        if self.offset is not None:
            return f"{message} (at offset {self.offset})"
        if self.line is not None:
            return f"{message} (at line {self.line}, column {self.column})"
        return message
