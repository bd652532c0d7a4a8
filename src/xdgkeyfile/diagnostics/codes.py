"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Parse errors (abort the whole parse)
        2000-2999: Name validation errors (group names, keys, separators)
        3000-3999: Value decoding errors (typed accessors)
        4000-4999: Locale errors
    """

    # Parse errors (1000-1999)
    MISSING_GROUP_HEADER = 1001
    INVALID_GROUP_HEADER = 1002
    INVALID_ENTRY = 1003

    # Name validation errors (2000-2999)
    INVALID_GROUP_NAME = 2001
    INVALID_KEY = 2002
    INVALID_LIST_SEPARATOR = 2003

    # Value decoding errors (3000-3999)
    INVALID_BOOLEAN = 3001
    INVALID_INTEGER = 3002
    INVALID_FLOAT = 3003

    # Locale errors (4000-4999)
    INVALID_LOCALE = 4001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source location for error reporting.

    Key files are parsed line by line, so positions are expressed as a
    1-indexed line number plus a 1-indexed column. Column is always 1 for
    whole-line errors.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    line: int
    column: int = 1

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If line or column is less than 1 (both are 1-indexed).
        """
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None for errors raised outside the parser)
        hint: Suggestion for fixing the error
        source_line: Offending source text, when known
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    source_line: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[INVALID_ENTRY]: Invalid entry: "foo" on line 2
              --> line 2, column 1
              = help: Entries have the form key=value or key[locale]=value

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
