"""Key file exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Parse errors abort the whole parse; validation errors are raised
synchronously by setters and typed getters.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

# ruff: noqa: RUF022 - __all__ organized by hierarchy for readability
__all__ = [
    "KeyFileError",
    "KeyFileSyntaxError",
    "InvalidGroupNameError",
    "InvalidKeyError",
    "InvalidListSeparatorError",
    "InvalidLocaleError",
    "InvalidValueError",
    "InvalidBooleanError",
    "InvalidIntegerError",
    "InvalidFloatError",
    "KeyFileParseError",
    "MissingGroupHeaderError",
    "InvalidGroupHeaderError",
    "InvalidEntryError",
]


class KeyFileError(Exception):
    """Base exception for all key file errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize KeyFileError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class KeyFileSyntaxError(KeyFileError):
    """A name, separator, locale or value violates the key file syntax.

    Raised eagerly, before any mutation: a rejected setter leaves the
    document unchanged.
    """


class InvalidGroupNameError(KeyFileSyntaxError):
    """Group name is empty, padded, or contains '[', ']' or a line break."""


class InvalidKeyError(KeyFileSyntaxError):
    """Key is empty, starts with '#', or contains '=', '[', ']' or whitespace."""


class InvalidListSeparatorError(KeyFileSyntaxError):
    """List separator is not exactly one character, or is a backslash."""


class InvalidLocaleError(KeyFileSyntaxError, ValueError):
    """Locale tag could not be parsed, even by the canonicalizer fallback."""


class InvalidValueError(KeyFileSyntaxError):
    """Stored raw value cannot be decoded as the requested type.

    Attributes:
        value: The raw string that failed to decode
    """

    def __init__(self, message: str | Diagnostic, *, value: str = "") -> None:
        """Initialize InvalidValueError.

        Args:
            message: Error message string OR Diagnostic object
            value: The raw string that failed to decode
        """
        super().__init__(message)
        self.value = value


class InvalidBooleanError(InvalidValueError):
    """Raw value is neither 'true' nor 'false'."""


class InvalidIntegerError(InvalidValueError):
    """Raw value is not a numeric literal."""


class InvalidFloatError(InvalidValueError):
    """Raw value is not a numeric literal."""


class KeyFileParseError(KeyFileSyntaxError):
    """Malformed key file source.

    Parsing is all-or-nothing: no partial document is produced.

    Attributes:
        line: 1-indexed line number of the offending line (0 if unknown)
    """

    def __init__(self, message: str | Diagnostic, *, line: int = 0) -> None:
        """Initialize KeyFileParseError.

        Args:
            message: Error message string OR Diagnostic object
            line: 1-indexed line number of the offending line
        """
        super().__init__(message)
        self.line = line


class MissingGroupHeaderError(KeyFileParseError):
    """An entry appeared before the first group header."""


class InvalidGroupHeaderError(KeyFileParseError):
    """A line starting with '[' is not a well-formed group header."""


class InvalidEntryError(KeyFileParseError):
    """A line is neither blank, a comment, a group header nor a valid entry."""
