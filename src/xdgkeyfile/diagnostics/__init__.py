"""Diagnostic system for key file errors.

Provides structured error diagnostics with codes, line spans and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    InvalidBooleanError,
    InvalidEntryError,
    InvalidFloatError,
    InvalidGroupHeaderError,
    InvalidGroupNameError,
    InvalidIntegerError,
    InvalidKeyError,
    InvalidListSeparatorError,
    InvalidLocaleError,
    InvalidValueError,
    KeyFileError,
    KeyFileParseError,
    KeyFileSyntaxError,
    MissingGroupHeaderError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InvalidBooleanError",
    "InvalidEntryError",
    "InvalidFloatError",
    "InvalidGroupHeaderError",
    "InvalidGroupNameError",
    "InvalidIntegerError",
    "InvalidKeyError",
    "InvalidListSeparatorError",
    "InvalidLocaleError",
    "InvalidValueError",
    "KeyFileError",
    "KeyFileParseError",
    "KeyFileSyntaxError",
    "MissingGroupHeaderError",
    "OutputFormat",
    "SourceSpan",
]
