"""xdgkeyfile - Parser and serializer for XDG key files.

Reads, edits and writes the key file format used by ``.desktop`` entries and
GLib key files: ``[Group]`` headers, ``key=value`` entries, per-key locale
qualifiers (``Name[fr_FR]=...``), ``#`` comments and list values.

Public API:
    KeyFile - Editable document with typed, locale-aware accessors
    Locale - Parsed POSIX locale tag with fallback variants
    load_keyfile - Read and parse a key file from disk
    dump_keyfile - Serialize a KeyFile to disk
    parse_keyfile - Parse source text to the document model
    serialize_keyfile - Serialize the document model to text

Exceptions:
    KeyFileError - Base exception class
    KeyFileSyntaxError - Invalid names, separators, locales or values
    KeyFileParseError - Malformed source text

Submodules:
    xdgkeyfile.syntax - Scanner, codec, model, parser and serializer
    xdgkeyfile.locale - Locale parsing, variants and selectors
    xdgkeyfile.diagnostics - Error types, codes and formatting
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    KeyFileError,
    KeyFileParseError,
    KeyFileSyntaxError,
)
from .keyfile import KeyFile
from .loading import dump_keyfile, load_keyfile
from .locale import Locale, LocaleTag, NoLocale, SuppressAllLocales
from .syntax import parse as parse_keyfile
from .syntax import serialize as serialize_keyfile

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("xdgkeyfile")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# Desktop Entry Specification the grammar follows
__desktop_entry_spec_version__ = "1.5"
__spec_url__ = "https://specifications.freedesktop.org/desktop-entry-spec/latest/"

# Key files are UTF-8 encoded
__recommended_encoding__ = "UTF-8"

__all__ = [
    "KeyFile",
    "KeyFileError",
    "KeyFileParseError",
    "KeyFileSyntaxError",
    "Locale",
    "LocaleTag",
    "NoLocale",
    "SuppressAllLocales",
    "__desktop_entry_spec_version__",
    "__recommended_encoding__",
    "__spec_url__",
    "__version__",
    "dump_keyfile",
    "load_keyfile",
    "parse_keyfile",
    "serialize_keyfile",
]
