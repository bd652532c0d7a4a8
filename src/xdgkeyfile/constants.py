"""Shared constants for xdgkeyfile.

This module provides centralized configuration constants used across
the syntax layer and the KeyFile facade. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Grammar: Reserved characters and the default list separator
- Cache limits: Memory bounds for locale memoization
- Input limits: DoS prevention via size constraints

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Grammar
    "DEFAULT_LIST_SEPARATOR",
    "ESCAPE_CHAR",
    "COMMENT_PREFIX",
    "LINE_WHITESPACE",
    "GROUP_NAME_RESERVED",
    "KEY_RESERVED",
    "LOCALE_QUALIFIER_PATTERN",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Input limits
    "MAX_SOURCE_SIZE",
]

# ============================================================================
# GRAMMAR
# ============================================================================

# Separator used by string lists unless the document is configured otherwise.
DEFAULT_LIST_SEPARATOR: str = ";"

# Introduces escape sequences in values. Never valid as a list separator.
ESCAPE_CHAR: str = "\\"

COMMENT_PREFIX: str = "#"

# Characters trimmed from both ends of every physical line.
LINE_WHITESPACE: str = " \t"

# Characters that may not appear in a group name.
GROUP_NAME_RESERVED: frozenset[str] = frozenset("[]\n\r")

# Characters that may not appear in a key (ASCII whitespace included).
KEY_RESERVED: frozenset[str] = frozenset("[]= \t\n\r\x0b\x0c")

# Locale qualifier inside "key[...]", matched with re.ASCII.
LOCALE_QUALIFIER_PATTERN: str = r"[\w.@-]+"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum memoized Locale parses and variant lists.
# 128 covers typical desktop files (a few dozen translations per key).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (10 MB).
# Prevents unbounded memory allocation from hostile or corrupt inputs.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024
