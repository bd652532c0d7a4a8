"""Shared validation helpers for key file names.

Provides the checks applied by every KeyFile setter before the document is
mutated. Names are never coerced: an invalid name is rejected as a whole.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re

from xdgkeyfile.constants import (
    COMMENT_PREFIX,
    ESCAPE_CHAR,
    GROUP_NAME_RESERVED,
    KEY_RESERVED,
    LINE_WHITESPACE,
    LOCALE_QUALIFIER_PATTERN,
)
from xdgkeyfile.diagnostics import (
    ErrorTemplate,
    InvalidGroupNameError,
    InvalidKeyError,
    InvalidListSeparatorError,
    InvalidLocaleError,
)

__all__ = [
    "validate_group_name",
    "validate_key",
    "validate_list_separator",
    "validate_locale_qualifier",
]

_LOCALE_QUALIFIER: re.Pattern[str] = re.compile(LOCALE_QUALIFIER_PATTERN, re.ASCII)


def validate_group_name(name: str) -> None:
    """Reject empty group names and names containing '[', ']' or a line break.

    Names with leading or trailing spaces or tabs are rejected too: the
    parser trims them from headers, so they could not be read back.

    Args:
        name: Group name to validate

    Raises:
        InvalidGroupNameError: If the name is not valid

    Example:
        >>> validate_group_name("Desktop Entry")
        >>> validate_group_name("A[B]")
        Traceback (most recent call last):
        ...
        xdgkeyfile.diagnostics.errors.InvalidGroupNameError: ...
    """
    if (
        not name
        or not GROUP_NAME_RESERVED.isdisjoint(name)
        or name != name.strip(LINE_WHITESPACE)
    ):
        raise InvalidGroupNameError(ErrorTemplate.invalid_group_name(name))


def validate_key(key: str) -> None:
    """Reject empty keys and keys containing '=', '[', ']' or whitespace.

    A leading '#' is rejected as well, since the line would read back as a
    comment.

    Raises:
        InvalidKeyError: If the key is not valid
    """
    if not key or key.startswith(COMMENT_PREFIX) or not KEY_RESERVED.isdisjoint(key):
        raise InvalidKeyError(ErrorTemplate.invalid_key(key))


def validate_list_separator(separator: str) -> None:
    """Require exactly one character other than a backslash.

    Raises:
        InvalidListSeparatorError: If the separator is not valid
    """
    if len(separator) != 1 or separator == ESCAPE_CHAR:
        raise InvalidListSeparatorError(ErrorTemplate.invalid_list_separator(separator))


def validate_locale_qualifier(tag: str) -> None:
    """Require a canonical locale tag that fits inside ``key[...]``.

    Locale.parse accepts any encoding or modifier text, but the entry
    grammar only reads ASCII letters, digits, '_', '.', '@' and '-'.

    Raises:
        InvalidLocaleError: If the tag could not be parsed back
    """
    if not _LOCALE_QUALIFIER.fullmatch(tag):
        raise InvalidLocaleError(ErrorTemplate.invalid_locale(tag))
