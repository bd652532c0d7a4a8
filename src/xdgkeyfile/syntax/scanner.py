"""Line scanning for key file sources.

Key files are line oriented: the parser never looks across line boundaries.
This module splits a buffer into physical lines and classifies each trimmed
line by its first character.

Line Breaks:
    Only CRLF, CR and LF terminate a line. Other characters that Python's
    str.splitlines() treats as line boundaries (vertical tab, form feed,
    U+2028, U+0085, ...) are ordinary characters in key file values.

Python 3.13+. Zero external dependencies.
"""

import re

from xdgkeyfile.enums import LineKind

__all__ = ["classify_line", "split_lines"]

_LINE_BREAK: re.Pattern[str] = re.compile(r"\r\n|\r|\n")


def split_lines(buffer: str) -> list[str]:
    """Split a buffer on CRLF, CR and LF.

    A trailing line break yields a trailing empty line, so the number of
    returned lines is always ``line breaks + 1``.

    Args:
        buffer: Source text

    Returns:
        Physical lines without their terminators

    Example:
        >>> split_lines("a\\r\\nb\\rc\\n")
        ['a', 'b', 'c', '']
        >>> split_lines("a\\x0bb")
        ['a\\x0bb']
    """
    return _LINE_BREAK.split(buffer)


def classify_line(stripped: str) -> LineKind:
    """Classify a trimmed line by its first character.

    Classification is purely lexical: a line starting with '[' is a
    GROUP_HEADER candidate even if it turns out to be malformed.
    """
    if not stripped:
        return LineKind.BLANK
    match stripped[0]:
        case "#":
            return LineKind.COMMENT
        case "[":
            return LineKind.GROUP_HEADER
        case _:
            return LineKind.ENTRY

