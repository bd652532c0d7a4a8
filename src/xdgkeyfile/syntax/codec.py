"""Value codec: escape sequences, string lists and typed literals.

Raw values are stored exactly as they appear after the '=' of an entry.
This module converts between raw values and the decoded strings, lists,
booleans and numbers the KeyFile accessors expose.

Escape Sequences:
    \\\\  backslash      \\s  space      \\n  newline
    \\r   carriage return              \\t  tab

    A trailing lone backslash decodes to a backslash. Any other escape is
    preserved literally (``\\a`` stays ``\\a``). When decoding a list, an
    escaped separator decodes to the separator character itself.

Encoding:
    Leading spaces and tabs are escaped as ``\\s`` and ``\\t`` so they survive
    the whitespace trimming applied to every line; trailing spaces become
    ``\\s`` for the same reason. Otherwise only backslash, newline, carriage
    return, tab and the list separator are escaped.

Numeric Literals:
    Integers and floats accept decimal literals with optional sign, fraction
    and exponent, surrounded by optional whitespace. Reading a float literal
    as an integer truncates toward zero.

Python 3.13+. Zero external dependencies.
"""

import functools
import math
import re
from collections.abc import Iterable

from xdgkeyfile.constants import COMMENT_PREFIX, ESCAPE_CHAR
from xdgkeyfile.diagnostics import (
    ErrorTemplate,
    InvalidBooleanError,
    InvalidFloatError,
    InvalidIntegerError,
)
from xdgkeyfile.enums import ValueType

from .scanner import split_lines

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Strings and lists
    "decode_value",
    "decode_string",
    "decode_list",
    "encode_value",
    "encode_list",
    "encode_comment",
    # Typed literals
    "parse_boolean",
    "format_boolean",
    "parse_integer",
    "format_integer",
    "parse_float",
    "format_float",
]

_ESCAPES: dict[str, str] = {
    "\\": "\\",
    "s": " ",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_ENCODE_TABLE: dict[int, str] = {
    ord("\\"): "\\\\",
    ord("\n"): "\\n",
    ord("\r"): "\\r",
    ord("\t"): "\\t",
}

_LEADING_WHITESPACE_TABLE: dict[int, str] = {
    ord(" "): "\\s",
    ord("\t"): "\\t",
}

_INTEGER_LITERAL: re.Pattern[str] = re.compile(r"\s*[+-]?\d+\s*")
_NUMERIC_LITERAL: re.Pattern[str] = re.compile(
    r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*"
)


# ============================================================================
# STRINGS AND LISTS
# ============================================================================


def decode_value(raw: str, separator: str | None = None) -> str | list[str]:
    """Decode a raw value into a string, or a list when a separator is given.

    List decoding keeps empty items between separators but drops an empty
    trailing item, so ``a;b;`` and ``a;b`` decode identically.

    Args:
        raw: Raw value as stored in the document
        separator: List separator, or None to decode a single string

    Returns:
        Decoded string, or list of decoded items

    Example:
        >>> decode_value("\\\\sHello\\\\tWorld")
        ' Hello\\tWorld'
        >>> decode_value("a;b\\\\;c;;d;", ";")
        ['a', 'b;c', '', 'd']
    """
    if separator is None:
        return decode_string(raw)
    return decode_list(raw, separator)


def decode_string(raw: str) -> str:
    """Decode a raw value as a single string."""
    return _scan(raw, None)[0]


def decode_list(raw: str, separator: str) -> list[str]:
    """Decode a raw value as a list split on unescaped ``separator``."""
    return _scan(raw, separator)


def _scan(raw: str, separator: str | None) -> list[str]:
    items: list[str] = []
    buffer: list[str] = []
    i = 0
    length = len(raw)

    while i < length:
        char = raw[i]
        if char == ESCAPE_CHAR:
            nxt = raw[i + 1] if i + 1 < length else ""
            if not nxt:
                buffer.append(ESCAPE_CHAR)
            elif nxt in _ESCAPES:
                buffer.append(_ESCAPES[nxt])
            elif separator is not None and nxt == separator:
                buffer.append(separator)
            else:
                buffer.append(ESCAPE_CHAR + nxt)
            i += 2
        elif separator is not None and char == separator:
            items.append("".join(buffer))
            buffer.clear()
            i += 1
        else:
            buffer.append(char)
            i += 1

    if separator is None:
        return ["".join(buffer)]
    if buffer:
        items.append("".join(buffer))
    return items


def encode_value(text: str, separator: str | None = None) -> str:
    """Encode a string as a raw value.

    Args:
        text: Decoded string
        separator: List separator to escape, if any

    Returns:
        Raw value suitable for ``key=<raw>``

    Example:
        >>> encode_value("\\t foo bar")
        '\\\\t\\\\sfoo bar'
        >>> encode_value("b;c", ";")
        'b\\\\;c'
    """
    body = text.lstrip(" \t")
    head = text[: len(text) - len(body)].translate(_LEADING_WHITESPACE_TABLE)
    trimmed = body.rstrip(" ")
    trailer = "\\s" * (len(body) - len(trimmed))
    middle = trimmed.translate(_encode_table(separator))
    return head + middle + trailer


@functools.lru_cache(maxsize=16)
def _encode_table(separator: str | None) -> dict[int, str]:
    # Escapes for tab, newline and CR take precedence when the separator
    # is one of those characters; the decoder reads them first as well.
    if not separator:
        return _ENCODE_TABLE
    return {ord(separator): ESCAPE_CHAR + separator, **_ENCODE_TABLE}


def encode_list(items: Iterable[str], separator: str) -> str:
    """Encode strings as a separator-joined raw list value."""
    return separator.join(encode_value(item, separator) for item in items)


def encode_comment(text: str) -> str:
    """Render comment text as ``#``-prefixed lines.

    Trailing whitespace is trimmed first, so the stored trailing newline of
    parsed comments does not produce an extra ``#`` line.

    Args:
        text: Comment text, without ``#`` prefixes

    Returns:
        Comment block without a trailing newline

    Example:
        >>> encode_comment(" first\\n\\n second\\n")
        '# first\\n#\\n# second'
    """
    return "\n".join(COMMENT_PREFIX + line for line in split_lines(text.rstrip()))


# ============================================================================
# TYPED LITERALS
# ============================================================================


def parse_boolean(raw: str) -> bool:
    """Decode ``true`` or ``false``.

    Raises:
        InvalidBooleanError: For any other value, including ``True`` or ``1``
    """
    match raw:
        case "true":
            return True
        case "false":
            return False
    raise InvalidBooleanError(ErrorTemplate.invalid_value(ValueType.BOOLEAN, raw), value=raw)


def format_boolean(value: bool) -> str:
    return "true" if value else "false"


def parse_integer(raw: str) -> int:
    """Decode a numeric literal as an integer.

    Float literals are truncated toward zero (``3.14`` -> 3, ``1e3`` -> 1000).

    Raises:
        InvalidIntegerError: If the value is not a numeric literal
    """
    if _INTEGER_LITERAL.fullmatch(raw):
        return int(raw)
    if _NUMERIC_LITERAL.fullmatch(raw):
        number = float(raw)
        if math.isfinite(number):
            return int(number)
    raise InvalidIntegerError(ErrorTemplate.invalid_value(ValueType.INTEGER, raw), value=raw)


def format_integer(value: int) -> str:
    return str(value)


def parse_float(raw: str) -> float:
    """Decode a numeric literal as a float.

    ``inf`` and ``nan`` are not numeric literals and are rejected.

    Raises:
        InvalidFloatError: If the value is not a numeric literal
    """
    if _NUMERIC_LITERAL.fullmatch(raw):
        return float(raw)
    raise InvalidFloatError(ErrorTemplate.invalid_value(ValueType.FLOAT, raw), value=raw)


def format_float(value: float) -> str:
    """Render a float; integral values drop the fractional part.

    Example:
        >>> format_float(42.0)
        '42'
        >>> format_float(3.14)
        '3.14'

    Raises:
        InvalidFloatError: If the value is infinite or NaN
    """
    if not math.isfinite(value):
        text = repr(value)
        raise InvalidFloatError(ErrorTemplate.invalid_value(ValueType.FLOAT, text), value=text)
    text = repr(float(value))
    return text.removesuffix(".0")
