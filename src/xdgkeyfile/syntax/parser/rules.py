"""Grammar rules for key file lines.

Each rule takes one trimmed physical line and either returns its parsed
parts or raises a KeyFileParseError carrying the 1-indexed line number.

Grammar:
    group_header := "[" name "]"           name := [^\\[\\]]+ (trimmed)
    entry        := key ("[" locale "]")? ws* "=" ws* value
    ws           := " " | "\\t"
    key          := [^=\\[\\]\\s]+
    locale       := [\\w.@-]+
    value        := .*

Character classes are ASCII: ``\\w`` in a locale qualifier never matches a
non-ASCII letter. Only spaces and tabs may surround the '=', the same
characters trimmed from both ends of every line.
"""

import re
from dataclasses import dataclass

from xdgkeyfile.constants import LINE_WHITESPACE, LOCALE_QUALIFIER_PATTERN
from xdgkeyfile.diagnostics import (
    ErrorTemplate,
    InvalidEntryError,
    InvalidGroupHeaderError,
)

__all__ = ["ParsedEntry", "parse_entry", "parse_group_header"]

_GROUP_HEADER: re.Pattern[str] = re.compile(r"\[(?P<name>[^\[\]]+)\]")

_ENTRY: re.Pattern[str] = re.compile(
    r"""
    (?P<key> [^=\[\]\s]+ )
    (?: \[ (?P<locale> """
    + LOCALE_QUALIFIER_PATTERN
    + r""" ) \] )?
    [ \t]* = [ \t]*
    (?P<value> .* )
    """,
    re.VERBOSE | re.ASCII,
)


@dataclass(frozen=True, slots=True)
class ParsedEntry:
    """Parts of a ``key[locale]=value`` line.

    Attributes:
        key: Entry key
        value: Raw value (escapes untouched)
        locale: Locale qualifier, or None
    """

    key: str
    value: str
    locale: str | None = None


def parse_group_header(line: str, lineno: int = 0) -> str:
    """Parse ``[name]`` and return the trimmed group name.

    Args:
        line: Trimmed source line starting with '['
        lineno: 1-indexed line number for diagnostics

    Returns:
        Group name with surrounding whitespace removed

    Raises:
        InvalidGroupHeaderError: If the whole line is not a group header
    """
    if match := _GROUP_HEADER.fullmatch(line):
        name = match["name"].strip(LINE_WHITESPACE)
        if name:
            return name
    raise InvalidGroupHeaderError(ErrorTemplate.invalid_group_header(line, lineno), line=lineno)


def parse_entry(line: str, lineno: int = 0) -> ParsedEntry:
    """Parse ``key[locale]=value``.

    Whitespace around '=' is dropped; whitespace inside the value is kept.

    Raises:
        InvalidEntryError: If the line does not match the entry grammar
    """
    if match := _ENTRY.fullmatch(line):
        return ParsedEntry(match["key"], match["value"], match["locale"])
    raise InvalidEntryError(ErrorTemplate.invalid_entry(line, lineno), line=lineno)
