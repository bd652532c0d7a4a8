"""Core key file parser implementation.

This module provides the KeyFileParser class that turns key file source text
into a :class:`~xdgkeyfile.syntax.model.Document`.

Architecture:
    Parsing is a single forward pass over physical lines
    (:func:`~xdgkeyfile.syntax.scanner.split_lines`). Each trimmed line is
    classified by its first character and dispatched:

    - blank: extends the pending comment block with an empty line
    - ``#``: appends to the pending comment block
    - ``[``: opens (or re-opens) a group, attaching the pending comment
    - anything else: an entry of the current group, attaching the pending comment

    Whatever comment is still pending at end of input becomes the document's
    end comment.

Error Policy:
    Parsing is all-or-nothing. The first malformed line raises a
    KeyFileParseError subclass and no Document is returned.

Locale Filtering:
    The parser can drop localized entries while reading:

    - NoLocale: keep every entry
    - SuppressAllLocales: keep base entries only
    - LocaleTag(locale): keep localized entries whose tag is the locale or one
      of its fallback variants

    A skipped entry discards the comment attached to it.

Security:
    Includes a configurable input size limit to prevent unbounded memory
    allocation from hostile or corrupt inputs.
"""

import logging

from xdgkeyfile.constants import LINE_WHITESPACE, MAX_SOURCE_SIZE
from xdgkeyfile.diagnostics import ErrorTemplate, MissingGroupHeaderError
from xdgkeyfile.enums import LineKind
from xdgkeyfile.locale import (
    LocaleLike,
    LocaleSelector,
    LocaleTag,
    SuppressAllLocales,
    as_locale_selector,
)
from xdgkeyfile.syntax.model import Document, Group
from xdgkeyfile.syntax.parser.rules import parse_entry, parse_group_header
from xdgkeyfile.syntax.scanner import classify_line, split_lines

__all__ = ["KeyFileParser"]

logger = logging.getLogger(__name__)


class KeyFileParser:
    """Line-oriented key file parser.

    Design:
    - One pass, one line at a time, no backtracking
    - Pending comment buffer attaches comments to the next construct
    - Locale filter applied per entry, before storing it

    Security:
    - Configurable max_source_size prevents DoS via large inputs
    - Default limit: 10 MB (far larger than any real desktop entry)

    Attributes:
        keep_comments: Preserve comments in the Document (default: True)
        locale: Locale filter applied to localized entries
        max_source_size: Maximum allowed source size in characters
    """

    __slots__ = ("_keep_comments", "_locale", "_max_source_size")

    def __init__(
        self,
        *,
        keep_comments: bool = True,
        locale: LocaleLike = None,
        max_source_size: int | None = None,
    ) -> None:
        """Initialize parser.

        Args:
            keep_comments: Preserve comment blocks (default: True)
            locale: Locale filter; None keeps every entry, False drops all
                localized entries, a tag keeps only matching ones
            max_source_size: Maximum source size in characters (default: 10 MB).
                            Set to 0 to disable the limit.

        Raises:
            InvalidLocaleError: If ``locale`` is a string that cannot be parsed
        """
        self._keep_comments = keep_comments
        self._locale = as_locale_selector(locale)
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )

    @property
    def keep_comments(self) -> bool:
        """Whether comment blocks are preserved."""
        return self._keep_comments

    @property
    def locale(self) -> LocaleSelector:
        """Locale filter applied to localized entries."""
        return self._locale

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in characters."""
        return self._max_source_size

    def parse(self, source: str) -> Document:
        """Parse key file source into a Document.

        Args:
            source: Key file content

        Returns:
            Parsed Document

        Raises:
            ValueError: If source exceeds max_source_size (DoS prevention)
            MissingGroupHeaderError: If an entry precedes the first group
            InvalidGroupHeaderError: If a '[' line is not a valid header
            InvalidEntryError: If a line is not a valid entry

        Example:
            >>> document = KeyFileParser().parse("[Desktop Entry]\\nName=Foo")
            >>> document.groups["Desktop Entry"].get_entry("Name").value
            'Foo'
        """
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            msg = (
                f"Source size ({len(source):,} characters) exceeds maximum "
                f"({self._max_source_size:,} characters). "
                "Configure max_source_size in KeyFileParser constructor to increase limit."
            )
            raise ValueError(msg)

        document = Document()
        group: Group | None = None
        pending_comment = ""
        skipped = 0

        for lineno, raw_line in enumerate(split_lines(source), start=1):
            line = raw_line.strip(LINE_WHITESPACE)
            match classify_line(line):
                case LineKind.BLANK:
                    if self._keep_comments and pending_comment:
                        pending_comment += "\n"

                case LineKind.COMMENT:
                    if self._keep_comments:
                        pending_comment += line[1:] + "\n"

                case LineKind.GROUP_HEADER:
                    name = parse_group_header(line, lineno)
                    existing = document.get_group(name)
                    if existing is not None:
                        logger.debug("Merging re-declared group [%s] on line %d", name, lineno)
                        existing.merge_comment(pending_comment)
                        group = existing
                    else:
                        group = document.ensure_group(name)
                        group.comment = pending_comment
                    pending_comment = ""

                case LineKind.ENTRY:
                    if group is None:
                        raise MissingGroupHeaderError(
                            ErrorTemplate.missing_group_header(line, lineno), line=lineno
                        )
                    parsed = parse_entry(line, lineno)
                    if parsed.locale is not None and not self._accepts_locale(parsed.locale):
                        logger.debug(
                            "Skipping %s[%s] on line %d: filtered by locale %s",
                            parsed.key,
                            parsed.locale,
                            lineno,
                            self._locale,
                        )
                        skipped += 1
                        pending_comment = ""
                        continue
                    group.set_entry(parsed.key, parsed.value, parsed.locale, pending_comment)
                    pending_comment = ""

        document.end_comment = pending_comment

        logger.debug(
            "Parsed %d groups (%d localized entries skipped)",
            len(document.groups),
            skipped,
        )
        return document

    def _accepts_locale(self, tag: str) -> bool:
        match self._locale:
            case SuppressAllLocales():
                return False
            case LocaleTag(locale=locale):
                return locale.matches(tag)
            case _:
                return True
