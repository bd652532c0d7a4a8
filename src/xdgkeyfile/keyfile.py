"""KeyFile - Main API for reading and editing key files.

Python 3.13+. Optional dependency: Babel (non-POSIX locale tags).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator

from xdgkeyfile.locale import (
    LocaleLike,
    LocaleSelector,
    LocaleTag,
    as_locale_selector,
)
from xdgkeyfile.syntax.codec import (
    decode_list,
    decode_string,
    encode_list,
    encode_value,
    format_boolean,
    format_float,
    format_integer,
    parse_boolean,
    parse_float,
    parse_integer,
)
from xdgkeyfile.syntax.model import Document, Entry, Group
from xdgkeyfile.syntax.parser import KeyFileParser
from xdgkeyfile.syntax.serializer import serialize
from xdgkeyfile.syntax.validation_helpers import (
    validate_group_name,
    validate_key,
    validate_list_separator,
    validate_locale_qualifier,
)

__all__ = ["KeyFile"]

logger = logging.getLogger(__name__)


class KeyFile:
    """Editable key file document.

    Main public API. Wraps a :class:`~xdgkeyfile.syntax.model.Document` and
    exposes validated setters, typed getters, locale-aware lookups and
    comment access.

    Missing Data:
        Getters return None when the group or key does not exist. List
        getters return an empty list for an empty raw value.

    Validation:
        Setters validate group names, keys and locale tags before touching
        the document, so a rejected call leaves it unchanged.

    Locale Arguments:
        Every ``locale`` parameter accepts None (base value), a locale tag
        string, a :class:`~xdgkeyfile.locale.Locale`, or a selector
        (NoLocale, LocaleTag, SuppressAllLocales).

    Thread Safety:
        KeyFile instances are NOT thread-safe. Do not mutate one document
        from several threads.

    Example:
        >>> keyfile = KeyFile.parse("[Desktop Entry]\\nName=Files\\nName[fr]=Fichiers")
        >>> keyfile.get_string("Desktop Entry", "Name", "fr_FR")
        'Fichiers'
        >>> keyfile.set_boolean("Desktop Entry", "Terminal", False)
        >>> print(keyfile, end="")
        [Desktop Entry]
        Name=Files
        Name[fr]=Fichiers
        Terminal=false
    """

    __slots__ = ("_document",)

    def __init__(self, document: Document | None = None) -> None:
        """Initialize KeyFile.

        Args:
            document: Existing document to wrap (default: new empty document)
        """
        self._document = document if document is not None else Document()

    @classmethod
    def parse(
        cls,
        source: str,
        *,
        locale: LocaleLike = None,
        keep_comments: bool = True,
        max_source_size: int | None = None,
    ) -> KeyFile:
        """Parse key file source.

        Args:
            source: Key file content
            locale: Keep only translations matching this locale; False drops
                every translation; None keeps them all (default)
            keep_comments: Preserve comment blocks (default: True)
            max_source_size: Maximum source size in characters (default: 10 MB)

        Returns:
            New KeyFile

        Raises:
            KeyFileParseError: On the first malformed line
            InvalidLocaleError: If ``locale`` cannot be parsed
            ValueError: If source exceeds max_source_size
        """
        parser = KeyFileParser(
            keep_comments=keep_comments,
            locale=locale,
            max_source_size=max_source_size,
        )
        document = parser.parse(source)
        logger.info(
            "Parsed key file: %d groups, %d entries",
            len(document.groups),
            sum(len(group.entries) for group in document.groups.values()),
        )
        return cls(document)

    @property
    def document(self) -> Document:
        """Underlying document model (mutations bypass validation)."""
        return self._document

    def to_text(self) -> str:
        """Serialize to key file text ending with a single newline."""
        return serialize(self._document)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        """Return string representation for debugging.

        Example:
            >>> repr(KeyFile.parse("[A]\\nk=v"))
            'KeyFile(groups=1, entries=1)'
        """
        entries = sum(len(group.entries) for group in self._document.groups.values())
        return f"KeyFile(groups={len(self._document.groups)}, entries={entries})"

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def list_separator(self) -> str:
        """Separator used by the list accessors (default ';')."""
        return self._document.list_separator

    @list_separator.setter
    def list_separator(self, separator: str) -> None:
        validate_list_separator(separator)
        self._document.list_separator = separator

    # ------------------------------------------------------------------
    # Groups
    # ------------------------------------------------------------------

    def has_group(self, group: str) -> bool:
        return group in self._document.groups

    def get_groups(self) -> list[str]:
        """Group names in document order."""
        return list(self._document.groups)

    def get_start_group(self) -> str | None:
        """Name of the first group, or None for an empty document."""
        return next(iter(self._document.groups), None)

    def remove_group(self, group: str) -> None:
        """Remove a group and all of its entries. Missing groups are ignored."""
        if self._document.remove_group(group) is not None:
            logger.debug("Removed group [%s]", group)

    # ------------------------------------------------------------------
    # Keys
    # ------------------------------------------------------------------

    def has_key(self, group: str, key: str, locale: LocaleLike = None) -> bool:
        """Check if a key exists.

        Args:
            group: Group name
            key: Entry key
            locale: When given, require a translation resolvable for it

        Returns:
            True if the key (or a matching translation) exists
        """
        target = self._document.get_group(group)
        if target is None:
            return False
        selector = as_locale_selector(locale)
        if isinstance(selector, LocaleTag):
            return self._resolve_tag(target, key, selector) is not None
        return target.has_key(key)

    def get_keys(self, group: str) -> list[str]:
        """Unique keys of a group in order of first appearance ([] if missing)."""
        target = self._document.get_group(group)
        return target.keys() if target is not None else []

    def remove_key(self, group: str, key: str, locale: LocaleLike = None) -> None:
        """Remove a key.

        Without a locale, the base value and every translation are removed.
        With a locale, only the translation it resolves to is removed.
        """
        target = self._document.get_group(group)
        if target is None:
            return
        selector = as_locale_selector(locale)
        if isinstance(selector, LocaleTag):
            tag = self._resolve_tag(target, key, selector)
            if tag is not None:
                target.remove_entry(key, tag)
                logger.debug("Removed %s[%s] from [%s]", key, tag, group)
            return
        removed = target.remove_key(key)
        if removed:
            logger.debug("Removed %s (%d entries) from [%s]", key, removed, group)

    # ------------------------------------------------------------------
    # Raw values
    # ------------------------------------------------------------------

    def get_value(self, group: str, key: str, locale: LocaleLike = None) -> str | None:
        """Get the raw (still escaped) value of a key.

        Resolution with a locale: exact stored tag, then the best fallback
        variant among stored translations, then the base value.

        Args:
            group: Group name
            key: Entry key
            locale: Locale to resolve translations for (default: base value)

        Returns:
            Raw value, or None if nothing matches

        Example:
            >>> keyfile = KeyFile()
            >>> keyfile.set_value("Test", "Foo", "fallback")
            >>> keyfile.set_value("Test", "Foo", "generic", "fr")
            >>> keyfile.get_value("Test", "Foo", "fr_BE")
            'generic'
            >>> keyfile.get_value("Test", "Foo", "de")
            'fallback'
        """
        entry = self._find_entry(group, key, as_locale_selector(locale))
        return entry.value if entry is not None else None

    def set_value(self, group: str, key: str, value: str, locale: LocaleLike = None) -> None:
        """Set the raw value of a key, creating the group if needed.

        An existing entry keeps its position and comment.

        Raises:
            InvalidGroupNameError: If the group name is not valid
            InvalidKeyError: If the key is not valid
            InvalidLocaleError: If the locale cannot be parsed, or its
                canonical tag cannot be written inside key[...]
        """
        validate_group_name(group)
        validate_key(key)
        tag = self._storage_tag(as_locale_selector(locale))
        self._document.ensure_group(group).set_entry(key, value, tag)

    def resolve_locale_for_key(self, group: str, key: str, locale: LocaleLike) -> str | None:
        """Stored locale tag that a lookup for ``locale`` would use.

        Args:
            group: Group name
            key: Entry key
            locale: Requested locale

        Returns:
            Stored tag (exact match or best fallback variant), or None when
            the lookup would fall back to the base value

        Example:
            >>> keyfile = KeyFile()
            >>> keyfile.set_value("Test", "Foo", "france", "fr_FR")
            >>> keyfile.resolve_locale_for_key("Test", "Foo", "fr_FR.UTF-8@euro")
            'fr_FR'
        """
        target = self._document.get_group(group)
        selector = as_locale_selector(locale)
        if target is None or not isinstance(selector, LocaleTag):
            return None
        return self._resolve_tag(target, key, selector)

    # ------------------------------------------------------------------
    # Typed accessors
    # ------------------------------------------------------------------

    def get_string(self, group: str, key: str, locale: LocaleLike = None) -> str | None:
        """Get a decoded string value (escape sequences expanded)."""
        raw = self.get_value(group, key, locale)
        if raw is None:
            return None
        return decode_string(raw)

    def set_string(self, group: str, key: str, value: str, locale: LocaleLike = None) -> None:
        self.set_value(group, key, encode_value(value), locale)

    def get_string_list(
        self, group: str, key: str, locale: LocaleLike = None
    ) -> list[str] | None:
        """Get a decoded list using the document's list separator."""
        return self._get_list(group, key, str, locale)

    def set_string_list(
        self, group: str, key: str, values: Iterable[str], locale: LocaleLike = None
    ) -> None:
        self.set_value(group, key, encode_list(values, self.list_separator), locale)

    def get_boolean(self, group: str, key: str) -> bool | None:
        """Get a boolean value.

        Raises:
            InvalidBooleanError: If the value is not exactly 'true' or 'false'
        """
        raw = self.get_value(group, key)
        return parse_boolean(raw) if raw is not None else None

    def set_boolean(self, group: str, key: str, value: bool) -> None:
        self.set_value(group, key, format_boolean(value))

    def get_boolean_list(self, group: str, key: str) -> list[bool] | None:
        """Get a list of booleans.

        Raises:
            InvalidBooleanError: If any item is not 'true' or 'false'
        """
        return self._get_list(group, key, parse_boolean)

    def set_boolean_list(self, group: str, key: str, values: Iterable[bool]) -> None:
        self._set_list(group, key, values, format_boolean)

    def get_integer(self, group: str, key: str) -> int | None:
        """Get an integer value; float literals are truncated toward zero.

        Raises:
            InvalidIntegerError: If the value is not a numeric literal
        """
        raw = self.get_value(group, key)
        return parse_integer(raw) if raw is not None else None

    def set_integer(self, group: str, key: str, value: int) -> None:
        self.set_value(group, key, format_integer(value))

    def get_integer_list(self, group: str, key: str) -> list[int] | None:
        return self._get_list(group, key, parse_integer)

    def set_integer_list(self, group: str, key: str, values: Iterable[int]) -> None:
        self._set_list(group, key, values, format_integer)

    def get_float(self, group: str, key: str) -> float | None:
        """Get a float value.

        Raises:
            InvalidFloatError: If the value is not a numeric literal
        """
        raw = self.get_value(group, key)
        return parse_float(raw) if raw is not None else None

    def set_float(self, group: str, key: str, value: float) -> None:
        """Set a float value; integral values are written without a fraction.

        Raises:
            InvalidFloatError: If the value is infinite or NaN
        """
        self.set_value(group, key, format_float(value))

    def get_float_list(self, group: str, key: str) -> list[float] | None:
        return self._get_list(group, key, parse_float)

    def set_float_list(self, group: str, key: str, values: Iterable[float]) -> None:
        self._set_list(group, key, values, format_float)

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    def get_start_comment(self) -> str:
        return self._document.start_comment

    def set_start_comment(self, comment: str) -> None:
        self._document.start_comment = comment

    def get_end_comment(self) -> str:
        return self._document.end_comment

    def set_end_comment(self, comment: str) -> None:
        self._document.end_comment = comment

    def get_group_comment(self, group: str) -> str | None:
        """Comment above a group header, or None if the group is missing."""
        target = self._document.get_group(group)
        return target.comment if target is not None else None

    def set_group_comment(self, group: str, comment: str) -> None:
        """Replace a group's comment. Missing groups are ignored."""
        target = self._document.get_group(group)
        if target is not None:
            target.comment = comment

    def get_key_comment(self, group: str, key: str, locale: LocaleLike = None) -> str | None:
        """Comment above an entry.

        With a locale, the comment of the translation it resolves to.

        Returns:
            Comment text, or None if no such entry exists
        """
        target = self._document.get_group(group)
        if target is None:
            return None
        entry = self._entry_for_comment(target, key, as_locale_selector(locale))
        return entry.comment if entry is not None else None

    def set_key_comment(
        self, group: str, key: str, comment: str, locale: LocaleLike = None
    ) -> None:
        """Replace an entry's comment.

        With a locale, the resolved translation is targeted, falling back to
        the base entry. Missing entries are ignored.
        """
        target = self._document.get_group(group)
        if target is None:
            return
        selector = as_locale_selector(locale)
        entry = self._entry_for_comment(target, key, selector)
        if entry is None and isinstance(selector, LocaleTag):
            entry = target.get_entry(key)
        if entry is not None:
            entry.comment = comment

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[tuple[str, str, str]]:
        """Yield ``(group, key or key[locale], raw value)`` in document order.

        Example:
            >>> keyfile = KeyFile.parse("[1]\\na=x\\na[ll]=y")
            >>> list(keyfile)
            [('1', 'a', 'x'), ('1', 'a[ll]', 'y')]
        """
        for group in self._document.groups.values():
            for entry in group.entries.values():
                yield group.name, entry.display_key, entry.value

    def __len__(self) -> int:
        """Number of groups."""
        return len(self._document.groups)

    def __contains__(self, group: object) -> bool:
        return group in self._document.groups

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _storage_tag(selector: LocaleSelector) -> str | None:
        if isinstance(selector, LocaleTag):
            tag = str(selector.locale)
            validate_locale_qualifier(tag)
            return tag
        return None

    @staticmethod
    def _resolve_tag(group: Group, key: str, selector: LocaleTag) -> str | None:
        stored = group.locales_for(key)
        if not stored:
            return None
        exact = str(selector.locale)
        if exact in stored:
            return exact
        return selector.locale.select(stored)

    def _find_entry(self, group: str, key: str, selector: LocaleSelector) -> Entry | None:
        target = self._document.get_group(group)
        if target is None:
            return None
        if isinstance(selector, LocaleTag):
            tag = self._resolve_tag(target, key, selector)
            if tag is not None:
                return target.get_entry(key, tag)
        return target.get_entry(key)

    def _entry_for_comment(
        self, group: Group, key: str, selector: LocaleSelector
    ) -> Entry | None:
        if isinstance(selector, LocaleTag):
            tag = self._resolve_tag(group, key, selector)
            return group.get_entry(key, tag) if tag is not None else None
        return group.get_entry(key)

    def _get_list[T](
        self,
        group: str,
        key: str,
        cast: Callable[[str], T],
        locale: LocaleLike = None,
    ) -> list[T] | None:
        raw = self.get_value(group, key, locale)
        if raw is None:
            return None
        if not raw:
            return []
        return [cast(item) for item in decode_list(raw, self.list_separator)]

    def _set_list[T](
        self,
        group: str,
        key: str,
        values: Iterable[T],
        render: Callable[[T], str],
    ) -> None:
        self.set_value(group, key, encode_list(map(render, values), self.list_separator))

