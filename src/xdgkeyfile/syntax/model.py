"""Key file document model.

A Document owns its groups, each Group owns its entries. Everything is
addressed by name: groups by group name, entries by the composite
``(key, locale)`` EntryKey, which lets a base value and all of its
localized variants coexist in one group.

Ordering:
    Groups and entries are kept in insertion order (dict order). Re-declaring
    a group or an entry updates it in place; the first declaration fixes its
    position.

Comments:
    Comment text is stored without ``#`` prefixes. An empty string means
    "no comment".

Mutability:
    Model objects are mutable: the KeyFile facade edits them in place after
    validating names. They carry no invariant checks of their own.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from xdgkeyfile.constants import DEFAULT_LIST_SEPARATOR

__all__ = [
    "Document",
    "Entry",
    "EntryKey",
    "Group",
]

type EntryKey = tuple[str, str | None]
"""Composite entry address: (key, locale tag or None for the base value)."""


@dataclass(slots=True)
class Entry:
    """Single ``key[locale]=value`` line.

    Attributes:
        key: Entry key (without locale qualifier)
        value: Raw value, still escaped
        locale: Locale tag as written in the source, or None
        comment: Comment attached above the entry
    """

    key: str
    value: str
    locale: str | None = None
    comment: str = ""

    @property
    def entry_key(self) -> EntryKey:
        return (self.key, self.locale)

    @property
    def display_key(self) -> str:
        """Key as written in the file: ``key`` or ``key[locale]``."""
        return f"{self.key}[{self.locale}]" if self.locale else self.key


@dataclass(slots=True)
class Group:
    """Named group of entries introduced by a ``[name]`` header.

    Attributes:
        name: Group name (trimmed)
        comment: Comment attached above the header
        entries: Entries by (key, locale), in declaration order
    """

    name: str
    comment: str = ""
    entries: dict[EntryKey, Entry] = field(default_factory=dict)

    def get_entry(self, key: str, locale: str | None = None) -> Entry | None:
        return self.entries.get((key, locale))

    def set_entry(
        self,
        key: str,
        value: str,
        locale: str | None = None,
        comment: str | None = None,
    ) -> Entry:
        """Create an entry or overwrite an existing one in place.

        Args:
            key: Entry key
            value: Raw value
            locale: Locale tag, or None for the base value
            comment: New comment; None keeps the existing one

        Returns:
            The created or updated entry
        """
        entry = self.entries.get((key, locale))
        if entry is None:
            entry = Entry(key, value, locale, comment or "")
            self.entries[entry.entry_key] = entry
        else:
            entry.value = value
            if comment is not None:
                entry.comment = comment
        return entry

    def remove_entry(self, key: str, locale: str | None = None) -> Entry | None:
        return self.entries.pop((key, locale), None)

    def remove_key(self, key: str) -> int:
        """Remove the base entry and every localized variant of ``key``.

        Returns:
            Number of entries removed
        """
        doomed = [entry_key for entry_key in self.entries if entry_key[0] == key]
        for entry_key in doomed:
            del self.entries[entry_key]
        return len(doomed)

    def has_key(self, key: str) -> bool:
        return any(entry_key[0] == key for entry_key in self.entries)

    def keys(self) -> list[str]:
        """Unique logical keys in order of first appearance."""
        return list(dict.fromkeys(key for key, _ in self.entries))

    def locales_for(self, key: str) -> list[str]:
        """Locale tags stored for ``key``, in declaration order."""
        return [locale for k, locale in self.entries if k == key and locale is not None]

    def merge_comment(self, comment: str) -> None:
        """Append a re-declaration's comment, separated by a blank comment line."""
        if not comment:
            return
        if self.comment:
            self.comment = f"{self.comment.rstrip("\n")}\n\n{comment}"
        else:
            self.comment = comment

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries.values())


@dataclass(slots=True)
class Document:
    """Parsed key file.

    Attributes:
        groups: Groups by name, in declaration order
        start_comment: Comment block at the top of the file
        end_comment: Comment block left over after the last entry
        list_separator: Separator used by list accessors
    """

    groups: dict[str, Group] = field(default_factory=dict)
    start_comment: str = ""
    end_comment: str = ""
    list_separator: str = DEFAULT_LIST_SEPARATOR

    def get_group(self, name: str) -> Group | None:
        return self.groups.get(name)

    def ensure_group(self, name: str) -> Group:
        """Return the group named ``name``, creating it at the end if needed."""
        group = self.groups.get(name)
        if group is None:
            group = self.groups[name] = Group(name)
        return group

    def remove_group(self, name: str) -> Group | None:
        return self.groups.pop(name, None)

    def __iter__(self) -> Iterator[Group]:
        return iter(self.groups.values())
