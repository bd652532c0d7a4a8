"""Locale tags for localized key file entries.

Localized entries carry a POSIX-style tag (``Name[fr_FR.UTF-8@euro]=...``).
This module parses such tags, computes the ordered fallback variants of a
locale and selects the best candidate among stored translations.

Locale Tag Grammar:
    lang(_TERRITORY)?(.encoding)?(@modifier)?

    - lang: 2-3 lowercase ASCII letters
    - TERRITORY: 2 uppercase ASCII letters
    - encoding: any run of characters other than '@'
    - modifier: the remainder after '@'

    Tags that do not match (e.g. BCP-47 ``fr-Latn-BE``) are handed to an
    injectable canonicalizer; the default one is Babel-backed.

Variant Ordering:
    Optional components are encoded as a bitmask (bit0 encoding, bit1
    territory, bit2 modifier). Every subset of the mask is enumerated from the
    mask down to 0, which yields a most-specific-first ordering:

        ll_CC.foo@bar -> ll_CC.foo@bar, ll_CC@bar, ll.foo@bar, ll@bar,
                         ll_CC.foo, ll_CC, ll.foo, ll

Locale Selectors:
    APIs that accept an optional locale take a closed set of selectors:
    NoLocale (base value / keep all translations), LocaleTag (a specific
    locale) and SuppressAllLocales (ignore every translation). Plain strings,
    Locale objects, None and False are coerced by as_locale_selector().

Python 3.13+.
"""

from __future__ import annotations

import functools
import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final

from xdgkeyfile.constants import MAX_LOCALE_CACHE_SIZE
from xdgkeyfile.core.babel_compat import Canonicalizer, babel_canonicalize
from xdgkeyfile.diagnostics import ErrorTemplate, InvalidLocaleError

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    "Locale",
    "clear_locale_cache",
    # Selectors
    "NoLocale",
    "LocaleTag",
    "SuppressAllLocales",
    "LocaleSelector",
    "LocaleLike",
    "NO_LOCALE",
    "SUPPRESS_ALL_LOCALES",
    "as_locale_selector",
]

# Bit positions of the optional components, least significant first.
_ENCODING: Final = 0x01
_TERRITORY: Final = 0x02
_MODIFIER: Final = 0x04

_LOCALE_PATTERN: re.Pattern[str] = re.compile(
    r"""
    (?P<lang> [a-z]{2,3} )
    (?: _ (?P<territory> [A-Z]{2} ) )?
    (?: \. (?P<encoding> [^@]+ ) )?
    (?: @ (?P<modifier> .+ ) )?
    """,
    re.VERBOSE,
)

_LANGUAGE_PATTERN: re.Pattern[str] = re.compile(r"[a-z]{2,3}")


@dataclass(frozen=True, slots=True)
class Locale:
    """Parsed locale tag.

    Immutable and hashable; the canonical string form is
    ``language[_territory][.encoding][@modifier]``.

    Attributes:
        language: 2-3 letter lowercase language code
        territory: Territory code (optional)
        encoding: Character encoding (optional)
        modifier: Modifier, e.g. ``euro`` or ``latn`` (optional)

    Example:
        >>> locale = Locale.parse("fr_FR.UTF-8@euro")
        >>> locale.territory
        'FR'
        >>> str(locale)
        'fr_FR.UTF-8@euro'
        >>> locale.select({"fr", "fr_FR"})
        'fr_FR'
    """

    language: str
    territory: str | None = None
    encoding: str | None = None
    modifier: str | None = None

    def __str__(self) -> str:
        return _render(self.language, self.territory, self.encoding, self.modifier)

    @property
    def value(self) -> str:
        """Canonical string form of the locale."""
        return str(self)

    @classmethod
    def parse(cls, text: str, *, canonicalize: Canonicalizer | None = None) -> Locale:
        """Parse a locale tag.

        The POSIX grammar is tried first. On failure the canonicalizer is
        consulted; its script (or variant) becomes the lowercased modifier.

        Args:
            text: Locale tag, e.g. ``fr_FR.UTF-8@euro`` or ``fr-Latn-BE``
            canonicalize: Fallback for non-POSIX tags (default: Babel-backed)

        Returns:
            Parsed Locale

        Raises:
            InvalidLocaleError: If neither the grammar nor the canonicalizer
                understands the tag
        """
        if match := _LOCALE_PATTERN.fullmatch(text):
            return cls(
                match["lang"],
                match["territory"],
                match["encoding"],
                match["modifier"],
            )

        canonical = (canonicalize or babel_canonicalize)(text) if text else None
        if canonical is not None and _LANGUAGE_PATTERN.fullmatch(canonical.language):
            modifier = (canonical.script or canonical.variant or "").lower()
            return cls(
                canonical.language,
                canonical.territory,
                None,
                modifier or None,
            )

        raise InvalidLocaleError(ErrorTemplate.invalid_locale(text))

    @classmethod
    def of(cls, value: Locale | str) -> Locale:
        """Return ``value`` if it is a Locale, otherwise parse it (memoized).

        Args:
            value: Locale instance or locale tag

        Returns:
            Locale instance

        Raises:
            InvalidLocaleError: If a string tag cannot be parsed
        """
        if isinstance(value, Locale):
            return value
        return _parse_cached(value)

    def variants(self) -> tuple[str, ...]:
        """Fallback variants, most specific first.

        Memoized per locale; the result is shared, hence a tuple.

        Returns:
            Tuple of locale strings ending with the bare language
        """
        return _compute_variants(self.language, self.territory, self.encoding, self.modifier)

    def matches(self, candidate: Locale | str) -> bool:
        """Check whether ``candidate`` equals this locale or one of its variants.

        Args:
            candidate: Locale or locale string

        Returns:
            True if the candidate is acceptable for this locale
        """
        value = str(candidate)
        return value == str(self) or value in self.variants()

    def select(self, candidates: Iterable[str]) -> str | None:
        """Pick the most specific variant present among ``candidates``.

        Args:
            candidates: Locale strings available (e.g. stored translations)

        Returns:
            The first variant found in ``candidates``, or None
        """
        if not isinstance(candidates, (set, frozenset, dict)):
            candidates = set(candidates)
        for variant in self.variants():
            if variant in candidates:
                return variant
        return None


def _render(
    language: str,
    territory: str | None,
    encoding: str | None,
    modifier: str | None,
) -> str:
    return (
        language
        + (f"_{territory}" if territory else "")
        + (f".{encoding}" if encoding else "")
        + (f"@{modifier}" if modifier else "")
    )


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _parse_cached(text: str) -> Locale:
    return Locale.parse(text)


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _compute_variants(
    language: str,
    territory: str | None,
    encoding: str | None,
    modifier: str | None,
) -> tuple[str, ...]:
    mask = (
        (_ENCODING if encoding else 0)
        | (_TERRITORY if territory else 0)
        | (_MODIFIER if modifier else 0)
    )
    return tuple(
        _render(
            language,
            territory if i & _TERRITORY else None,
            encoding if i & _ENCODING else None,
            modifier if i & _MODIFIER else None,
        )
        for i in range(mask, -1, -1)
        if (i & ~mask) == 0
    )


def clear_locale_cache() -> None:
    """Clear the memoized locale parses and variant lists.

    Useful in tests and long-running processes that have seen many
    distinct tags.
    """
    _parse_cached.cache_clear()
    _compute_variants.cache_clear()


# ============================================================================
# LOCALE SELECTORS
# ============================================================================


@dataclass(frozen=True, slots=True)
class NoLocale:
    """No locale given: read the base value, keep every translation when parsing."""


@dataclass(frozen=True, slots=True)
class LocaleTag:
    """A specific locale: resolve translations against it."""

    locale: Locale

    def __str__(self) -> str:
        return str(self.locale)


@dataclass(frozen=True, slots=True)
class SuppressAllLocales:
    """Ignore translations entirely: drop them when parsing, read base values only."""


type LocaleSelector = NoLocale | LocaleTag | SuppressAllLocales

type LocaleLike = LocaleSelector | Locale | str | bool | None
"""Anything accepted where a locale argument is expected."""

NO_LOCALE: Final = NoLocale()
SUPPRESS_ALL_LOCALES: Final = SuppressAllLocales()


def as_locale_selector(value: LocaleLike) -> LocaleSelector:
    """Coerce a loosely typed locale argument into a selector.

    Mapping:
        None, "", True -> NoLocale
        False -> SuppressAllLocales
        Locale, non-empty str -> LocaleTag
        selector instances -> unchanged

    Args:
        value: Locale argument as passed by the caller

    Returns:
        One of NoLocale, LocaleTag, SuppressAllLocales

    Raises:
        InvalidLocaleError: If a string tag cannot be parsed
    """
    match value:
        case NoLocale() | LocaleTag() | SuppressAllLocales():
            return value
        case False:
            return SUPPRESS_ALL_LOCALES
        case None | True | "":
            return NO_LOCALE
        case Locale():
            return LocaleTag(value)
        case str():
            return LocaleTag(Locale.of(value))
    msg = f"Unsupported locale argument: {value!r}"
    raise TypeError(msg)
