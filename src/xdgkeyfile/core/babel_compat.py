"""Babel compatibility layer for optional dependency handling.

Provides centralized, lazy import infrastructure for Babel to ensure consistent
error messaging and import behavior across all Babel-dependent modules.

Design Rationale:
    xdgkeyfile supports two installation modes:
    - Core: `pip install xdgkeyfile` (no external dependencies)
    - With locale canonicalization: `pip install xdgkeyfile[babel]`

    Babel is only needed when a locale tag does not match the POSIX grammar
    (``lang_TERRITORY.encoding@modifier``) and has to be canonicalized from
    another form such as BCP-47 (``fr-Latn-BE``). This module ensures that:
    1. Core installations never trigger Babel imports
    2. The canonicalizer reports "no result" instead of failing on import
    3. Babel is imported lazily, on the first non-POSIX tag

Usage Pattern:
    from xdgkeyfile.core.babel_compat import babel_canonicalize

    canonical = babel_canonicalize("fr-Latn-BE")
    # CanonicalLocale(language='fr', territory='BE', script='Latn', variant=None)

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import lru_cache

__all__ = [
    "CanonicalLocale",
    "Canonicalizer",
    "babel_canonicalize",
    "is_babel_available",
]


@dataclass(frozen=True, slots=True)
class CanonicalLocale:
    """Result of canonicalizing a non-POSIX locale tag.

    Attributes:
        language: Lowercase language code
        territory: Uppercase territory/region code, if any
        script: Script subtag (``Latn``), if any
        variant: Variant or modifier subtag, if any
    """

    language: str
    territory: str | None = None
    script: str | None = None
    variant: str | None = None


type Canonicalizer = Callable[[str], CanonicalLocale | None]
"""Locale canonicalization capability: returns None when the tag is not understood."""


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


def is_babel_available() -> bool:
    """Check if Babel is installed.

    Uses a cached result to avoid repeated import attempts.

    Returns:
        True if Babel is installed and importable, False otherwise.
    """
    return _check_babel_available()


def babel_canonicalize(tag: str) -> CanonicalLocale | None:
    """Canonicalize a hyphen-separated locale tag with Babel.

    Uses ``babel.core.parse_locale`` which understands BCP-47 style tags
    (``fr-Latn-BE``, ``ll-CC@foo``, ``fr-fr-latin``) without requiring CLDR
    data for the locale itself.

    Args:
        tag: Locale tag that failed the POSIX grammar

    Returns:
        CanonicalLocale, or None if Babel is unavailable or rejects the tag

    Example:
        >>> babel_canonicalize("fr-Latn-BE")
        CanonicalLocale(language='fr', territory='BE', script='Latn', variant=None)
        >>> babel_canonicalize("$$$") is None
        True
    """
    if not _check_babel_available():
        return None
    from babel.core import parse_locale  # noqa: PLC0415

    try:
        parts = parse_locale(tag, sep="-")
    except ValueError:
        return None

    # parse_locale returns a 5-tuple only when an @modifier is present
    language, territory, script, variant, *rest = parts
    modifier = rest[0] if rest else None
    return CanonicalLocale(
        language=language,
        territory=territory,
        script=script,
        variant=variant or modifier,
    )
