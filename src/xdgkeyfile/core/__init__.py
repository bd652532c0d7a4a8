"""Core utilities shared across the syntax layer and the facade.

This package isolates optional third-party integration so the grammar
modules keep a clean dependency graph:

    core <- locale <- syntax <- keyfile

Exports:
    CanonicalLocale: Result of canonicalizing a non-POSIX locale tag
    Canonicalizer: Type of the injectable canonicalization capability
    babel_canonicalize: Default Babel-backed canonicalizer
    is_babel_available: Whether the optional Babel dependency is installed

Python 3.13+.
"""

from .babel_compat import (
    CanonicalLocale,
    Canonicalizer,
    babel_canonicalize,
    is_babel_available,
)

__all__ = [
    "CanonicalLocale",
    "Canonicalizer",
    "babel_canonicalize",
    "is_babel_available",
]
