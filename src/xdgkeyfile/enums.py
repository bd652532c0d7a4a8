"""Enumerations for xdgkeyfile type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class LineKind(StrEnum):
    """Classification of a trimmed physical line.

    StrEnum provides automatic string conversion: str(LineKind.ENTRY) == "entry"
    """

    BLANK = "blank"
    """Empty line (after trimming)"""

    COMMENT = "comment"
    """Comment line: # This is a comment"""

    GROUP_HEADER = "group_header"
    """Group header: [Desktop Entry]"""

    ENTRY = "entry"
    """Key/value entry: Name[fr]=Bonjour"""


class ValueType(StrEnum):
    """Typed interpretation of a raw value.

    Used by the typed accessors to report which decoding failed.
    """

    STRING = "string"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"


__all__ = [
    "LineKind",
    "ValueType",
]
