"""Key file syntax package.

Provides the line scanner, value codec, document model, parser and
serializer. Independent of the KeyFile facade so tooling can work on the
document model directly.

Python 3.13+.
"""

from xdgkeyfile.locale import LocaleLike

from .codec import (
    decode_list,
    decode_string,
    decode_value,
    encode_comment,
    encode_list,
    encode_value,
    format_boolean,
    format_float,
    format_integer,
    parse_boolean,
    parse_float,
    parse_integer,
)
from .model import Document, Entry, EntryKey, Group
from .parser import KeyFileParser, ParsedEntry
from .scanner import classify_line, split_lines
from .serializer import KeyFileSerializer, serialize
from .validation_helpers import (
    validate_group_name,
    validate_key,
    validate_list_separator,
    validate_locale_qualifier,
)


def parse(
    source: str,
    *,
    keep_comments: bool = True,
    locale: LocaleLike = None,
    max_source_size: int | None = None,
) -> Document:
    """Parse key file source into a Document.

    Convenience function for KeyFileParser.parse().

    Args:
        source: Key file content
        keep_comments: Preserve comment blocks (default: True)
        locale: Locale filter for localized entries (default: keep all)
        max_source_size: Maximum source size in characters (default: 10 MB)

    Returns:
        Parsed Document

    Raises:
        KeyFileParseError: On the first malformed line
        ValueError: If source exceeds max_source_size
    """
    parser = KeyFileParser(
        keep_comments=keep_comments,
        locale=locale,
        max_source_size=max_source_size,
    )
    return parser.parse(source)


__all__ = [
    "Document",
    "Entry",
    "EntryKey",
    "Group",
    "KeyFileParser",
    "KeyFileSerializer",
    "ParsedEntry",
    "classify_line",
    "decode_list",
    "decode_string",
    "decode_value",
    "encode_comment",
    "encode_list",
    "encode_value",
    "format_boolean",
    "format_float",
    "format_integer",
    "parse",
    "parse_boolean",
    "parse_float",
    "parse_integer",
    "serialize",
    "split_lines",
    "validate_group_name",
    "validate_key",
    "validate_list_separator",
    "validate_locale_qualifier",
]
