"""Serialize a key file Document back to text.

Converts the document model to key file source. Useful for:
- Writing edited desktop entries back to disk
- Normalizing hand-written files
- Property-based testing (roundtrip: parse -> serialize -> parse)

Layout:
    [start comment]
    <blank line>
    [group comment]
    [Group Name]
    [entry comment]
    key[locale]=raw value
    <blank line>
    ...
    <blank line>
    [end comment]

Empty blocks are omitted together with their separating blank line. The
output always ends with exactly one newline.

Python 3.13+.
"""

from .codec import encode_comment
from .model import Document, Entry, Group

__all__ = ["KeyFileSerializer", "serialize"]


class KeyFileSerializer:
    """Converts a Document back to key file source.

    Thread-safe serializer with no mutable instance state.
    All serialization state is local to the serialize() call.

    Usage:
        >>> from xdgkeyfile.syntax import parse, KeyFileSerializer
        >>> document = parse("[Group]\\nKey = Value")
        >>> print(KeyFileSerializer().serialize(document), end="")
        [Group]
        Key=Value
    """

    def serialize(self, document: Document) -> str:
        """Serialize Document to key file text.

        Pure function - builds output locally without mutating instance state.

        Args:
            document: Document to render

        Returns:
            Key file source ending with a single newline
        """
        blocks: list[str] = []
        if document.start_comment:
            blocks.append(encode_comment(document.start_comment))
        for group in document.groups.values():
            blocks.append(self._serialize_group(group))
        if document.end_comment:
            blocks.append(encode_comment(document.end_comment))
        return "\n\n".join(block for block in blocks if block) + "\n"

    def _serialize_group(self, group: Group) -> str:
        output: list[str] = []
        if group.comment:
            output.append(encode_comment(group.comment))
        output.append(f"[{group.name}]")
        for entry in group.entries.values():
            self._serialize_entry(entry, output)
        return "\n".join(output)

    def _serialize_entry(self, entry: Entry, output: list[str]) -> None:
        if entry.comment:
            output.append(encode_comment(entry.comment))
        output.append(f"{entry.display_key}={entry.value}")


def serialize(document: Document) -> str:
    """Serialize Document to key file text.

    Convenience function for KeyFileSerializer.serialize().

    Args:
        document: Document to render

    Returns:
        Key file source ending with a single newline

    Example:
        >>> from xdgkeyfile.syntax import parse, serialize
        >>> document = parse("# eof\\n", keep_comments=True)
        >>> serialize(document)
        '# eof\\n'
    """
    return KeyFileSerializer().serialize(document)
