"""Reading and writing key files on disk.

Thin pathlib-based helpers around :class:`~xdgkeyfile.keyfile.KeyFile`.
Files are read and written as text with an explicit encoding (UTF-8 by
default); line endings are normalized by the parser, and written output
always uses LF.

Python 3.13+.
"""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path

from xdgkeyfile.diagnostics import KeyFileParseError
from xdgkeyfile.keyfile import KeyFile
from xdgkeyfile.locale import LocaleLike

__all__ = ["dump_keyfile", "load_keyfile"]

logger = logging.getLogger(__name__)

type StrPath = str | PathLike[str]


def load_keyfile(
    path: StrPath,
    *,
    encoding: str = "utf-8",
    locale: LocaleLike = None,
    keep_comments: bool = True,
) -> KeyFile:
    """Read and parse a key file.

    Args:
        path: File to read
        encoding: Text encoding (default: UTF-8)
        locale: Locale filter for translations (default: keep all)
        keep_comments: Preserve comment blocks (default: True)

    Returns:
        Parsed KeyFile

    Raises:
        FileNotFoundError: If the file doesn't exist
        OSError: If the file cannot be read
        KeyFileParseError: If the content is malformed

    Example:
        >>> keyfile = load_keyfile("/usr/share/applications/org.gnome.Nautilus.desktop")
        >>> keyfile.get_string("Desktop Entry", "Exec")
        'nautilus --new-window %U'
    """
    source_path = Path(path)
    source = source_path.read_text(encoding=encoding)
    try:
        return KeyFile.parse(source, locale=locale, keep_comments=keep_comments)
    except KeyFileParseError as e:
        logger.error("Failed to parse key file %s: %s", source_path, e.diagnostic or e)
        raise


def dump_keyfile(keyfile: KeyFile, path: StrPath, *, encoding: str = "utf-8") -> None:
    """Serialize a KeyFile and write it to ``path``.

    Args:
        keyfile: Document to write
        path: Destination file (created or truncated)
        encoding: Text encoding (default: UTF-8)

    Raises:
        OSError: If the file cannot be written
    """
    target = Path(path)
    target.write_text(keyfile.to_text(), encoding=encoding, newline="\n")
    logger.debug("Wrote key file %s (%d groups)", target, len(keyfile))
