"""Key file parser module.

This module provides the KeyFileParser class and the line grammar rules it
is built on.

Module Organization:
- core.py: KeyFileParser class (line dispatch, comments, locale filtering)
- rules.py: Grammar rules for group headers and entries

Public API:
    KeyFileParser: Main parser class
    ParsedEntry: Result of parsing one entry line (advanced usage)
"""

from xdgkeyfile.syntax.parser.core import KeyFileParser
from xdgkeyfile.syntax.parser.rules import ParsedEntry, parse_entry, parse_group_header

__all__ = ["KeyFileParser", "ParsedEntry", "parse_entry", "parse_group_header"]
