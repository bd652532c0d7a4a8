"""Tests for xdgkeyfile.syntax.scanner: line splitting and classification."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from xdgkeyfile.enums import LineKind
from xdgkeyfile.syntax.scanner import classify_line, split_lines


class TestSplitLines:
    """Test split_lines line break handling."""

    @pytest.mark.parametrize(
        ("buffer", "expected"),
        [
            ("", [""]),
            ("foo", ["foo"]),
            ("foo\nbar", ["foo", "bar"]),
            ("foo\rbar", ["foo", "bar"]),
            ("foo\r\nbar", ["foo", "bar"]),
            ("foo\n\rbar", ["foo", "", "bar"]),
            ("a\r\nb\rc\nd", ["a", "b", "c", "d"]),
            ("foo\n", ["foo", ""]),
        ],
    )
    def test_line_breaks(self, buffer: str, expected: list[str]) -> None:
        """CRLF, CR and LF all terminate a line."""
        assert split_lines(buffer) == expected

    @pytest.mark.parametrize("char", ["\x0b", "\x0c", "\x1c", "\x85", " "])
    def test_other_breaks_are_literal(self, char: str) -> None:
        """Characters str.splitlines() would split on stay inside the line."""
        assert split_lines(f"a{char}b") == [f"a{char}b"]

    @given(st.lists(st.text(alphabet="ab \t#=[]"), min_size=1, max_size=8))
    def test_join_split_inverse(self, lines: list[str]) -> None:
        """Splitting text joined with LF gives the lines back."""
        assert split_lines("\n".join(lines)) == lines


class TestClassifyLine:
    """Test classify_line."""

    @pytest.mark.parametrize(
        ("line", "kind"),
        [
            ("", LineKind.BLANK),
            ("# comment", LineKind.COMMENT),
            ("#", LineKind.COMMENT),
            ("[Desktop Entry]", LineKind.GROUP_HEADER),
            ("[broken", LineKind.GROUP_HEADER),
            ("Name=Files", LineKind.ENTRY),
            ("garbage", LineKind.ENTRY),
            ("=value", LineKind.ENTRY),
        ],
    )
    def test_classification(self, line: str, kind: LineKind) -> None:
        """Lines are classified by their first character only."""
        assert classify_line(line) is kind
