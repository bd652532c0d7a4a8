"""Tests for the document model: Entry, Group and Document."""

from xdgkeyfile.syntax import Document, Entry, Group


class TestEntry:
    """Test Entry addressing."""

    def test_base_entry(self) -> None:
        """Base entries display as their key."""
        entry = Entry("Name", "Files")
        assert entry.entry_key == ("Name", None)
        assert entry.display_key == "Name"

    def test_localized_entry(self) -> None:
        """Localized entries display as key[locale]."""
        entry = Entry("Name", "Fichiers", "fr")
        assert entry.entry_key == ("Name", "fr")
        assert entry.display_key == "Name[fr]"


class TestGroup:
    """Test Group entry management."""

    def test_set_entry_creates_and_updates(self) -> None:
        """set_entry appends new entries and updates existing ones in place."""
        group = Group("A")
        first = group.set_entry("k", "1", comment="c")
        group.set_entry("j", "2")
        second = group.set_entry("k", "3")
        assert first is second
        assert [entry.value for entry in group] == ["3", "2"]
        assert first.comment == "c"

    def test_set_entry_replaces_comment(self) -> None:
        """A non-None comment replaces the existing one."""
        group = Group("A")
        group.set_entry("k", "1", comment="old")
        assert group.set_entry("k", "2", comment="").comment == ""

    def test_keys_and_locales(self) -> None:
        """Logical keys are unique; locales are listed per key."""
        group = Group("A")
        group.set_entry("k", "base")
        group.set_entry("k", "fr", "fr")
        group.set_entry("j", "x")
        group.set_entry("k", "de", "de")
        assert group.keys() == ["k", "j"]
        assert group.locales_for("k") == ["fr", "de"]
        assert group.locales_for("j") == []
        assert group.has_key("k")
        assert not group.has_key("missing")

    def test_remove(self) -> None:
        """Entries can be removed singly or per logical key."""
        group = Group("A")
        group.set_entry("k", "base")
        group.set_entry("k", "fr", "fr")
        group.set_entry("j", "x")
        assert group.remove_entry("k", "fr") is not None
        assert group.remove_entry("k", "fr") is None
        group.set_entry("k", "de", "de")
        assert group.remove_key("k") == 2
        assert group.keys() == ["j"]

    def test_merge_comment(self) -> None:
        """Merged comments are separated by one blank comment line."""
        group = Group("A", comment="first\n\n")
        group.merge_comment("second\n")
        assert group.comment == "first\n\nsecond\n"
        group.merge_comment("")
        assert group.comment == "first\n\nsecond\n"

    def test_merge_into_empty_comment(self) -> None:
        """Merging into an uncommented group just sets the comment."""
        group = Group("A")
        group.merge_comment("only\n")
        assert group.comment == "only\n"


class TestDocument:
    """Test Document group management."""

    def test_defaults(self) -> None:
        """A new document is empty with ';' as list separator."""
        document = Document()
        assert document.groups == {}
        assert document.list_separator == ";"

    def test_ensure_group(self) -> None:
        """ensure_group creates once and returns the same group after."""
        document = Document()
        group = document.ensure_group("A")
        assert document.ensure_group("A") is group
        assert document.get_group("A") is group
        assert [g.name for g in document] == ["A"]

    def test_remove_group(self) -> None:
        """remove_group returns the removed group, or None."""
        document = Document()
        document.ensure_group("A")
        assert document.remove_group("A") is not None
        assert document.remove_group("A") is None
        assert document.get_group("A") is None
