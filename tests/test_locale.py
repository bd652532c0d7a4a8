"""Tests for xdgkeyfile.locale: parsing, variants, matching and selectors.

Includes property-based tests with Hypothesis for variant ordering.

Python 3.13+.
"""

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from tests.strategies import locale_tags
from xdgkeyfile.core.babel_compat import CanonicalLocale
from xdgkeyfile.diagnostics import DiagnosticCode, InvalidLocaleError
from xdgkeyfile.locale import (
    NO_LOCALE,
    SUPPRESS_ALL_LOCALES,
    Locale,
    LocaleTag,
    NoLocale,
    SuppressAllLocales,
    as_locale_selector,
    clear_locale_cache,
)

ALL_VARIANTS = [
    "ll_CC.foo@bar",
    "ll_CC@bar",
    "ll.foo@bar",
    "ll@bar",
    "ll_CC.foo",
    "ll_CC",
    "ll.foo",
    "ll",
]


class TestLocaleParse:
    """Test Locale.parse and Locale.of."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("ll", Locale("ll")),
            ("ll@bar", Locale("ll", None, None, "bar")),
            ("ll_CC", Locale("ll", "CC")),
            ("ll.foo", Locale("ll", None, "foo")),
            ("ll.foo@bar", Locale("ll", None, "foo", "bar")),
            ("ll_CC@bar", Locale("ll", "CC", None, "bar")),
            ("ll_CC.foo", Locale("ll", "CC", "foo")),
            ("ll_CC.foo@bar", Locale("ll", "CC", "foo", "bar")),
            ("ast_ES", Locale("ast", "ES")),
        ],
    )
    def test_posix_tags(self, text: str, expected: Locale) -> None:
        """POSIX tags are parsed by the strict grammar."""
        assert Locale.parse(text) == expected
        assert Locale.of(text) == expected

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("ll-CC", Locale("ll", "CC")),
            ("ll-CC@foo", Locale("ll", "CC", None, "foo")),
            ("fr-Latn-BE", Locale("fr", "BE", None, "latn")),
            ("fr-fr-latin", Locale("fr", "FR", None, "latin")),
        ],
    )
    def test_non_posix_tags_use_babel(self, text: str, expected: Locale) -> None:
        """Hyphenated tags fall back to the Babel canonicalizer."""
        assert Locale.parse(text) == expected

    @pytest.mark.parametrize("text", ["", "$$$", "e", "english", "LL_cc", "12_CC"])
    def test_invalid_tags(self, text: str) -> None:
        """Tags neither grammar understands raise InvalidLocaleError."""
        with pytest.raises(InvalidLocaleError) as exc_info:
            Locale.parse(text)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.INVALID_LOCALE

    def test_invalid_locale_is_value_error(self) -> None:
        """InvalidLocaleError can be caught as ValueError."""
        with pytest.raises(ValueError, match="Invalid locale"):
            Locale.parse("$$$")

    def test_injected_canonicalizer(self) -> None:
        """A custom canonicalizer replaces Babel."""
        seen: list[str] = []

        def canonicalize(tag: str) -> CanonicalLocale | None:
            seen.append(tag)
            return CanonicalLocale("sr", "RS", script="Latn")

        assert Locale.parse("serbian-latin", canonicalize=canonicalize) == Locale(
            "sr", "RS", None, "latn"
        )
        assert seen == ["serbian-latin"]

    def test_injected_canonicalizer_not_called_for_posix(self) -> None:
        """POSIX tags never reach the canonicalizer."""

        def canonicalize(tag: str) -> CanonicalLocale | None:
            pytest.fail(f"canonicalizer called for {tag!r}")

        assert Locale.parse("de_DE", canonicalize=canonicalize) == Locale("de", "DE")

    def test_canonicalizer_rejecting_tag(self) -> None:
        """A canonicalizer returning None means the tag is invalid."""
        with pytest.raises(InvalidLocaleError):
            Locale.parse("whatever", canonicalize=lambda _tag: None)

    def test_canonicalizer_result_language_checked(self) -> None:
        """Canonicalized languages must still be 2-3 lowercase letters."""
        with pytest.raises(InvalidLocaleError):
            Locale.parse("x-y", canonicalize=lambda _tag: CanonicalLocale("x"))

    def test_canonicalizer_variant_becomes_modifier(self) -> None:
        """Without a script, the variant becomes the lowercased modifier."""
        locale = Locale.parse(
            "ca-ES-VALENCIA",
            canonicalize=lambda _tag: CanonicalLocale("ca", "ES", variant="VALENCIA"),
        )
        assert str(locale) == "ca_ES@valencia"

    def test_of_returns_locale_unchanged(self) -> None:
        """Locale.of is the identity on Locale instances."""
        locale = Locale("ll")
        assert Locale.of(locale) is locale

    def test_of_is_memoized(self) -> None:
        """Repeated string parses share one Locale instance."""
        assert Locale.of("fr_FR") is Locale.of("fr_FR")

    def test_clear_locale_cache(self) -> None:
        """clear_locale_cache() drops memoized parses."""
        first = Locale.of("fr_FR")
        clear_locale_cache()
        second = Locale.of("fr_FR")
        assert first == second
        assert first is not second


class TestLocaleString:
    """Test canonical string rendering."""

    @pytest.mark.parametrize("text", ALL_VARIANTS)
    def test_str_round_trips(self, text: str) -> None:
        """str(Locale.parse(tag)) reproduces POSIX tags."""
        assert str(Locale.parse(text)) == text

    def test_value_property(self) -> None:
        """value is the canonical string form."""
        assert Locale("fr", "BE", None, "latn").value == "fr_BE@latn"


class TestLocaleVariants:
    """Test fallback variant computation."""

    @pytest.mark.parametrize(
        ("locale", "expected"),
        [
            (Locale("ll"), ["ll"]),
            (Locale("ll", None, None, "bar"), ["ll@bar", "ll"]),
            (Locale("ll", "CC"), ["ll_CC", "ll"]),
            (Locale("ll", None, "foo"), ["ll.foo", "ll"]),
            (Locale("ll", None, "foo", "bar"), ["ll.foo@bar", "ll@bar", "ll.foo", "ll"]),
            (Locale("ll", "CC", None, "bar"), ["ll_CC@bar", "ll@bar", "ll_CC", "ll"]),
            (Locale("ll", "CC", "foo"), ["ll_CC.foo", "ll_CC", "ll.foo", "ll"]),
            (Locale("ll", "CC", "foo", "bar"), ALL_VARIANTS),
        ],
    )
    def test_variant_order(self, locale: Locale, expected: list[str]) -> None:
        """Variants run from most specific to the bare language."""
        assert list(locale.variants()) == expected

    @given(locale_tags())
    def test_variants_properties(self, tag: str) -> None:
        """Variants start with the locale itself and end with its language."""
        locale = Locale.parse(tag)
        variants = locale.variants()
        event(f"variant_count={len(variants)}")
        assert variants[0] == tag
        assert variants[-1] == locale.language
        assert len(variants) == len(set(variants))
        assert len(variants) in (1, 2, 4, 8)

    @given(locale_tags())
    def test_every_variant_matches(self, tag: str) -> None:
        """A locale matches each of its own variants."""
        locale = Locale.parse(tag)
        assert all(locale.matches(variant) for variant in locale.variants())


class TestLocaleMatches:
    """Test Locale.matches against strings and Locale objects."""

    @pytest.mark.parametrize(
        ("locale", "matching"),
        [
            (Locale("ll"), {"ll"}),
            (Locale("ll", None, None, "bar"), {"ll@bar", "ll"}),
            (Locale("ll", "CC"), {"ll_CC", "ll"}),
            (Locale("ll", None, "foo"), {"ll.foo", "ll"}),
            (Locale("ll", "CC", "foo", "bar"), set(ALL_VARIANTS)),
        ],
    )
    def test_matches(self, locale: Locale, matching: set[str]) -> None:
        """Only the locale's own variants match, as strings or objects."""
        for candidate in ALL_VARIANTS:
            expected = candidate in matching
            assert locale.matches(candidate) is expected
            assert locale.matches(Locale.of(candidate)) is expected

    def test_different_language(self) -> None:
        """Different languages never match."""
        assert not Locale("ll").matches("fr")


class TestLocaleSelect:
    """Test Locale.select."""

    def test_select_nothing(self) -> None:
        """No variant present returns None."""
        assert Locale("ll").select(["fr"]) is None

    def test_select_present(self) -> None:
        """A present variant is returned."""
        assert Locale("ll").select(["fr", "ll"]) == "ll"

    def test_select_most_specific(self) -> None:
        """The most specific present variant wins."""
        locale = Locale.parse("fr_FR.UTF-8@anywhere")
        assert locale.select(["fr", "fr_FR"]) == "fr_FR"
        assert Locale.parse("fr_BE").select(["fr", "fr_FR"]) == "fr"

    def test_select_accepts_any_iterable(self) -> None:
        """Generators are accepted as candidates."""
        assert Locale("de", "AT").select(tag for tag in ("de", "en")) == "de"


class TestLocaleSelectors:
    """Test as_locale_selector coercion."""

    @pytest.mark.parametrize("value", [None, "", True])
    def test_no_locale(self, value: object) -> None:
        """None, empty string and True select the base value."""
        assert as_locale_selector(value) == NO_LOCALE  # type: ignore[arg-type]

    def test_false_suppresses_all(self) -> None:
        """False suppresses every translation."""
        assert as_locale_selector(False) == SUPPRESS_ALL_LOCALES

    def test_string_becomes_tag(self) -> None:
        """Strings are parsed into a LocaleTag."""
        assert as_locale_selector("fr_FR") == LocaleTag(Locale("fr", "FR"))

    def test_locale_becomes_tag(self) -> None:
        """Locale instances are wrapped."""
        locale = Locale("de")
        assert as_locale_selector(locale) == LocaleTag(locale)

    @pytest.mark.parametrize(
        "selector",
        [NoLocale(), SuppressAllLocales(), LocaleTag(Locale("en", "US"))],
    )
    def test_selectors_unchanged(self, selector: object) -> None:
        """Selector instances pass through unchanged."""
        assert as_locale_selector(selector) is selector  # type: ignore[arg-type]

    def test_invalid_string(self) -> None:
        """Unparseable strings raise InvalidLocaleError."""
        with pytest.raises(InvalidLocaleError):
            as_locale_selector("$$$")

    def test_unsupported_type(self) -> None:
        """Other types are rejected."""
        with pytest.raises(TypeError, match="Unsupported locale argument"):
            as_locale_selector(42)  # type: ignore[arg-type]

    def test_locale_tag_str(self) -> None:
        """LocaleTag renders as its locale."""
        assert str(LocaleTag(Locale("sr", "RS", None, "latin"))) == "sr_RS@latin"

    @given(st.sampled_from(["fr", "fr_FR", "de_DE.UTF-8", "sr@latin"]))
    def test_tag_round_trip(self, tag: str) -> None:
        """Selector built from a tag renders back to the same tag."""
        assert str(as_locale_selector(tag)) == tag
