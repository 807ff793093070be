"""Unit tests for language, bilingual and direction helpers."""

import pytest

from cms_render.i18n import (
    AlignToken,
    BilingualText,
    Direction,
    Language,
    TextAlign,
    coerce_language,
    detect_language,
    is_rtl,
    margin_class,
    opposite_language,
    padding_class,
    physical_to_logical,
    pick_localized,
    resolve_alignment,
    resolve_direction,
    resolve_side,
    resolve_text,
)


class TestCoerceLanguage:
    """Tests for the locale boundary."""

    @pytest.mark.unit
    def test_supported_values(self):
        """Supported codes map to Language members."""
        assert coerce_language("en") is Language.EN
        assert coerce_language("ar") is Language.AR
        assert coerce_language(Language.AR) is Language.AR

    @pytest.mark.unit
    def test_normalizes_case_and_whitespace(self):
        """Codes are matched case-insensitively."""
        assert coerce_language(" AR ") is Language.AR

    @pytest.mark.unit
    def test_unsupported_falls_back(self):
        """Third languages never pass through."""
        assert coerce_language("fr") is Language.EN
        assert coerce_language(None) is Language.EN
        assert coerce_language(42) is Language.EN

    @pytest.mark.unit
    def test_custom_default(self):
        """Fallback language is configurable."""
        assert coerce_language("de", default=Language.AR) is Language.AR

    @pytest.mark.unit
    def test_opposite_language(self):
        """Language switch targets the other language."""
        assert opposite_language(Language.EN) is Language.AR
        assert opposite_language(Language.AR) is Language.EN


class TestDetectLanguage:
    """Tests for request language detection."""

    @pytest.mark.unit
    def test_cookie_wins(self):
        """A valid cookie overrides the header."""
        assert detect_language("ar-EG,ar;q=0.9", cookie="en") is Language.EN

    @pytest.mark.unit
    def test_invalid_cookie_ignored(self):
        """Unsupported cookie values are ignored."""
        assert detect_language("ar", cookie="fr") is Language.AR

    @pytest.mark.unit
    def test_arabic_header(self):
        """Arabic tags in Accept-Language select Arabic."""
        assert detect_language("en-US,en;q=0.8,ar-SA;q=0.5") is Language.AR

    @pytest.mark.unit
    def test_no_signal(self):
        """No header and no cookie selects the default."""
        assert detect_language() is Language.EN
        assert detect_language("en-GB,fr;q=0.5") is Language.EN


class TestResolveText:
    """Tests for bilingual text resolution."""

    @pytest.mark.unit
    def test_none_is_empty(self):
        """Missing values resolve to an empty string in every language."""
        assert resolve_text(None, Language.EN) == ""
        assert resolve_text(None, Language.AR) == ""

    @pytest.mark.unit
    def test_plain_string_unchanged(self):
        """Plain strings are language-neutral."""
        assert resolve_text("Emtelaak", Language.AR) == "Emtelaak"

    @pytest.mark.unit
    @pytest.mark.parametrize("language", [Language.EN, Language.AR])
    def test_record_picks_language(self, language):
        """Arabic text is returned only for Arabic."""
        value = BilingualText(en="Hello", ar="مرحبا")
        expected = "مرحبا" if language == Language.AR else "Hello"
        assert resolve_text(value, language) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [{"en": "Hello"}, {"en": "Hello", "ar": ""}])
    def test_missing_or_empty_arabic_falls_back(self, value):
        """Arabic is never silently empty."""
        assert resolve_text(value, Language.AR) == "Hello"
        assert resolve_text(BilingualText(**value), "ar") == "Hello"

    @pytest.mark.unit
    def test_mapping_accepted(self):
        """Raw mappings resolve like records."""
        assert resolve_text({"en": "Hi", "ar": "أهلا"}, "ar") == "أهلا"

    @pytest.mark.unit
    def test_pick_localized(self):
        """Sibling Arabic fields are used only when non-empty."""
        assert pick_localized("Home", "الرئيسية", Language.AR) == "الرئيسية"
        assert pick_localized("Home", None, Language.AR) == "Home"
        assert pick_localized("Home", "الرئيسية", Language.EN) == "Home"


class TestDirection:
    """Tests for writing direction."""

    @pytest.mark.unit
    def test_arabic_is_rtl(self):
        """Arabic maps to rtl."""
        assert resolve_direction(Language.AR) is Direction.RTL
        assert is_rtl("ar")

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [Language.EN, "en", "fr", ""])
    def test_everything_else_is_ltr(self, value):
        """Every non-Arabic value maps to ltr."""
        assert resolve_direction(value) is Direction.LTR


class TestResolveAlignment:
    """Tests for RTL-aware alignment tokens."""

    @pytest.mark.unit
    def test_absent_is_neutral(self):
        """No alignment means no token, never a guess."""
        assert resolve_alignment(None, Language.AR) is AlignToken.NONE
        assert AlignToken.NONE.value == ""

    @pytest.mark.unit
    @pytest.mark.parametrize("keyword", ["left", "right", "center", "justify"])
    def test_physical_keywords_invariant(self, keyword):
        """Physical keywords ignore direction."""
        assert resolve_alignment(keyword, Language.EN) == resolve_alignment(
            keyword, Language.AR
        )

    @pytest.mark.unit
    def test_logical_keywords_mirror(self):
        """start/end land on opposite sides in ltr and rtl."""
        assert resolve_alignment("start", Language.EN) is AlignToken.LEFT
        assert resolve_alignment("start", Language.AR) is AlignToken.RIGHT
        assert resolve_alignment(TextAlign.END, Language.EN) is AlignToken.RIGHT
        assert resolve_alignment(TextAlign.END, Language.AR) is AlignToken.LEFT

    @pytest.mark.unit
    def test_unknown_keyword_rejected(self):
        """Unrecognised keywords raise ValueError."""
        with pytest.raises(ValueError):
            resolve_alignment("middle", Language.EN)


class TestSides:
    """Tests for side helpers."""

    @pytest.mark.unit
    def test_resolve_side(self):
        """Logical sides mirror, physical sides pass through."""
        assert resolve_side("start", "en") == "left"
        assert resolve_side("start", "ar") == "right"
        assert resolve_side("left", "ar") == "left"
        with pytest.raises(ValueError):
            resolve_side("top", "en")

    @pytest.mark.unit
    def test_physical_to_logical(self):
        """Physical sides convert back to logical ones."""
        assert physical_to_logical("left", "en") == "start"
        assert physical_to_logical("left", "ar") == "end"
        assert physical_to_logical("right", "ar") == "start"

    @pytest.mark.unit
    def test_spacing_classes(self):
        """Spacing classes follow the resolved side."""
        assert margin_class("start", "4", "en") == "ml-4"
        assert margin_class("start", "4", "ar") == "mr-4"
        assert padding_class("end", "2", "ar") == "pl-2"
