"""Unit tests for output formatting."""

import pytest

from cms_render.i18n import Language
from cms_render.output import OutputGenerator, format_component_tree
from cms_render.validation import validate_page

PAGE = {
    "root": {
        "id": "root",
        "type": "Container",
        "children": [
            {
                "id": "hero",
                "type": "HeroSection",
                "props": {"title": {"en": "Invest", "ar": "استثمر"}, "ctaLink": "/signup"},
            },
            {
                "id": "cols",
                "type": "Columns",
                "props": {"columns": 3},
                "children": [
                    {"id": "h1", "type": "Heading", "props": {"text": "Transparent", "level": "h3"}},
                    {"id": "p1", "type": "Paragraph", "props": {"text": "x" * 60}},
                ],
            },
            {"id": "gap", "type": "Spacer"},
        ],
    }
}


def _page():
    result = validate_page(PAGE)
    assert result.success, result.error
    return result.data


class TestFormatComponentTree:
    """Tests for format_component_tree."""

    @pytest.mark.unit
    def test_outline(self):
        """Tree uses box-drawing connectors and explicit props."""
        tree = format_component_tree(_page().root)
        assert tree.splitlines() == [
            "Container #root",
            '├── HeroSection #hero "Invest" [ctaLink=/signup]',
            "├── Columns #cols [columns=3]",
            '│   ├── Heading #h1 "Transparent" [level=h3]',
            '│   └── Paragraph #p1 "' + "x" * 37 + '..."',
            "└── Spacer #gap",
        ]

    @pytest.mark.unit
    def test_defaults_not_listed(self):
        """Only author-set props appear; defaults stay implicit."""
        tree = format_component_tree(_page().root)
        assert "gap=" not in tree
        assert "height=" not in tree

    @pytest.mark.unit
    def test_preview_language(self):
        """Text previews follow the language."""
        tree = format_component_tree(_page().root, Language.AR)
        assert '"استثمر"' in tree


class TestOutputGenerator:
    """Tests for OutputGenerator."""

    @pytest.mark.unit
    def test_generate(self):
        """Output carries outline and HTML in the chosen language."""
        output = OutputGenerator(default_language="ar").generate(_page())
        assert output.language is Language.AR
        assert output.text_tree.startswith("Container #root")
        assert 'dir="rtl"' in output.html

    @pytest.mark.unit
    def test_language_override(self):
        """An explicit language overrides the default."""
        output = OutputGenerator(default_language="ar").generate(_page(), "en")
        assert 'dir="ltr"' in output.html
