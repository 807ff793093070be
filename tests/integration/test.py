"""End-to-end tests: raw page JSON through validation, rendering and output."""

import json
import logging
from dataclasses import replace

import httpx
import pytest

from cms_render import render_page, render_tree, validate_page
from cms_render.client import PAGES_PATH, CmsClient
from cms_render.output import OutputGenerator
from cms_render.page import load_page, render_content
from cms_render.render import COMPONENT_ID_ATTR
from cms_render.validation import MAX_DEPTH, ComponentNode


class TestBilingualRendering:
    """Tests for language resolution across the whole pipeline."""

    @pytest.mark.integration
    def test_arabic_heading(self, heading_page_data):
        """An Arabic request renders the Arabic text with neutral alignment."""
        page = validate_page(heading_page_data).data
        wrapper = render_page(page, "ar")
        heading = wrapper.find("h1")

        assert wrapper.attrs["dir"] == "rtl"
        assert wrapper.attrs["lang"] == "ar"
        assert heading.text_content() == "مرحبا"
        assert not heading.classes

    @pytest.mark.integration
    def test_english_heading(self, heading_page_data):
        """The same page in English renders left-to-right."""
        wrapper = render_page(validate_page(heading_page_data).data, "en")
        assert wrapper.attrs["dir"] == "ltr"
        assert wrapper.find("h1").text_content() == "Hello"

    @pytest.mark.integration
    def test_unsupported_language_falls_back(self, heading_page_data):
        """Unsupported languages render as English."""
        wrapper = render_page(validate_page(heading_page_data).data, "fr")
        assert wrapper.attrs["lang"] == "en"
        assert wrapper.find("h1").text_content() == "Hello"

    @pytest.mark.integration
    def test_logical_alignment_flips(self, landing_page):
        """align=start is left in English and right in Arabic."""
        en = render_tree(landing_page.root, "en").find("h3")
        ar = render_tree(landing_page.root, "ar").find("h3")
        assert "text-left" in en.classes
        assert "text-right" in ar.classes

    @pytest.mark.integration
    def test_missing_arabic_uses_english(self):
        """Text without an Arabic value shows the English one."""
        data = {
            "root": {"id": "p", "type": "Paragraph", "props": {"text": {"en": "Only English"}}}
        }
        element = render_tree(validate_page(data).data.root, "ar")
        assert element.text_content() == "Only English"


class TestLandingPage:
    """Tests for a realistic nested page."""

    @pytest.mark.integration
    def test_columns_tracks_and_order(self, landing_page):
        """Columns renders three tracks holding both children in order."""
        root = render_tree(landing_page.root, "en")
        grid = root.find("div", **{COMPONENT_ID_ATTR: "why"})

        assert grid.style["grid-template-columns"] == "repeat(3, 1fr)"
        assert grid.style["gap"] == "2rem"
        children = grid.element_children()
        assert [child.attrs[COMPONENT_ID_ATTR] for child in children] == ["why-1", "why-2"]
        assert children[0].tag == "h3"
        assert children[1].tag == "p"

    @pytest.mark.integration
    def test_hero_cta(self, landing_page):
        """The hero CTA links to ctaLink with the localized label."""
        root = render_tree(landing_page.root, "ar")
        link = root.find("a", href="/signup")
        assert link is not None
        assert link.text_content() == "ابدأ الآن"

    @pytest.mark.integration
    def test_hero_without_link_has_no_cta(self, landing_page_data):
        """ctaText without ctaLink never renders a button."""
        hero = landing_page_data["root"]["children"][0]
        del hero["props"]["ctaLink"]
        root = render_tree(validate_page(landing_page_data).data.root, "en")
        section = root.find("section", **{COMPONENT_ID_ATTR: "hero"})

        assert section.find("a") is None
        assert section.find("button") is None
        assert "Get started" not in section.text_content()

    @pytest.mark.integration
    def test_carousel_view_all(self, landing_page):
        """The carousel link is localized and spaced from the start side."""
        root = render_tree(landing_page.root, "ar")
        carousel = root.find("section", **{COMPONENT_ID_ATTR: "listings"})
        link = carousel.find("a")
        assert link.text_content() == "عرض الكل"
        assert "mr-4" in link.classes
        mount = carousel.find("div", **{"data-property-limit": 3})
        assert mount is not None

    @pytest.mark.integration
    def test_rendering_is_deterministic(self, landing_page):
        """Rendering the same tree twice produces identical HTML."""
        generator = OutputGenerator()
        first = generator.generate(landing_page, "ar")
        second = generator.generate(landing_page, "ar")
        assert first.html == second.html
        assert first.text_tree == second.text_tree


class TestUnknownTypes:
    """Tests for nodes that reach the renderer without a renderer."""

    @pytest.mark.integration
    def test_unknown_sibling_skipped(self, landing_page, caplog):
        """Three valid siblings still render around an unknown one."""
        root = landing_page.root
        stray = ComponentNode(id="stray", type="Marquee", props=root.children[0].props)
        patched = replace(root, children=(*root.children, stray))

        with caplog.at_level(logging.WARNING):
            element = render_tree(patched, "en")

        ids = [child.attrs[COMPONENT_ID_ATTR] for child in element.element_children()]
        assert ids == ["hero", "why", "listings"]
        assert "Marquee" in caplog.text

    @pytest.mark.integration
    def test_validation_rejects_unknown(self, landing_page_data):
        """The validator never lets unknown types through."""
        landing_page_data["root"]["children"].append(
            {"id": "stray", "type": "Marquee", "props": {}}
        )
        result = validate_page(landing_page_data)
        assert not result.success
        assert result.error.path == "root.children[3]"


class TestRoundTrip:
    """Tests for serialize-and-revalidate."""

    @pytest.mark.integration
    def test_round_trip_through_json(self, landing_page):
        """A validated page survives JSON serialization unchanged."""
        text = json.dumps(landing_page.to_dict(), ensure_ascii=False)
        again = validate_page(text)
        assert again.success
        assert again.data == landing_page

    @pytest.mark.integration
    def test_round_trip_renders_identically(self, landing_page):
        """Re-validated content renders the same HTML."""
        again = validate_page(landing_page.to_dict()).data
        assert render_page(again, "ar").to_html() == render_page(landing_page, "ar").to_html()


class TestDeepPages:
    """Tests for pages at the nesting limit."""

    @staticmethod
    def _chain(depth):
        node = {"id": f"n{depth}", "type": "Paragraph", "props": {"text": "bottom"}}
        for level in range(depth - 1, 0, -1):
            node = {"id": f"n{level}", "type": "Container", "children": [node]}
        return {"root": node}

    @pytest.mark.integration
    def test_deepest_page_renders(self):
        """A page at the nesting limit validates and renders to HTML."""
        page = validate_page(self._chain(MAX_DEPTH)).data
        html = render_page(page, "en").to_html()
        assert html.count("<div") == MAX_DEPTH
        assert "bottom" in html

    @pytest.mark.integration
    def test_too_deep_page_falls_back(self):
        """Content past the limit renders the fallback page instead of raising."""
        rendered = render_content(self._chain(MAX_DEPTH + 1), "en")
        assert rendered.fallback
        assert rendered.error.field == "children"


class TestPageFallback:
    """Tests for fallback rendering through the page layer."""

    @pytest.mark.integration
    def test_invalid_cms_content(self, landing_page_data):
        """Content failing validation renders the fallback page."""
        landing_page_data["root"]["children"][1]["props"]["columns"] = 0
        page = {"slug": "home", "title": "Home", "contentJson": landing_page_data}

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == f"{PAGES_PATH}/home"
            return httpx.Response(200, json={"success": True, "data": page})

        client = CmsClient("https://cms.example.com", transport=httpx.MockTransport(handler))
        rendered = load_page(client, "home", "en")

        assert rendered.fallback
        assert rendered.error.path == "root.children[1]"
        assert rendered.error.field == "columns"
        assert rendered.metadata.title == "Home"
        assert "Welcome to Emtelaak" in rendered.element.text_content()

    @pytest.mark.integration
    def test_valid_content(self, landing_page_data):
        """Valid content renders the page itself."""
        rendered = render_content(landing_page_data, "ar")
        assert not rendered.fallback
        assert rendered.element.find("h1").text_content() == "امتلك العقارات"


class TestLiveCms:
    """Tests against a running CMS API (skipped when unreachable)."""

    @pytest.mark.cms
    @pytest.mark.integration
    def test_live_homepage(self):
        """The live homepage renders or falls back without raising."""
        with CmsClient() as client:
            assert client.health_check()
            rendered = load_page(client, "home", "ar")
        assert rendered.element.attrs["dir"] == "rtl"
        assert rendered.metadata is not None
