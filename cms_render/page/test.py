"""Unit tests for page integration."""

import httpx
import pytest

from cms_render.client import CmsClient, CmsPage
from cms_render.i18n import Language
from cms_render.page import (
    HOME_SLUG,
    load_page,
    page_description,
    page_metadata,
    page_title,
    render_content,
    render_fallback,
    select_page_content,
)
from cms_render.validation import InvalidField

EN_CONTENT = {
    "version": "1.0",
    "root": {"id": "h", "type": "Heading", "props": {"text": "Welcome", "level": "h1"}},
}
AR_CONTENT = {
    "version": "1.0",
    "root": {"id": "h", "type": "Heading", "props": {"text": "أهلاً", "level": "h1"}},
}


def _page(**overrides) -> CmsPage:
    data = {
        "slug": "home",
        "title": "Home",
        "titleAr": "الرئيسية",
        "contentJson": EN_CONTENT,
        "contentJsonAr": AR_CONTENT,
        "metaDescription": "Homepage",
    }
    data.update(overrides)
    return CmsPage.model_validate(data)


def _client(handler) -> CmsClient:
    return CmsClient("https://cms.example.com", transport=httpx.MockTransport(handler))


class TestLanguageVariants:
    """Tests for per-language page fields."""

    @pytest.mark.unit
    def test_select_content(self):
        """Arabic requests use the Arabic tree when present."""
        page = _page()
        assert select_page_content(page, Language.AR) is page.content_json_ar
        assert select_page_content(page, Language.EN) is page.content_json

    @pytest.mark.unit
    def test_select_content_falls_back(self):
        """Pages without an Arabic tree serve the English one."""
        page = _page(contentJsonAr=None)
        assert select_page_content(page, Language.AR) == EN_CONTENT

    @pytest.mark.unit
    def test_title_and_description(self):
        """Titles and descriptions follow the same rule."""
        page = _page(metaDescriptionAr=None)
        assert page_title(page, "ar") == "الرئيسية"
        assert page_title(page, "en") == "Home"
        assert page_description(page, "ar") == "Homepage"
        assert page_description(_page(metaDescription=None), "en") is None


class TestPageMetadata:
    """Tests for document metadata."""

    @pytest.mark.unit
    def test_missing_home(self):
        """A missing homepage keeps the site title."""
        meta = page_metadata(None, "en", HOME_SLUG)
        assert meta.title == "Emtelaak"
        assert "fractional" in meta.description

    @pytest.mark.unit
    def test_missing_page_localized(self):
        """A missing page gets a localized not-found title."""
        assert page_metadata(None, "en", "about").title == "Page Not Found"
        assert page_metadata(None, "ar", "about").title == "الصفحة غير موجودة"

    @pytest.mark.unit
    def test_default_description(self):
        """Pages without a description get the site default."""
        meta = page_metadata(_page(metaDescription=None), "en")
        assert meta.to_dict()["title"] == "Home"
        assert "Emtelaak" in meta.description


class TestRenderContent:
    """Tests for validate-then-render."""

    @pytest.mark.unit
    def test_valid_content(self):
        """Valid content renders the page."""
        rendered = render_content(EN_CONTENT, "en")
        assert not rendered.fallback
        assert rendered.error is None
        assert rendered.element.find("h1").text_content() == "Welcome"

    @pytest.mark.unit
    def test_invalid_content_falls_back(self):
        """Invalid content renders the fallback and keeps the error."""
        bad = {"root": {"id": "h", "type": "Heading", "props": {}}}
        rendered = render_content(bad, "ar")
        assert rendered.fallback
        assert isinstance(rendered.error, InvalidField)
        assert rendered.element.attrs["dir"] == "rtl"

    @pytest.mark.unit
    def test_no_content(self):
        """Absent content renders the fallback without an error."""
        rendered = render_content(None, "en")
        assert rendered.fallback
        assert rendered.error is None

    @pytest.mark.unit
    def test_fallback_localized(self):
        """Fallback text follows the language."""
        assert "Welcome to Emtelaak" in render_fallback("en").text_content()
        assert "امتلاك" in render_fallback(Language.AR).text_content()


class TestLoadPage:
    """Tests for fetch-and-render."""

    @pytest.mark.unit
    def test_loads_arabic_variant(self):
        """The Arabic tree is rendered for Arabic visitors."""
        payload = {"success": True, "data": _page().model_dump(mode="json", by_alias=True)}
        client = _client(lambda request: httpx.Response(200, json=payload))
        rendered = load_page(client, HOME_SLUG, "ar")
        assert rendered.element.find("h1").text_content() == "أهلاً"
        assert rendered.metadata.title == "الرئيسية"
        assert rendered.to_html().startswith('<div class="min-h-screen" dir="rtl" lang="ar">')

    @pytest.mark.unit
    def test_missing_page(self):
        """A 404 yields the fallback with not-found metadata."""
        client = _client(lambda request: httpx.Response(404))
        rendered = load_page(client, "about", "en")
        assert rendered.fallback
        assert rendered.metadata.title == "Page Not Found"

    @pytest.mark.unit
    def test_cms_failure(self):
        """CMS errors yield the fallback instead of raising."""
        client = _client(lambda request: httpx.Response(502, text="bad gateway"))
        rendered = load_page(client, HOME_SLUG, "en")
        assert rendered.fallback
        assert rendered.metadata.title == "Emtelaak"
