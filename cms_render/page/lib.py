"""Page integration: fetch, pick the language variant, validate, render.

Content problems never surface as exceptions here. A missing page, an
unreachable CMS or content that fails validation all produce a localized
fallback so the site keeps serving something readable.
"""

from dataclasses import dataclass, replace
from typing import Any

from cms_render.client import CmsClient, CmsClientError, CmsPage
from cms_render.core.log import get_logger
from cms_render.i18n import (
    BilingualText,
    Language,
    coerce_language,
    pick_localized,
    resolve_direction,
    resolve_text,
)
from cms_render.render import Element, render_page
from cms_render.validation import PageContent, ValidationIssue, validate_page

logger = get_logger(__name__)

HOME_SLUG = "home"
SITE_NAME = "Emtelaak"

DEFAULT_DESCRIPTION = BilingualText(
    en="Invest in fractional real estate ownership with Emtelaak",
    ar="استثمر في الملكية العقارية الجزئية مع امتلاك",
)
NOT_FOUND_TITLE = BilingualText(en="Page Not Found", ar="الصفحة غير موجودة")
NOT_FOUND_DESCRIPTION = BilingualText(
    en="The requested page could not be found",
    ar="تعذر العثور على الصفحة المطلوبة",
)
FALLBACK_TITLE = BilingualText(en="Welcome to Emtelaak", ar="مرحباً بكم في امتلاك")
FALLBACK_MESSAGE = BilingualText(
    en="Page content not found", ar="لم يتم العثور على محتوى الصفحة"
)


@dataclass(frozen=True)
class PageMetadata:
    """Document title and meta description for a rendered page."""

    title: str
    description: str

    def to_dict(self) -> dict[str, str]:
        return {"title": self.title, "description": self.description}


@dataclass(frozen=True)
class PageRender:
    """Outcome of rendering one page.

    Attributes:
        element: Rendered document (the page or the fallback).
        language: Language the page was rendered in.
        page: Validated content, or None when the fallback was rendered.
        error: Validation error that triggered the fallback, if any.
        metadata: Title and description, when known.
    """

    element: Element
    language: Language
    page: PageContent | None = None
    error: ValidationIssue | None = None
    metadata: PageMetadata | None = None

    @property
    def fallback(self) -> bool:
        """Whether the fallback was rendered instead of page content."""
        return self.page is None

    def to_html(self) -> str:
        return self.element.to_html()


def select_page_content(page: CmsPage, language: Language | str) -> Any:
    """Pick the content tree for a language (Arabic only when present)."""
    return pick_localized(page.content_json, page.content_json_ar, language)


def page_title(page: CmsPage, language: Language | str) -> str:
    """Pick the page title for a language."""
    return pick_localized(page.title, page.title_ar, language)


def page_description(page: CmsPage, language: Language | str) -> str | None:
    """Pick the meta description for a language, or None when unset."""
    return pick_localized(page.meta_description, page.meta_description_ar, language) or None


def page_metadata(
    page: CmsPage | None, language: Language | str, slug: str = HOME_SLUG
) -> PageMetadata:
    """Build document metadata, with localized site defaults.

    Args:
        page: Fetched page, or None when it does not exist.
        language: Content language.
        slug: Requested slug; a missing homepage keeps the site title.

    Returns:
        PageMetadata for the document head.
    """
    language = coerce_language(language)
    if page is None:
        if slug == HOME_SLUG:
            return PageMetadata(SITE_NAME, resolve_text(DEFAULT_DESCRIPTION, language))
        return PageMetadata(
            resolve_text(NOT_FOUND_TITLE, language),
            resolve_text(NOT_FOUND_DESCRIPTION, language),
        )
    return PageMetadata(
        page_title(page, language),
        page_description(page, language) or resolve_text(DEFAULT_DESCRIPTION, language),
    )


def render_fallback(
    language: Language | str, message: BilingualText = FALLBACK_MESSAGE
) -> Element:
    """Render the minimal "no content" page in the visitor's language."""
    language = coerce_language(language)
    title = Element("h1", classes=["text-4xl", "font-bold", "mb-4"])
    body = Element("p", classes=["text-gray-600"])
    inner = Element("div", classes=["text-center"]).append(
        title.append(resolve_text(FALLBACK_TITLE, language)),
        body.append(resolve_text(message, language)),
    )
    return Element(
        "div",
        attrs={"dir": resolve_direction(language).value, "lang": language.value},
        classes=["min-h-screen", "flex", "items-center", "justify-center"],
    ).append(inner)


def render_content(raw: Any, language: Language | str) -> PageRender:
    """Validate and render raw page content, falling back on bad content.

    Args:
        raw: Content tree as decoded JSON or JSON text; None for no content.
        language: Content language.

    Returns:
        PageRender with the page, or the fallback and the validation error.
    """
    language = coerce_language(language)
    if raw is None:
        logger.warning("Page has no content, rendering fallback")
        return PageRender(element=render_fallback(language), language=language)

    result = validate_page(raw)
    if not result.success:
        logger.error(f"Page content failed validation: {result.error.message}")
        return PageRender(
            element=render_fallback(language), language=language, error=result.error
        )
    return PageRender(
        element=render_page(result.data, language), language=language, page=result.data
    )


def load_page(
    client: CmsClient, slug: str = HOME_SLUG, language: Language | str = Language.EN
) -> PageRender:
    """Fetch a page from the CMS and render it.

    Args:
        client: CMS client.
        slug: Page slug, "home" for the homepage.
        language: Content language.

    Returns:
        PageRender with metadata. Missing pages and CMS failures yield the
        fallback.
    """
    language = coerce_language(language)
    try:
        page = client.get_page(slug)
    except CmsClientError as e:
        logger.error(f"Failed to load page '{slug}': {e}")
        page = None

    if page is None:
        rendered = PageRender(element=render_fallback(language), language=language)
    else:
        rendered = render_content(select_page_content(page, language), language)
    return replace(rendered, metadata=page_metadata(page, language, slug))


__all__ = [
    "HOME_SLUG",
    "SITE_NAME",
    "PageMetadata",
    "PageRender",
    "select_page_content",
    "page_title",
    "page_description",
    "page_metadata",
    "render_fallback",
    "render_content",
    "load_page",
]
