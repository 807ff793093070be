"""Page integration: CMS fetch, language variants, fallback rendering."""

from .lib import (
    HOME_SLUG,
    SITE_NAME,
    PageMetadata,
    PageRender,
    load_page,
    page_description,
    page_metadata,
    page_title,
    render_content,
    render_fallback,
    select_page_content,
)

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
