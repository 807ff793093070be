"""Root pytest configuration and fixtures.

This module provides:
- Environment setup (loads .env)
- Live CMS detection for tests marked ``cms``
- Sample page content fixtures
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
from dotenv import load_dotenv

from cms_render.config import get_api_url

if TYPE_CHECKING:
    from cms_render.validation import PageContent

# Load environment variables from .env file
load_dotenv()


# =============================================================================
# Configuration Constants
# =============================================================================

CMS_API_URL = get_api_url()


# =============================================================================
# Service Detection (Private Functions)
# =============================================================================


def _is_cms_healthy(url: str = CMS_API_URL, timeout: float = 2.0) -> bool:
    """Check if the CMS API answers its health endpoint."""
    from cms_render.client import CmsClient

    with CmsClient(base_url=url, timeout=timeout) as client:
        return client.health_check()


# =============================================================================
# Pytest Hooks
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]):
    """Auto-skip tests marked with cms when the CMS API is unreachable."""
    if not any("cms" in item.keywords for item in items):
        return

    if _is_cms_healthy():
        return

    skip_cms = pytest.mark.skip(reason=f"CMS API not available at {CMS_API_URL}")
    for item in items:
        if "cms" in item.keywords:
            item.add_marker(skip_cms)


# =============================================================================
# Common Test Fixtures
# =============================================================================


@pytest.fixture
def heading_page_data() -> dict[str, Any]:
    """Single bilingual heading page.

    Returns:
        Raw page content with one Heading at the root.
    """
    return {
        "version": "1.0",
        "root": {
            "id": "1",
            "type": "Heading",
            "props": {"text": {"en": "Hello", "ar": "مرحبا"}, "level": "h1"},
        },
    }


@pytest.fixture
def landing_page_data() -> dict[str, Any]:
    """Landing page with a hero, a columns band and a property carousel.

    Returns:
        Raw page content nested three levels deep.
    """
    return {
        "version": "1.0",
        "root": {
            "id": "root",
            "type": "Container",
            "props": {"maxWidth": "1200px"},
            "children": [
                {
                    "id": "hero",
                    "type": "HeroSection",
                    "props": {
                        "title": {"en": "Own real estate", "ar": "امتلك العقارات"},
                        "subtitle": {"en": "From 500 EGP", "ar": "ابتداءً من ٥٠٠ جنيه"},
                        "ctaText": {"en": "Get started", "ar": "ابدأ الآن"},
                        "ctaLink": "/signup",
                        "backgroundImage": "https://cdn.example.com/hero.jpg",
                    },
                },
                {
                    "id": "why",
                    "type": "Columns",
                    "props": {"columns": 3, "gap": "2rem"},
                    "children": [
                        {
                            "id": "why-1",
                            "type": "Heading",
                            "props": {
                                "text": {"en": "Transparent", "ar": "شفافية"},
                                "level": "h3",
                                "align": "start",
                            },
                        },
                        {
                            "id": "why-2",
                            "type": "Paragraph",
                            "props": {
                                "text": {"en": "Every property is vetted", "ar": "كل عقار يتم فحصه"},
                            },
                        },
                    ],
                },
                {
                    "id": "listings",
                    "type": "PropertyCarousel",
                    "props": {"title": {"en": "Open now", "ar": "متاح الآن"}, "limit": 3},
                },
            ],
        },
    }


@pytest.fixture
def landing_page(landing_page_data: dict[str, Any]) -> PageContent:
    """Validated landing page.

    Args:
        landing_page_data: Raw landing page content.

    Returns:
        The validated PageContent.
    """
    from cms_render.validation import validate_page

    result = validate_page(landing_page_data)
    assert result.success, result.error
    return result.data
