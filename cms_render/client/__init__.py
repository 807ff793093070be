"""Headless CMS API client."""

from .lib import CONTENT_PATH, HEALTH_PATH, PAGES_PATH, CmsClient, CmsClientError
from .models import ApiResponse, CmsPage, HealthStatus, PlatformContent

__all__ = [
    "CmsClient",
    "CmsClientError",
    "PAGES_PATH",
    "CONTENT_PATH",
    "HEALTH_PATH",
    "CmsPage",
    "PlatformContent",
    "ApiResponse",
    "HealthStatus",
]
