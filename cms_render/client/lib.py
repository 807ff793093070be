"""HTTP client for the headless CMS API.

The CMS answers every request with an ``{success, data, error, cached}``
envelope. A 404 or an unsuccessful envelope means "not found"; transport
failures and other error statuses raise CmsClientError so callers can pick
their own fallback.
"""

from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from cms_render.config import get_api_url, get_request_timeout
from cms_render.core.log import get_logger

from .models import ApiResponse, CmsPage, HealthStatus, PlatformContent

logger = get_logger(__name__)

PAGES_PATH = "/api/v1/cms/pages"
CONTENT_PATH = "/api/v1/cms/content"
HEALTH_PATH = "/api/v1/cms/health"

# Response bodies are truncated to this many characters in errors
BODY_EXCERPT = 500


class CmsClientError(Exception):
    """Error while talking to the CMS."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class CmsClient:
    """Synchronous client for the CMS content API.

    Example:
        >>> with CmsClient("https://cms.example.com") as client:
        ...     page = client.get_page("home")

    Attributes:
        base_url: CMS API root, without trailing slash.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            base_url: CMS API root. Defaults to CMS_API_URL.
            timeout: Request timeout in seconds. Defaults to CMS_REQUEST_TIMEOUT.
            transport: Custom httpx transport (used by tests).
        """
        self.base_url = get_api_url(base_url)
        self.timeout = timeout if timeout is not None else get_request_timeout()
        self._client = httpx.Client(
            base_url=self.base_url, timeout=self.timeout, transport=transport
        )

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self._client.close()

    def __enter__(self) -> "CmsClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _get_json(self, path: str, allow_missing: bool = False) -> Any:
        """GET a path and decode its JSON body.

        Returns:
            Decoded JSON, or None for a 404 when `allow_missing` is set.

        Raises:
            CmsClientError: On transport errors, error statuses, or bad JSON.
        """
        try:
            response = self._client.get(path)
        except httpx.TimeoutException as e:
            raise CmsClientError(f"CMS request timed out: {e}") from e
        except httpx.RequestError as e:
            raise CmsClientError(f"CMS request failed: {e}") from e

        if response.status_code == 404 and allow_missing:
            return None
        if not response.is_success:
            raise CmsClientError(
                f"CMS returned {response.status_code} for {path}",
                status_code=response.status_code,
                response_body=response.text[:BODY_EXCERPT],
            )
        try:
            return response.json()
        except ValueError as e:
            raise CmsClientError(
                f"CMS returned invalid JSON for {path}",
                status_code=response.status_code,
                response_body=response.text[:BODY_EXCERPT],
            ) from e

    def _envelope(self, payload: Any, data_type: Any) -> ApiResponse:
        try:
            return ApiResponse[data_type].model_validate(payload)
        except ValidationError as e:
            raise CmsClientError(
                f"Unexpected CMS response shape ({e.error_count()} errors)"
            ) from e

    def get_page(self, slug: str) -> CmsPage | None:
        """Fetch a published page by slug.

        Args:
            slug: Page slug; "home" is the homepage.

        Returns:
            The page, or None when it does not exist.

        Raises:
            CmsClientError: If the CMS cannot be reached or misbehaves.
        """
        payload = self._get_json(f"{PAGES_PATH}/{quote(slug, safe='')}", allow_missing=True)
        if payload is None:
            logger.info(f"CMS page '{slug}' not found")
            return None

        envelope = self._envelope(payload, CmsPage)
        if not envelope.success or envelope.data is None:
            logger.warning(f"CMS page '{slug}' unavailable: {envelope.error or 'no data'}")
            return None
        return envelope.data

    def list_pages(self) -> list[CmsPage]:
        """List all published pages (empty when the CMS reports none)."""
        envelope = self._envelope(self._get_json(PAGES_PATH), list[CmsPage])
        if not envelope.success or envelope.data is None:
            return []
        return envelope.data

    def get_content(self, key: str) -> PlatformContent | None:
        """Fetch a platform content block by key, or None when missing."""
        payload = self._get_json(f"{CONTENT_PATH}/{quote(key, safe='')}", allow_missing=True)
        if payload is None:
            return None

        envelope = self._envelope(payload, PlatformContent)
        if not envelope.success or envelope.data is None:
            logger.warning(f"CMS content '{key}' unavailable: {envelope.error or 'no data'}")
            return None
        return envelope.data

    def list_content_keys(self) -> list[str]:
        """List all platform content keys."""
        envelope = self._envelope(self._get_json(CONTENT_PATH), list[str])
        if not envelope.success or envelope.data is None:
            return []
        return envelope.data

    def health_check(self) -> bool:
        """Check whether the CMS API reports itself healthy.

        Returns:
            True if the health endpoint answers ``success`` with status "ok".
        """
        try:
            payload = self._get_json(HEALTH_PATH)
            return HealthStatus.model_validate(payload).healthy
        except (CmsClientError, ValidationError) as e:
            logger.warning(f"CMS health check failed: {e}")
            return False


__all__ = ["CmsClient", "CmsClientError", "PAGES_PATH", "CONTENT_PATH", "HEALTH_PATH"]
