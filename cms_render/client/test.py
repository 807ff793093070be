"""Unit tests for the CMS client (mocked transport, no network)."""

import httpx
import pytest

from cms_render.client import CmsClient, CmsClientError, CmsPage

PAGE = {
    "slug": "about",
    "title": "About",
    "titleAr": "من نحن",
    "contentJson": {"version": "1.0", "root": {"id": "1", "type": "Spacer"}},
    "contentJsonAr": None,
    "metaDescription": "About us",
    "publishedAt": "2025-01-15T10:00:00Z",
}


def _client(handler) -> CmsClient:
    return CmsClient("https://cms.example.com/", timeout=5, transport=httpx.MockTransport(handler))


def _routes(routes: dict[str, httpx.Response]):
    def handler(request: httpx.Request) -> httpx.Response:
        return routes.get(request.url.path, httpx.Response(404))

    return handler


class TestCmsClientConfig:
    """Tests for client construction."""

    @pytest.mark.unit
    def test_base_url_normalized(self):
        """Trailing slashes are stripped."""
        client = _client(_routes({}))
        assert client.base_url == "https://cms.example.com"
        assert client.timeout == 5

    @pytest.mark.unit
    def test_defaults_from_environment(self, monkeypatch):
        """Base URL and timeout come from config."""
        monkeypatch.setenv("CMS_API_URL", "https://env.example.com")
        monkeypatch.setenv("CMS_REQUEST_TIMEOUT", "7")
        with CmsClient() as client:
            assert client.base_url == "https://env.example.com"
            assert client.timeout == 7


class TestGetPage:
    """Tests for page fetching."""

    @pytest.mark.unit
    def test_success(self):
        """A successful envelope yields a CmsPage."""
        client = _client(
            _routes({"/api/v1/cms/pages/about": httpx.Response(200, json={"success": True, "data": PAGE})})
        )
        page = client.get_page("about")
        assert isinstance(page, CmsPage)
        assert page.title_ar == "من نحن"
        assert page.content_json["root"]["type"] == "Spacer"
        assert page.published_at.year == 2025

    @pytest.mark.unit
    def test_not_found(self):
        """404 means no page."""
        assert _client(_routes({})).get_page("missing") is None

    @pytest.mark.unit
    def test_unsuccessful_envelope(self):
        """success=false means no page."""
        client = _client(
            _routes(
                {"/api/v1/cms/pages/draft": httpx.Response(200, json={"success": False, "error": "Not published"})}
            )
        )
        assert client.get_page("draft") is None

    @pytest.mark.unit
    def test_slug_is_quoted(self):
        """Slugs cannot escape the pages path."""
        seen = []

        def handler(request):
            seen.append(request.url.raw_path)
            return httpx.Response(404)

        _client(handler).get_page("a/b")
        assert seen == [b"/api/v1/cms/pages/a%2Fb"]

    @pytest.mark.unit
    def test_server_error_raises(self):
        """Non-404 errors raise with status and body."""
        client = _client(lambda request: httpx.Response(500, text="boom"))
        with pytest.raises(CmsClientError) as exc_info:
            client.get_page("about")
        assert exc_info.value.status_code == 500
        assert exc_info.value.response_body == "boom"

    @pytest.mark.unit
    def test_transport_error_raises(self):
        """Connection failures raise CmsClientError."""

        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(CmsClientError, match="request failed"):
            _client(handler).get_page("about")

    @pytest.mark.unit
    def test_invalid_json_raises(self):
        """Undecodable bodies raise CmsClientError."""
        client = _client(lambda request: httpx.Response(200, text="<html>"))
        with pytest.raises(CmsClientError, match="invalid JSON"):
            client.get_page("about")

    @pytest.mark.unit
    def test_unexpected_shape_raises(self):
        """Envelopes that do not match the contract raise."""
        client = _client(lambda request: httpx.Response(200, json={"data": PAGE}))
        with pytest.raises(CmsClientError, match="Unexpected"):
            client.get_page("about")


class TestListing:
    """Tests for list endpoints and content blocks."""

    @pytest.mark.unit
    def test_list_pages(self):
        """Pages are listed from the envelope."""
        client = _client(
            _routes({"/api/v1/cms/pages": httpx.Response(200, json={"success": True, "data": [PAGE], "cached": True})})
        )
        pages = client.list_pages()
        assert [p.slug for p in pages] == ["about"]

    @pytest.mark.unit
    def test_list_pages_unsuccessful(self):
        """An unsuccessful listing is empty."""
        client = _client(_routes({"/api/v1/cms/pages": httpx.Response(200, json={"success": False})}))
        assert client.list_pages() == []

    @pytest.mark.unit
    def test_get_content(self):
        """Content blocks carry both languages."""
        client = _client(
            _routes(
                {
                    "/api/v1/cms/content/footer": httpx.Response(
                        200,
                        json={"success": True, "data": {"key": "footer", "content": "Hi", "contentAr": "مرحبا"}},
                    )
                }
            )
        )
        content = client.get_content("footer")
        assert content.content_ar == "مرحبا"
        assert client.get_content("header") is None

    @pytest.mark.unit
    def test_list_content_keys(self):
        """Content keys are plain strings."""
        client = _client(
            _routes({"/api/v1/cms/content": httpx.Response(200, json={"success": True, "data": ["footer", "banner"]})})
        )
        assert client.list_content_keys() == ["footer", "banner"]


class TestHealthCheck:
    """Tests for the health check."""

    @pytest.mark.unit
    def test_healthy(self):
        """success with status ok is healthy."""
        client = _client(
            _routes({"/api/v1/cms/health": httpx.Response(200, json={"success": True, "status": "ok"})})
        )
        assert client.health_check() is True

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(200, json={"success": True, "status": "degraded"}),
            httpx.Response(503, json={"success": False}),
            httpx.Response(200, json=["ok"]),
        ],
    )
    def test_unhealthy(self, response):
        """Anything else is unhealthy, never an exception."""
        client = _client(_routes({"/api/v1/cms/health": response}))
        assert client.health_check() is False

    @pytest.mark.unit
    def test_unreachable(self):
        """Transport errors report unhealthy."""

        def handler(request):
            raise httpx.ConnectTimeout("timeout", request=request)

        assert _client(handler).health_check() is False
