"""Tests for the cms-render command line."""

import json
import subprocess
import sys
from pathlib import Path

import httpx
import pytest

from cms_render import __main__ as cli
from cms_render.client import HEALTH_PATH, PAGES_PATH, CmsClient

PROJECT_ROOT = Path(__file__).parent.parent.parent


def _write_page(tmp_path: Path, data) -> str:
    path = tmp_path / "page.json"
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return str(path)


class TestValidateCommand:
    """Tests for `cms-render validate`."""

    @pytest.mark.unit
    def test_valid_page_prints_outline(self, tmp_path, capsys, landing_page_data):
        """A valid page prints its outline and exits 0."""
        code = cli.main(["validate", _write_page(tmp_path, landing_page_data)])
        out = capsys.readouterr().out
        assert code == 0
        assert out.startswith("Container #root")
        assert "├── HeroSection #hero" in out
        assert "└── PropertyCarousel #listings" in out

    @pytest.mark.unit
    def test_outline_language(self, tmp_path, capsys, heading_page_data):
        """Outline previews resolve in the requested language."""
        cli.main(["validate", _write_page(tmp_path, heading_page_data), "-l", "ar"])
        assert '"مرحبا"' in capsys.readouterr().out

    @pytest.mark.unit
    def test_invalid_page_exits_1(self, tmp_path, capsys, caplog):
        """An invalid page logs the first error and exits 1."""
        data = {"root": {"id": "x", "type": "Carousel", "props": {}}}
        code = cli.main(["validate", _write_page(tmp_path, data)])
        assert code == 1
        assert "Carousel" in caplog.text

    @pytest.mark.unit
    def test_json_output(self, tmp_path, capsys):
        """--json prints the result document for failures too."""
        data = {"root": {"id": "c", "type": "Columns", "props": {"columns": 13}}}
        code = cli.main(["validate", "--json", _write_page(tmp_path, data)])
        document = json.loads(capsys.readouterr().out)
        assert code == 1
        assert document["success"] is False
        assert document["error"]["field"] == "columns"

    @pytest.mark.unit
    def test_missing_file(self, tmp_path, caplog):
        """Unreadable files exit 1."""
        assert cli.main(["validate", str(tmp_path / "nope.json")]) == 1
        assert "Cannot read" in caplog.text


class TestRenderCommand:
    """Tests for `cms-render render`."""

    @pytest.mark.unit
    def test_render_to_stdout(self, tmp_path, capsys, heading_page_data):
        """HTML goes to stdout by default."""
        code = cli.main(["render", _write_page(tmp_path, heading_page_data), "-l", "ar"])
        out = capsys.readouterr().out
        assert code == 0
        assert 'dir="rtl"' in out
        assert "مرحبا" in out

    @pytest.mark.unit
    def test_render_to_file(self, tmp_path, heading_page_data):
        """--output writes the HTML to a file."""
        target = tmp_path / "page.html"
        code = cli.main(
            ["render", _write_page(tmp_path, heading_page_data), "-o", str(target)]
        )
        assert code == 0
        assert "<h1" in target.read_text(encoding="utf-8")

    @pytest.mark.unit
    def test_render_invalid(self, tmp_path):
        """Invalid pages are not rendered."""
        assert cli.main(["render", _write_page(tmp_path, {"version": "1.0"})]) == 1


class TestSchemaCommand:
    """Tests for `cms-render schema`."""

    @pytest.mark.unit
    def test_all_schemas(self, capsys):
        """Without options every component type is exported."""
        assert cli.main(["schema"]) == 0
        document = json.loads(capsys.readouterr().out)
        assert len(document) == 14
        assert document["Heading"]["category"] == "typography"

    @pytest.mark.unit
    def test_single_type(self, capsys):
        """--type exports one component."""
        assert cli.main(["schema", "--type", "Heading"]) == 0
        assert json.loads(capsys.readouterr().out)["type"] == "Heading"

    @pytest.mark.unit
    def test_unknown_type(self):
        """Unknown types exit 1."""
        assert cli.main(["schema", "--type", "Carousel"]) == 1

    @pytest.mark.unit
    def test_json_schema(self, capsys):
        """--json-schema exports a JSON Schema document."""
        assert cli.main(["schema", "--json-schema"]) == 0
        assert "$defs" in json.loads(capsys.readouterr().out)


class TestRemoteCommands:
    """Tests for `cms-render fetch` and `cms-render health`."""

    @pytest.fixture
    def mock_cms(self, monkeypatch, heading_page_data):
        """Route CLI clients through a mock CMS."""

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == HEALTH_PATH:
                return httpx.Response(200, json={"success": True, "status": "ok"})
            if request.url.path == f"{PAGES_PATH}/home":
                page = {"slug": "home", "title": "Home", "contentJson": heading_page_data}
                return httpx.Response(200, json={"success": True, "data": page})
            return httpx.Response(404)

        real_init = CmsClient.__init__

        def patched_init(self, base_url=None, timeout=None, transport=None):
            real_init(self, base_url, timeout, httpx.MockTransport(handler))

        monkeypatch.setattr(CmsClient, "__init__", patched_init)

    @pytest.mark.unit
    def test_fetch_page(self, mock_cms, capsys):
        """A published page is rendered."""
        assert cli.main(["fetch", "home", "--api-url", "https://cms.example.com"]) == 0
        assert "<h1" in capsys.readouterr().out

    @pytest.mark.unit
    def test_fetch_missing_page(self, mock_cms, capsys):
        """A missing page renders the fallback and exits 1."""
        assert cli.main(["fetch", "about", "--api-url", "https://cms.example.com"]) == 1
        assert "Emtelaak" in capsys.readouterr().out

    @pytest.mark.unit
    def test_health(self, mock_cms, capsys):
        """Healthy APIs exit 0."""
        assert cli.main(["health", "--api-url", "https://cms.example.com"]) == 0
        assert "healthy" in capsys.readouterr().out


class TestEntryPoint:
    """Tests for running the package as a module."""

    @pytest.mark.unit
    def test_no_command_prints_help(self, capsys):
        """No subcommand prints help and exits 1."""
        assert cli.main([]) == 1
        assert "usage: cms-render" in capsys.readouterr().out

    @pytest.mark.integration
    def test_module_help(self):
        """python -m cms_render --help runs cleanly."""
        result = subprocess.run(
            [sys.executable, "-m", "cms_render", "--help"],
            capture_output=True,
            text=True,
            cwd=PROJECT_ROOT,
            timeout=30,
        )
        assert result.returncode == 0
        for command in ("validate", "render", "schema", "fetch", "health"):
            assert command in result.stdout
