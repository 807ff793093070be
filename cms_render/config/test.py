"""Tests for configuration management."""

from pathlib import Path

import pytest

from .lib import (
    EnvConfig,
    EnvVar,
    get_api_url,
    get_default_language,
    get_environment,
    get_environment_info,
    get_log_level,
    get_request_timeout,
    list_environment_variables,
)

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("CMS_REQUEST_TIMEOUT", raising=False)
        assert get_environment(EnvVar.CMS_REQUEST_TIMEOUT) == 10

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("CMS_REQUEST_TIMEOUT", "99")
        assert get_environment(EnvVar.CMS_REQUEST_TIMEOUT, override=5) == 5

    @pytest.mark.unit
    def test_int_type_conversion(self, monkeypatch):
        """Integer type conversion from string."""
        monkeypatch.setenv("CMS_REQUEST_TIMEOUT", "30")
        result = get_environment(EnvVar.CMS_REQUEST_TIMEOUT)
        assert result == 30
        assert isinstance(result, int)

    @pytest.mark.unit
    def test_invalid_int_returns_default(self, monkeypatch):
        """Invalid integer value returns default."""
        monkeypatch.setenv("CMS_REQUEST_TIMEOUT", "soon")
        assert get_environment(EnvVar.CMS_REQUEST_TIMEOUT) == 10

    @pytest.mark.unit
    def test_bool_type_conversion_true(self, monkeypatch):
        """Boolean type conversion for true values."""
        for value in ("true", "1", "yes", "TRUE", "Yes"):
            monkeypatch.setenv("CMS_DEBUG", value)
            assert get_environment(EnvVar.CMS_DEBUG) is True

    @pytest.mark.unit
    def test_bool_type_conversion_false(self, monkeypatch):
        """Boolean type conversion for false values."""
        for value in ("false", "0", "no", "FALSE", "No"):
            monkeypatch.setenv("CMS_DEBUG", value)
            assert get_environment(EnvVar.CMS_DEBUG) is False

    @pytest.mark.unit
    def test_unrecognized_bool_returns_default(self, monkeypatch):
        """Unrecognized boolean strings fall back to the default."""
        monkeypatch.setenv("CMS_DEBUG", "maybe")
        assert get_environment(EnvVar.CMS_DEBUG) is False

    @pytest.mark.unit
    def test_path_type_conversion(self, monkeypatch, tmp_path):
        """Path variables are converted to Path objects."""
        monkeypatch.setenv("CMS_LOG_FILE", str(tmp_path / "cms.log"))
        assert get_environment(EnvVar.CMS_LOG_FILE) == tmp_path / "cms.log"
        assert isinstance(get_environment(EnvVar.CMS_LOG_FILE), Path)

    @pytest.mark.unit
    def test_none_default_for_log_file(self, monkeypatch):
        """Optional paths default to None when not set."""
        monkeypatch.delenv("CMS_LOG_FILE", raising=False)
        assert get_environment(EnvVar.CMS_LOG_FILE) is None


class TestGetEnvironmentInfo:
    """Tests for environment variable metadata."""

    @pytest.mark.unit
    def test_returns_env_config(self):
        """Returns EnvConfig dataclass."""
        info = get_environment_info(EnvVar.CMS_API_URL)
        assert isinstance(info, EnvConfig)
        assert info.name == "CMS_API_URL"
        assert info.default == "http://localhost:3000"
        assert info.var_type is str
        assert info.category == "service"

    @pytest.mark.unit
    def test_description_present(self):
        """Description field is populated."""
        info = get_environment_info(EnvVar.CMS_DEFAULT_LANGUAGE)
        assert "Language" in info.description


class TestListEnvironmentVariables:
    """Tests for listing environment variables."""

    @pytest.mark.unit
    def test_returns_all_variables(self):
        """Returns all EnvVar members when no category."""
        result = list_environment_variables()
        assert len(result) == len(EnvVar)

    @pytest.mark.unit
    def test_filter_by_category(self):
        """Filters by category correctly."""
        logging_vars = list_environment_variables("logging")
        assert EnvVar.CMS_LOG_LEVEL in logging_vars
        assert EnvVar.CMS_API_URL not in logging_vars


# =============================================================================
# Tests for convenience functions
# =============================================================================


class TestGetApiUrl:
    """Tests for CMS API URL resolution."""

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("CMS_API_URL", "http://other:3000")
        assert get_api_url(override="http://cms.test") == "http://cms.test"

    @pytest.mark.unit
    def test_trailing_slash_stripped(self, monkeypatch):
        """Trailing slashes never reach request URLs."""
        monkeypatch.setenv("CMS_API_URL", "https://cms.example.com/")
        assert get_api_url() == "https://cms.example.com"

    @pytest.mark.unit
    def test_default_url(self, monkeypatch):
        """Default URL points at a local CMS."""
        monkeypatch.delenv("CMS_API_URL", raising=False)
        assert get_api_url() == "http://localhost:3000"

    @pytest.mark.unit
    def test_request_timeout(self, monkeypatch):
        """Timeout follows the environment unless overridden."""
        monkeypatch.setenv("CMS_REQUEST_TIMEOUT", "3")
        assert get_request_timeout() == 3
        assert get_request_timeout(override=7) == 7


class TestLanguageAndLogging:
    """Tests for language and log level helpers."""

    @pytest.mark.unit
    def test_default_language_from_env(self, monkeypatch):
        """Arabic may be configured as the default."""
        monkeypatch.setenv("CMS_DEFAULT_LANGUAGE", " AR ")
        assert get_default_language() == "ar"

    @pytest.mark.unit
    def test_unsupported_default_language(self, monkeypatch):
        """Unsupported languages fall back to English."""
        monkeypatch.setenv("CMS_DEFAULT_LANGUAGE", "fr")
        assert get_default_language() == "en"

    @pytest.mark.unit
    def test_debug_forces_level(self, monkeypatch):
        """CMS_DEBUG overrides the configured level."""
        monkeypatch.setenv("CMS_LOG_LEVEL", "warning")
        monkeypatch.setenv("CMS_DEBUG", "1")
        assert get_log_level() == "DEBUG"

    @pytest.mark.unit
    def test_level_uppercased(self, monkeypatch):
        """Level names are normalized to upper case."""
        monkeypatch.delenv("CMS_DEBUG", raising=False)
        monkeypatch.setenv("CMS_LOG_LEVEL", "warning")
        assert get_log_level() == "WARNING"
