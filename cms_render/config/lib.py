"""Environment configuration for cms-render.

Every setting the package reads lives in the ``EnvVar`` enum together with
its default, its type and a short description. ``get_environment`` resolves a
setting from an explicit override, then the process environment, then the
default, converting environment strings to the declared type.

Example:
    >>> from cms_render.config import EnvVar, get_environment
    >>> get_environment(EnvVar.CMS_REQUEST_TIMEOUT)
    10
    >>> get_environment(EnvVar.CMS_API_URL, override="https://cms.example.com")
    'https://cms.example.com'
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, overload

# =============================================================================
# Settings
# =============================================================================


@dataclass(frozen=True)
class EnvConfig:
    """Declaration of one environment setting.

    Attributes:
        name: Variable name in the process environment.
        default: Value used when the variable is unset or unparseable.
        var_type: Declared type; one of str, int, bool or Path.
        description: One-line help text.
        category: Group used by ``list_environment_variables``.
    """

    name: str
    default: Any
    var_type: type
    description: str = ""
    category: str = "general"


class EnvVar(Enum):
    """Settings read by cms-render, grouped by category.

    Categories:
        - service: CMS API location and request timeout
        - i18n: default content language
        - logging: CLI log level and destination
    """

    # -------------------------------------------------------------------------
    # CMS API
    # -------------------------------------------------------------------------
    CMS_API_URL = EnvConfig(
        name="CMS_API_URL",
        default="http://localhost:3000",
        var_type=str,
        description="Base URL of the headless CMS API",
        category="service",
    )
    CMS_REQUEST_TIMEOUT = EnvConfig(
        name="CMS_REQUEST_TIMEOUT",
        default=10,
        var_type=int,
        description="CMS request timeout in seconds",
        category="service",
    )

    # -------------------------------------------------------------------------
    # i18n
    # -------------------------------------------------------------------------
    CMS_DEFAULT_LANGUAGE = EnvConfig(
        name="CMS_DEFAULT_LANGUAGE",
        default="en",
        var_type=str,
        description="Language used when a request carries none (en, ar)",
        category="i18n",
    )

    # -------------------------------------------------------------------------
    # CLI logging
    # -------------------------------------------------------------------------
    CMS_LOG_LEVEL = EnvConfig(
        name="CMS_LOG_LEVEL",
        default="INFO",
        var_type=str,
        description="Log level name for the CLI (DEBUG, INFO, WARNING, ...)",
        category="logging",
    )
    CMS_LOG_FILE = EnvConfig(
        name="CMS_LOG_FILE",
        default=None,
        var_type=Path,
        description="Optional file to append CLI logs to instead of stderr",
        category="logging",
    )
    CMS_DEBUG = EnvConfig(
        name="CMS_DEBUG",
        default=False,
        var_type=bool,
        description="Force DEBUG logging regardless of CMS_LOG_LEVEL",
        category="logging",
    )


# =============================================================================
# Conversion
# =============================================================================

_TRUE_WORDS = frozenset({"true", "1", "yes", "on"})
_FALSE_WORDS = frozenset({"false", "0", "no", "off"})


def _to_bool(raw: str) -> bool:
    word = raw.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValueError(f"not a boolean: {raw!r}")


_CONVERTERS: dict[type, Callable[[str], Any]] = {
    str: str,
    int: lambda raw: int(raw.strip()),
    bool: _to_bool,
    Path: Path,
}


def _from_environment(config: EnvConfig) -> Any:
    """Read one setting from os.environ; unset or unparseable gives the default."""
    raw = os.environ.get(config.name)
    if raw is None:
        return config.default
    convert = _CONVERTERS.get(config.var_type, str)
    try:
        return convert(raw)
    except ValueError:
        return config.default


# =============================================================================
# Lookup
# =============================================================================


@overload
def get_environment(env_var: EnvVar, override: int) -> int: ...
@overload
def get_environment(env_var: EnvVar, override: str) -> str: ...
@overload
def get_environment(env_var: EnvVar, override: bool) -> bool: ...
@overload
def get_environment(env_var: EnvVar, override: Path) -> Path: ...
@overload
def get_environment(env_var: EnvVar, override: None = None) -> Any: ...


def get_environment(env_var: EnvVar, override: Any = None) -> Any:
    """Resolve a setting.

    A non-None ``override`` wins, then the environment variable, then the
    declared default.

    Args:
        env_var: Setting to resolve.
        override: Value supplied by the caller, e.g. a CLI flag.

    Returns:
        The resolved value, typed as the setting declares.

    Example:
        >>> get_environment(EnvVar.CMS_REQUEST_TIMEOUT, override=30)
        30
    """
    if override is not None:
        return override
    return _from_environment(env_var.value)


def get_environment_info(env_var: EnvVar) -> EnvConfig:
    """Return the declaration behind a setting."""
    return env_var.value


def list_environment_variables(category: str | None = None) -> list[EnvVar]:
    """List settings, optionally only those in one category.

    Args:
        category: "service", "i18n" or "logging"; None lists everything.

    Returns:
        Matching EnvVar members in declaration order.
    """
    return [var for var in EnvVar if category is None or var.value.category == category]


# =============================================================================
# Shortcuts
# =============================================================================


def get_api_url(override: str | None = None) -> str:
    """Get the CMS API base URL without a trailing slash.

    Resolution: override > CMS_API_URL > http://localhost:3000
    """
    return str(get_environment(EnvVar.CMS_API_URL, override=override)).rstrip("/")


def get_request_timeout(override: int | None = None) -> int:
    """Get the CMS request timeout in seconds."""
    return get_environment(EnvVar.CMS_REQUEST_TIMEOUT, override=override)


def get_default_language() -> str:
    """Get the configured default language code.

    Values outside the supported set fall back to "en"; the i18n layer
    performs the same coercion for request-supplied languages.
    """
    value = str(get_environment(EnvVar.CMS_DEFAULT_LANGUAGE)).lower().strip()
    return value if value in ("en", "ar") else "en"


def get_log_level() -> str:
    """Get the effective log level name.

    CMS_DEBUG forces "DEBUG"; otherwise CMS_LOG_LEVEL is used.
    """
    if get_environment(EnvVar.CMS_DEBUG):
        return "DEBUG"
    return str(get_environment(EnvVar.CMS_LOG_LEVEL)).upper()


__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    # Main interface
    "get_environment",
    "get_environment_info",
    # Convenience functions
    "get_api_url",
    "get_request_timeout",
    "get_default_language",
    "get_log_level",
    # Introspection
    "list_environment_variables",
]
