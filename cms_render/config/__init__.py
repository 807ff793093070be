"""Centralized configuration management for cms-render.

Provides unified access to all configuration via the `get_environment()` function.

Example:
    >>> from cms_render.config import EnvVar, get_environment
    >>>
    >>> api_url = get_environment(EnvVar.CMS_API_URL)  # "http://localhost:3000"
    >>> timeout = get_environment(EnvVar.CMS_REQUEST_TIMEOUT, override=30)

Environment Variable Categories:
    service: Headless CMS API location and request timeout
    i18n: Default language
    logging: Log level, log file, debug switch
"""

from .lib import (
    # Core types
    EnvConfig,
    EnvVar,
    # Main interface
    get_api_url,
    get_default_language,
    get_environment,
    get_environment_info,
    get_log_level,
    get_request_timeout,
    # Introspection
    list_environment_variables,
)

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
