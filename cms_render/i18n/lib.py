"""Supported languages and the locale boundary.

Every request-supplied language passes through `coerce_language` before it
reaches the resolvers or the renderer, so the core only ever sees one of the
two `Language` members.
"""

from enum import Enum

from cms_render.core.log import get_logger

logger = get_logger(__name__)


class Language(str, Enum):
    """Content languages served by the site."""

    EN = "en"
    AR = "ar"


DEFAULT_LANGUAGE = Language.EN


def is_supported_language(value: object) -> bool:
    """Check whether a value names a supported language."""
    if isinstance(value, Language):
        return True
    return isinstance(value, str) and value in {lang.value for lang in Language}


def coerce_language(
    value: object, default: Language = DEFAULT_LANGUAGE
) -> Language:
    """Map an arbitrary locale value onto a supported Language.

    Args:
        value: Raw language value (route segment, cookie, config entry).
        default: Language used when value is missing or unsupported.

    Returns:
        The matching Language, or `default`.
    """
    if isinstance(value, Language):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        if is_supported_language(normalized):
            return Language(normalized)
    logger.debug(f"Unsupported language {value!r}, using '{default.value}'")
    return default


def opposite_language(language: Language) -> Language:
    """Return the other supported language (for language switch links)."""
    return Language.AR if language == Language.EN else Language.EN


def detect_language(
    accept_language: str | None = None,
    cookie: str | None = None,
    default: Language = DEFAULT_LANGUAGE,
) -> Language:
    """Pick the language for a request that carries no language segment.

    A valid language cookie wins; otherwise an Accept-Language header that
    mentions Arabic selects Arabic; otherwise `default`.

    Args:
        accept_language: Raw Accept-Language header value.
        cookie: Value of the stored language preference cookie.
        default: Fallback language.

    Returns:
        The detected Language.
    """
    if cookie and is_supported_language(cookie.strip().lower()):
        return Language(cookie.strip().lower())
    if accept_language:
        for part in accept_language.split(","):
            tag = part.split(";")[0].strip().lower()
            if tag == "ar" or tag.startswith("ar-"):
                return Language.AR
    return default


__all__ = [
    "Language",
    "DEFAULT_LANGUAGE",
    "is_supported_language",
    "coerce_language",
    "opposite_language",
    "detect_language",
]
