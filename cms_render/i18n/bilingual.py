"""Bilingual (English/Arabic) text values.

A bilingual value is either a plain, language-neutral string or a record
with a required English text and an optional Arabic translation.
"""

from collections.abc import Mapping
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from .lib import Language


class BilingualText(BaseModel):
    """English text with an optional Arabic translation."""

    en: StrictStr = Field(..., description="English text")
    ar: StrictStr | None = Field(None, description="Arabic text (optional)")

    model_config = ConfigDict(frozen=True, title="BilingualText")


BilingualValue = Union[StrictStr, BilingualText]


def resolve_text(value: Any, language: Language | str) -> str:
    """Resolve a bilingual value to the text shown for a language.

    Args:
        value: None, a plain string, a BilingualText, or a mapping with
            "en" and optional "ar" keys.
        language: Target language.

    Returns:
        The Arabic text when the language is Arabic and a non-empty
        translation exists, otherwise the English (or plain) text. None
        resolves to an empty string.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, BilingualText):
        en, ar = value.en, value.ar
    elif isinstance(value, Mapping):
        en, ar = value.get("en"), value.get("ar")
    else:
        return ""

    if language == Language.AR and isinstance(ar, str) and ar:
        return ar
    return en if isinstance(en, str) else ""


def pick_localized(
    default: Any, arabic: Any, language: Language | str
) -> Any:
    """Choose between a default value and its Arabic counterpart.

    CMS records store translations in sibling fields (``title`` and
    ``titleAr``). The Arabic value is used only for Arabic requests and only
    when it is present and non-empty.
    """
    if language == Language.AR and arabic:
        return arabic
    return default


__all__ = ["BilingualText", "BilingualValue", "resolve_text", "pick_localized"]
