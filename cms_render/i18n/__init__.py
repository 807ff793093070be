"""Language, bilingual text and writing-direction helpers.

Example usage:
    >>> from cms_render.i18n import Language, resolve_text, resolve_alignment
    >>> resolve_text({"en": "Hello", "ar": "مرحبا"}, Language.AR)
    'مرحبا'
    >>> resolve_alignment("start", Language.AR).value
    'text-right'
"""

from .bilingual import BilingualText, BilingualValue, pick_localized, resolve_text
from .direction import (
    AlignToken,
    Direction,
    TextAlign,
    is_rtl,
    margin_class,
    padding_class,
    physical_to_logical,
    resolve_alignment,
    resolve_direction,
    resolve_side,
)
from .lib import (
    DEFAULT_LANGUAGE,
    Language,
    coerce_language,
    detect_language,
    is_supported_language,
    opposite_language,
)

__all__ = [
    # Languages
    "Language",
    "DEFAULT_LANGUAGE",
    "is_supported_language",
    "coerce_language",
    "opposite_language",
    "detect_language",
    # Bilingual text
    "BilingualText",
    "BilingualValue",
    "resolve_text",
    "pick_localized",
    # Direction
    "Direction",
    "TextAlign",
    "AlignToken",
    "resolve_direction",
    "is_rtl",
    "resolve_side",
    "physical_to_logical",
    "resolve_alignment",
    "margin_class",
    "padding_class",
]
