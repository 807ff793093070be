"""Writing direction and RTL-aware alignment.

Alignment keywords come in two flavours:
- Physical (left, right, center, justify): explicit author intent, never
  mirrored.
- Logical (start, end): relative to the writing direction, so "start" is
  the left edge for English and the right edge for Arabic.

The resolvers return stable presentation tokens rather than raw keywords so
every component applies alignment the same way.
"""

from enum import Enum

from .lib import Language


class Direction(str, Enum):
    """Text direction (the HTML ``dir`` attribute)."""

    LTR = "ltr"
    RTL = "rtl"


class TextAlign(str, Enum):
    """Alignment keywords accepted from content authors."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"
    START = "start"
    END = "end"


class AlignToken(str, Enum):
    """Physical alignment token applied by the presentation layer.

    NONE is the neutral token: no alignment class is emitted and the element
    inherits alignment from the page direction.
    """

    NONE = ""
    LEFT = "text-left"
    CENTER = "text-center"
    RIGHT = "text-right"
    JUSTIFY = "text-justify"


_PHYSICAL_TOKENS = {
    TextAlign.LEFT: AlignToken.LEFT,
    TextAlign.CENTER: AlignToken.CENTER,
    TextAlign.RIGHT: AlignToken.RIGHT,
    TextAlign.JUSTIFY: AlignToken.JUSTIFY,
}

# Spacing class prefixes per physical side (margin, padding).
_MARGIN_PREFIX = {"left": "ml-", "right": "mr-"}
_PADDING_PREFIX = {"left": "pl-", "right": "pr-"}


def resolve_direction(language: Language | str) -> Direction:
    """Get the writing direction for a language.

    Arabic is right-to-left; every other value is left-to-right.
    """
    return Direction.RTL if language == Language.AR else Direction.LTR


def is_rtl(language: Language | str) -> bool:
    """Check whether a language is written right-to-left."""
    return resolve_direction(language) == Direction.RTL


def resolve_side(side: str, language: Language | str) -> str:
    """Resolve a logical or physical side to "left" or "right".

    Args:
        side: One of "start", "end", "left", "right".
        language: Language whose direction anchors logical sides.

    Returns:
        "left" or "right".

    Raises:
        ValueError: If side is not a recognised keyword.
    """
    if side in ("left", "right"):
        return side
    if side not in ("start", "end"):
        raise ValueError(f"Unknown side: {side!r}")
    rtl = is_rtl(language)
    if side == "start":
        return "right" if rtl else "left"
    return "left" if rtl else "right"


def physical_to_logical(side: str, language: Language | str) -> str:
    """Convert a physical side ("left"/"right") to "start"/"end".

    Raises:
        ValueError: If side is not "left" or "right".
    """
    if side not in ("left", "right"):
        raise ValueError(f"Expected 'left' or 'right', got {side!r}")
    rtl = is_rtl(language)
    if side == "left":
        return "end" if rtl else "start"
    return "start" if rtl else "end"


def resolve_alignment(
    align: TextAlign | str | None, language: Language | str
) -> AlignToken:
    """Resolve an author alignment keyword to a physical alignment token.

    Args:
        align: Alignment keyword, or None when the author set none.
        language: Language whose direction anchors start/end.

    Returns:
        The AlignToken to apply; AlignToken.NONE when align is absent.

    Raises:
        ValueError: If align is not a recognised keyword.

    Example:
        >>> resolve_alignment("start", "ar")
        <AlignToken.RIGHT: 'text-right'>
    """
    if align is None or align == "":
        return AlignToken.NONE
    keyword = TextAlign(align)
    if keyword in _PHYSICAL_TOKENS:
        return _PHYSICAL_TOKENS[keyword]
    side = resolve_side(keyword.value, language)
    return AlignToken.LEFT if side == "left" else AlignToken.RIGHT


def margin_class(side: str, size: str, language: Language | str) -> str:
    """Build a margin class for a logical or physical side ("ml-4" style)."""
    return f"{_MARGIN_PREFIX[resolve_side(side, language)]}{size}"


def padding_class(side: str, size: str, language: Language | str) -> str:
    """Build a padding class for a logical or physical side."""
    return f"{_PADDING_PREFIX[resolve_side(side, language)]}{size}"


__all__ = [
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
