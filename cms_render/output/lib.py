"""Output formatting for validated content trees.

Generates human-readable outlines of component trees for review on the
command line, alongside the rendered HTML.
"""

from dataclasses import dataclass
from typing import Any

from cms_render.i18n import Language, coerce_language, resolve_text
from cms_render.render import render_html
from cms_render.schema import FieldKind, get_field_specs
from cms_render.validation import ComponentNode, PageContent

# Longest text preview shown in an outline line
PREVIEW_LENGTH = 40


@dataclass
class RenderOutput:
    """Complete output for one rendered page.

    Attributes:
        text_tree: Human-readable tree outline.
        html: Rendered HTML document fragment.
        page: Validated page content.
        language: Language used for rendering.
    """

    text_tree: str
    html: str
    page: PageContent
    language: Language


_SKIPPED_KINDS = (FieldKind.BILINGUAL, FieldKind.OBJECT, FieldKind.ARRAY)


def _props(node: ComponentNode) -> list[tuple[str, str, Any]]:
    """(python name, wire name, value) for each prop, in declaration order."""
    fields = type(node.props).model_fields
    return [
        (name, field.alias or name, getattr(node.props, name))
        for name, field in fields.items()
    ]


def _preview(node: ComponentNode, language: Language) -> str | None:
    """First bilingual prop of the node, resolved and shortened."""
    specs = get_field_specs(node.type) or {}
    for _name, alias, value in _props(node):
        spec = specs.get(alias)
        if spec is None or spec.kind != FieldKind.BILINGUAL:
            continue
        text = resolve_text(value, language)
        if text:
            if len(text) > PREVIEW_LENGTH:
                text = text[: PREVIEW_LENGTH - 3] + "..."
            return f'"{text}"'
    return None


def _explicit_attrs(node: ComponentNode) -> list[str]:
    """Scalar props the author set explicitly, as key=value."""
    specs = get_field_specs(node.type) or {}
    attrs = []
    for name, alias, value in _props(node):
        spec = specs.get(alias)
        if name not in node.props.model_fields_set or value is None or alias == "className":
            continue
        if spec is not None and spec.kind in _SKIPPED_KINDS:
            continue
        attrs.append(f"{alias}={value}")
    return attrs


def format_component_tree(
    node: ComponentNode, language: Language | str = Language.EN
) -> str:
    """Format a validated tree as a human-readable outline.

    Example output:
        Container #root
        ├── HeroSection #hero "Invest in real estate" [ctaLink=/signup]
        ├── Columns #cols [columns=3]
        │   ├── Heading #h1 "Transparent" [level=h3]
        │   └── Paragraph #p1 "Every property is vetted"
        └── PropertyCarousel #listings [limit=3]

    Args:
        node: Root node to format.
        language: Language used to resolve text previews.

    Returns:
        Formatted tree string.
    """
    lines: list[str] = []
    _format_node(node, coerce_language(language), lines, "", is_last=True, is_root=True)
    return "\n".join(lines)


def _format_node(
    node: ComponentNode,
    language: Language,
    lines: list[str],
    prefix: str,
    is_last: bool,
    is_root: bool = False,
) -> None:
    """Recursively format a node and its children."""
    if is_root:
        connector = ""
        child_prefix = ""
    else:
        connector = "└── " if is_last else "├── "
        child_prefix = prefix + ("    " if is_last else "│   ")

    parts = [f"{node.type} #{node.id}"]
    preview = _preview(node, language)
    if preview:
        parts.append(preview)
    attrs = _explicit_attrs(node)
    if attrs:
        parts.append(f"[{', '.join(attrs)}]")
    lines.append(f"{prefix}{connector}{' '.join(parts)}")

    children = node.children or ()
    for i, child in enumerate(children):
        _format_node(child, language, lines, child_prefix, i == len(children) - 1)


class OutputGenerator:
    """Generates outline and HTML output for validated pages."""

    def __init__(self, default_language: Language | str = Language.EN):
        """Initialize generator.

        Args:
            default_language: Language used when generate() gets none.
        """
        self._default_language = coerce_language(default_language)

    def generate(
        self, page: PageContent, language: Language | str | None = None
    ) -> RenderOutput:
        """Generate output for a page.

        Args:
            page: Validated page content.
            language: Language override.

        Returns:
            RenderOutput with outline and HTML.
        """
        resolved = coerce_language(language, self._default_language)
        return RenderOutput(
            text_tree=format_component_tree(page.root, resolved),
            html=render_html(page, resolved),
            page=page,
            language=resolved,
        )


__all__ = ["format_component_tree", "RenderOutput", "OutputGenerator"]
