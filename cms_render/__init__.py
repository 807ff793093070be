"""cms-render - validation and rendering for bilingual CMS page content.

Example usage:
    >>> from cms_render import render_page, validate_page
    >>> result = validate_page({"version": "1.0", "root": {
    ...     "id": "1", "type": "Heading",
    ...     "props": {"text": {"en": "Hello", "ar": "مرحبا"}, "level": "h1"}}})
    >>> render_page(result.data, "ar").text_content()
    'مرحبا'
"""

from cms_render.i18n import (
    AlignToken,
    BilingualText,
    Direction,
    Language,
    coerce_language,
    resolve_alignment,
    resolve_direction,
    resolve_text,
)
from cms_render.render import Element, render_html, render_page, render_tree
from cms_render.schema import (
    SCHEMA_REGISTRY,
    ComponentType,
    export_component_schemas,
    export_json_schema,
    get_schema,
)
from cms_render.validation import (
    ComponentNode,
    PageContent,
    ValidationResult,
    is_valid_page,
    validate_component,
    validate_page,
)

__version__ = "0.1.0"

__all__ = [
    # i18n
    "Language",
    "BilingualText",
    "Direction",
    "AlignToken",
    "coerce_language",
    "resolve_text",
    "resolve_direction",
    "resolve_alignment",
    # Schema
    "ComponentType",
    "SCHEMA_REGISTRY",
    "get_schema",
    "export_component_schemas",
    "export_json_schema",
    # Validation
    "ComponentNode",
    "PageContent",
    "ValidationResult",
    "validate_page",
    "validate_component",
    "is_valid_page",
    # Rendering
    "Element",
    "render_tree",
    "render_page",
    "render_html",
]
