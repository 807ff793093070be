"""Component dispatch and tree rendering.

Example usage:
    >>> from cms_render.render import render_page
    >>> from cms_render.validation import validate_page
    >>> page = validate_page({"root": {"id": "1", "type": "Heading",
    ...                               "props": {"text": "Hi"}}}).data
    >>> render_page(page, "ar").to_html()
    '<div class="min-h-screen" dir="rtl" lang="ar"><h2 data-component-id="1">Hi</h2></div>'
"""

from .element import VOID_TAGS, Element, css_property, css_style
from .lib import (
    COMPONENT_ID_ATTR,
    ComponentRenderer,
    get_renderer,
    list_renderers,
    register_renderer,
    render_html,
    render_node,
    render_page,
    render_tree,
)

__all__ = [
    # Output tree
    "Element",
    "VOID_TAGS",
    "css_property",
    "css_style",
    # Dispatch
    "COMPONENT_ID_ATTR",
    "ComponentRenderer",
    "register_renderer",
    "get_renderer",
    "list_renderers",
    "render_node",
    # Tree rendering
    "render_tree",
    "render_page",
    "render_html",
]
