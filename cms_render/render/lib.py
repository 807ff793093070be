"""Component dispatch table and tree renderer.

Renderers are registered per component type in an open registry, so new
types only need a new ComponentRenderer subclass decorated with
@register_renderer. The tree renderer walks a validated tree depth-first,
rendering every child before its parent.
"""

import importlib
from abc import ABC, abstractmethod

from cms_render.core.log import get_logger
from cms_render.i18n import Language, coerce_language, resolve_direction
from cms_render.validation import ComponentNode, PageContent

from .element import Element, css_style

logger = get_logger(__name__)

COMPONENT_ID_ATTR = "data-component-id"


class ComponentRenderer(ABC):
    """Abstract base class for component renderers.

    A renderer is a pure function of its inputs: the validated node, the
    resolved language, and the already-rendered children. Shared base props
    (className, style) are applied by the dispatcher, not by subclasses.

    Example:
        >>> @register_renderer
        ... class SpacerRenderer(ComponentRenderer):
        ...     component_type = "Spacer"
        ...     def render(self, node, language, children):
        ...         return Element("div").set_style(height=node.props.height)
    """

    @property
    @abstractmethod
    def component_type(self) -> str:
        """Component type discriminator handled by this renderer."""
        ...

    @abstractmethod
    def render(
        self, node: ComponentNode, language: Language, children: list[Element]
    ) -> Element:
        """Render one node.

        Args:
            node: Validated node (props carry all defaults).
            language: Resolved content language.
            children: Rendered children in order, unknown types removed.

        Returns:
            The rendered Element.
        """
        ...


# Renderer registry - populated by component modules on import
_registry: dict[str, ComponentRenderer] = {}
_builtins_loaded = False


def register_renderer(renderer_cls: type[ComponentRenderer]) -> type[ComponentRenderer]:
    """Register a renderer class in the dispatch table.

    A single instance is created and shared; renderers hold no state.

    Args:
        renderer_cls: The renderer class to register.

    Returns:
        The renderer class (for decorator chaining).
    """
    renderer = renderer_cls()
    _registry[renderer.component_type] = renderer
    return renderer_cls


def _load_builtin_renderers() -> None:
    """Import the bundled component modules to trigger registration."""
    global _builtins_loaded
    if not _builtins_loaded:
        importlib.import_module("cms_render.render.components")
        _builtins_loaded = True


def get_renderer(component_type: str) -> ComponentRenderer | None:
    """Get the renderer registered for a component type, or None."""
    _load_builtin_renderers()
    return _registry.get(component_type)


def list_renderers() -> list[str]:
    """List component types that have a renderer."""
    _load_builtin_renderers()
    return list(_registry.keys())


def render_node(
    node: ComponentNode, language: Language, children: list[Element]
) -> Element | None:
    """Dispatch one node to its renderer.

    Unknown types (possible only when validation was bypassed or the schema
    and dispatch tables drift apart) are skipped with a warning.

    Args:
        node: Validated node.
        language: Resolved content language.
        children: Rendered children.

    Returns:
        The rendered Element tagged with the node id, or None for unknown types.
    """
    renderer = get_renderer(node.type)
    if renderer is None:
        logger.warning(
            f"No renderer for component type '{node.type}' (node '{node.id}'), skipping"
        )
        return None

    element = renderer.render(node, language, children)
    element.add_class(node.props.class_name)
    element.style.update(css_style(node.props.style))
    element.attrs[COMPONENT_ID_ATTR] = node.id
    return element


def _render_subtree(node: ComponentNode, language: Language) -> Element | None:
    if get_renderer(node.type) is None:
        return render_node(node, language, [])

    children = []
    for child in node.children or ():
        rendered = _render_subtree(child, language)
        if rendered is not None:
            children.append(rendered)
    return render_node(node, language, children)


def render_tree(root: ComponentNode, language: Language | str) -> Element | None:
    """Render a validated tree depth-first, children before parents.

    Args:
        root: Root of a validated tree.
        language: Content language; unsupported values fall back to English.

    Returns:
        The rendered root Element, or None when the root type is unknown.
    """
    return _render_subtree(root, coerce_language(language))


def render_page(page: PageContent, language: Language | str) -> Element:
    """Render a page inside a direction-aware document wrapper.

    Args:
        page: Validated page content.
        language: Content language.

    Returns:
        A ``div`` carrying ``dir`` and ``lang`` with the rendered root inside.
    """
    language = coerce_language(language)
    wrapper = Element(
        "div",
        attrs={"dir": resolve_direction(language).value, "lang": language.value},
        classes=["min-h-screen"],
    )
    return wrapper.append(render_tree(page.root, language))


def render_html(page: PageContent, language: Language | str) -> str:
    """Render a page straight to an HTML string."""
    return render_page(page, language).to_html()


__all__ = [
    "COMPONENT_ID_ATTR",
    "ComponentRenderer",
    "register_renderer",
    "get_renderer",
    "list_renderers",
    "render_node",
    "render_tree",
    "render_page",
    "render_html",
]
