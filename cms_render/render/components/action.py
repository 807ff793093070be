"""Button renderer and the shared button builder."""

from cms_render.i18n import Language, resolve_text
from cms_render.schema import ButtonProps, ButtonSize, ButtonVariant, ComponentType
from cms_render.validation import ComponentNode

from ..element import Element
from ..lib import ComponentRenderer, register_renderer

BASE_CLASSES = (
    "inline-flex items-center justify-center rounded-md font-medium "
    "transition-colors focus-visible:outline-none focus-visible:ring-2 "
    "focus-visible:ring-offset-2 disabled:pointer-events-none disabled:opacity-50"
)

VARIANT_CLASSES: dict[str, str] = {
    ButtonVariant.DEFAULT.value: "bg-primary text-primary-foreground hover:bg-primary/90",
    ButtonVariant.OUTLINE.value: (
        "border border-input bg-background hover:bg-accent hover:text-accent-foreground"
    ),
    ButtonVariant.GHOST.value: "hover:bg-accent hover:text-accent-foreground",
    ButtonVariant.DESTRUCTIVE.value: (
        "bg-destructive text-destructive-foreground hover:bg-destructive/90"
    ),
}

SIZE_CLASSES: dict[str, str] = {
    ButtonSize.SM.value: "h-9 px-3 text-sm",
    ButtonSize.DEFAULT.value: "h-10 px-4 py-2",
    ButtonSize.LG.value: "h-11 px-8 text-lg",
}


def build_button(props: ButtonProps, language: Language) -> Element:
    """Build a button element from validated button props.

    A link is produced when ``href`` is set, otherwise a ``button``.
    """
    if props.href:
        element = Element("a", attrs={"href": props.href})
    else:
        element = Element("button", attrs={"type": "button"})
    if props.on_click:
        element.attrs["data-action"] = props.on_click

    element.add_class(
        BASE_CLASSES, VARIANT_CLASSES[props.variant], SIZE_CLASSES[props.size]
    )
    return element.append(resolve_text(props.text, language))


@register_renderer
class ButtonRenderer(ComponentRenderer):
    """Standalone button; a link when ``href`` is set."""

    @property
    def component_type(self) -> str:
        return ComponentType.BUTTON.value

    def render(
        self, node: ComponentNode, language: Language, children: list[Element]
    ) -> Element:
        return build_button(node.props, language)
