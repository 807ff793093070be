"""Layout renderers: Container, Columns, Spacer, Divider."""

from cms_render.i18n import Language
from cms_render.schema import ComponentType
from cms_render.validation import ComponentNode

from ..element import Element
from ..lib import ComponentRenderer, register_renderer


@register_renderer
class ContainerRenderer(ComponentRenderer):
    """Plain wrapper; spacing and background become inline styles."""

    @property
    def component_type(self) -> str:
        return ComponentType.CONTAINER.value

    def render(
        self, node: ComponentNode, language: Language, children: list[Element]
    ) -> Element:
        props = node.props
        element = Element("div").set_style(
            maxWidth=props.max_width,
            padding=props.padding,
            margin=props.margin,
            backgroundColor=props.background_color,
        )
        return element.append(*children)


@register_renderer
class ColumnsRenderer(ComponentRenderer):
    """CSS grid with one equal track per column."""

    @property
    def component_type(self) -> str:
        return ComponentType.COLUMNS.value

    def render(
        self, node: ComponentNode, language: Language, children: list[Element]
    ) -> Element:
        props = node.props
        element = Element("div", classes=["grid"]).set_style(
            gridTemplateColumns=f"repeat({props.columns}, 1fr)",
            gap=props.gap,
        )
        return element.append(*children)


@register_renderer
class SpacerRenderer(ComponentRenderer):
    """Empty block of fixed height, hidden from assistive technology."""

    @property
    def component_type(self) -> str:
        return ComponentType.SPACER.value

    def render(
        self, node: ComponentNode, language: Language, children: list[Element]
    ) -> Element:
        return Element("div", attrs={"aria-hidden": "true"}).set_style(
            height=node.props.height
        )


@register_renderer
class DividerRenderer(ComponentRenderer):
    """Horizontal rule."""

    @property
    def component_type(self) -> str:
        return ComponentType.DIVIDER.value

    def render(
        self, node: ComponentNode, language: Language, children: list[Element]
    ) -> Element:
        props = node.props
        return Element("hr").set_style(
            borderColor=props.color,
            borderWidth=props.thickness,
            margin=props.margin,
        )
