"""Typography renderers: Heading and Paragraph."""

from cms_render.i18n import Language, resolve_alignment, resolve_text
from cms_render.schema import ComponentType
from cms_render.validation import ComponentNode

from ..element import Element
from ..lib import ComponentRenderer, register_renderer


@register_renderer
class HeadingRenderer(ComponentRenderer):
    """Heading whose tag comes from ``level``."""

    @property
    def component_type(self) -> str:
        return ComponentType.HEADING.value

    def render(
        self, node: ComponentNode, language: Language, children: list[Element]
    ) -> Element:
        props = node.props
        element = Element(props.level)
        element.add_class(resolve_alignment(props.align, language).value)
        element.set_style(color=props.color)
        return element.append(resolve_text(props.text, language))


@register_renderer
class ParagraphRenderer(ComponentRenderer):
    """Body text with optional alignment, size and color."""

    @property
    def component_type(self) -> str:
        return ComponentType.PARAGRAPH.value

    def render(
        self, node: ComponentNode, language: Language, children: list[Element]
    ) -> Element:
        props = node.props
        element = Element("p")
        element.add_class(resolve_alignment(props.align, language).value)
        element.set_style(fontSize=props.font_size, color=props.color)
        return element.append(resolve_text(props.text, language))
