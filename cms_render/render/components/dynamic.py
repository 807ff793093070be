"""PropertyCarousel renderer.

Listings are live data loaded by the host page. The renderer only emits the
section shell and a mount point describing which listings to load.
"""

from cms_render.i18n import BilingualText, Language, margin_class, resolve_text
from cms_render.schema import ComponentType
from cms_render.validation import ComponentNode

from ..element import Element
from ..lib import ComponentRenderer, register_renderer

VIEW_ALL_LABEL = BilingualText(en="View all", ar="عرض الكل")


@register_renderer
class PropertyCarouselRenderer(ComponentRenderer):
    """Section header plus a listings mount point."""

    @property
    def component_type(self) -> str:
        return ComponentType.PROPERTY_CAROUSEL.value

    def render(
        self, node: ComponentNode, language: Language, children: list[Element]
    ) -> Element:
        props = node.props
        title = resolve_text(props.title, language)
        subtitle = resolve_text(props.subtitle, language)

        header = Element("div", classes=["mb-8", "flex", "items-end", "justify-between"])
        heading = Element("div")
        if title:
            heading.append(Element("h2", classes=["text-3xl", "font-bold"]).append(title))
        if subtitle:
            heading.append(Element("p", classes=["text-muted-foreground"]).append(subtitle))
        header.append(heading)

        if props.show_view_all:
            link = Element("a", attrs={"href": props.view_all_link}, classes=["font-medium"])
            link.add_class(margin_class("start", "4", language))
            header.append(link.append(resolve_text(VIEW_ALL_LABEL, language)))

        mount = Element(
            "div",
            attrs={
                "data-property-status": props.status,
                "data-property-limit": props.limit,
            },
            classes=["property-carousel"],
        )
        return Element("section", classes=["py-12"]).append(header, mount)
