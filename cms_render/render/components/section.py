"""Section renderers: HeroSection and Card."""

from cms_render.i18n import Language, resolve_alignment, resolve_text
from cms_render.schema import ButtonProps, ButtonSize, ComponentType
from cms_render.validation import ComponentNode

from ..element import Element
from ..lib import ComponentRenderer, register_renderer
from .action import build_button


@register_renderer
class HeroSectionRenderer(ComponentRenderer):
    """Full-width banner.

    The overlay is drawn only over a background image, and the CTA only when
    both its text and link resolve to non-empty values.
    """

    @property
    def component_type(self) -> str:
        return ComponentType.HERO_SECTION.value

    def render(
        self, node: ComponentNode, language: Language, children: list[Element]
    ) -> Element:
        props = node.props
        section = Element(
            "section", classes=["relative", "flex", "items-center", "justify-center"]
        )
        section.set_style(
            height=props.height,
            backgroundImage=f"url({props.background_image})" if props.background_image else None,
            backgroundColor=props.background_color,
            backgroundSize="cover",
            backgroundPosition="center",
        )
        if props.background_image:
            overlay = Element("div", classes=["absolute", "inset-0", "bg-black"])
            section.append(overlay.set_style(opacity=props.overlay_opacity))

        content = Element("div", classes=["relative", "z-10", "max-w-4xl", "px-4"])
        content.add_class(resolve_alignment(props.text_align, language).value)
        content.set_style(color=props.text_color)

        title = Element("h1", classes=["text-4xl", "md:text-6xl", "font-bold", "mb-4"])
        content.append(title.append(resolve_text(props.title, language)))

        subtitle = resolve_text(props.subtitle, language)
        if subtitle:
            content.append(
                Element("p", classes=["text-xl", "md:text-2xl", "mb-8"]).append(subtitle)
            )

        if resolve_text(props.cta_text, language) and props.cta_link:
            cta = ButtonProps.model_validate(
                {
                    "text": props.cta_text,
                    "href": props.cta_link,
                    "variant": props.cta_variant,
                    "size": ButtonSize.LG.value,
                }
            )
            content.append(build_button(cta, language))

        return section.append(content)


@register_renderer
class CardRenderer(ComponentRenderer):
    """Article with optional image, title and description above its children."""

    @property
    def component_type(self) -> str:
        return ComponentType.CARD.value

    def render(
        self, node: ComponentNode, language: Language, children: list[Element]
    ) -> Element:
        props = node.props
        title = resolve_text(props.title, language)
        description = resolve_text(props.description, language)

        card = Element("article", classes=["overflow-hidden", "rounded-lg", "border", "bg-card"])
        if props.shadow:
            card.add_class("shadow-md")
        if props.image_url:
            card.append(
                Element(
                    "img",
                    attrs={"src": props.image_url, "alt": title},
                    classes=["h-48", "w-full", "object-cover"],
                )
            )

        body = Element("div").set_style(padding=props.padding)
        if title:
            body.append(Element("h3", classes=["text-xl", "font-semibold", "mb-2"]).append(title))
        if description:
            body.append(Element("p", classes=["text-muted-foreground"]).append(description))
        body.append(*children)
        return card.append(body)
