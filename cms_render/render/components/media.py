"""Media renderers: Image and Video."""

from cms_render.i18n import Language
from cms_render.schema import ComponentType
from cms_render.validation import ComponentNode

from ..element import Element
from ..lib import ComponentRenderer, register_renderer

VIDEO_PERMISSIONS = "encrypted-media; picture-in-picture"


@register_renderer
class ImageRenderer(ComponentRenderer):
    """Fixed-size image when both dimensions are known, fluid otherwise."""

    @property
    def component_type(self) -> str:
        return ComponentType.IMAGE.value

    def render(
        self, node: ComponentNode, language: Language, children: list[Element]
    ) -> Element:
        props = node.props
        element = Element("img", attrs={"src": props.src, "alt": props.alt})
        element.set_style(objectFit=props.object_fit)
        if props.width and props.height:
            element.attrs["width"] = props.width
            element.attrs["height"] = props.height
        else:
            element.set_style(width="100%", height="auto")
        return element


@register_renderer
class VideoRenderer(ComponentRenderer):
    """Responsive embed sized by its aspect ratio."""

    @property
    def component_type(self) -> str:
        return ComponentType.VIDEO.value

    def render(
        self, node: ComponentNode, language: Language, children: list[Element]
    ) -> Element:
        props = node.props
        src = props.url
        allow = VIDEO_PERMISSIONS
        if props.autoplay:
            src += ("&" if "?" in src else "?") + "autoplay=1"
            allow = f"autoplay; {allow}"

        frame = Element(
            "iframe",
            attrs={"src": src, "title": "Video", "allow": allow, "allowfullscreen": True},
            classes=["absolute", "inset-0", "h-full", "w-full"],
        )
        wrapper = Element("div", classes=["relative", "w-full", "overflow-hidden"])
        wrapper.set_style(aspectRatio=props.aspect_ratio)
        return wrapper.append(frame)
