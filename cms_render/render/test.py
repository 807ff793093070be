"""Unit tests for component dispatch and tree rendering."""

import logging
from dataclasses import replace

import pytest

from cms_render.i18n import Language
from cms_render.render import (
    COMPONENT_ID_ATTR,
    ComponentRenderer,
    Element,
    css_property,
    get_renderer,
    list_renderers,
    register_renderer,
    render_html,
    render_node,
    render_page,
    render_tree,
)
from cms_render.render import lib as render_lib
from cms_render.schema import ComponentProps, ComponentType
from cms_render.validation import ComponentNode, validate_page


def _render(root, language=Language.EN):
    result = validate_page({"root": root})
    assert result.success, result.error
    return render_tree(result.data.root, language)


def _node(node_id, node_type, props=None, children=None):
    node = {"id": node_id, "type": node_type, "props": props or {}}
    if children is not None:
        node["children"] = children
    return node


class TestElement:
    """Tests for the Element output tree."""

    @pytest.mark.unit
    def test_to_html_escapes(self):
        """Text and attribute values are escaped."""
        element = Element("a", attrs={"href": "/x?a=1&b=2"}).append("<b>")
        assert element.to_html() == '<a href="/x?a=1&amp;b=2">&lt;b&gt;</a>'

    @pytest.mark.unit
    def test_void_and_boolean_attributes(self):
        """Void tags have no closing tag; booleans render bare or not at all."""
        element = Element("img", attrs={"src": "s", "hidden": True, "open": False})
        assert element.to_html() == '<img src="s" hidden>'

    @pytest.mark.unit
    def test_style_and_classes(self):
        """Classes and styles serialize in a stable order."""
        element = Element("div").add_class("a b", None, "").set_style(
            backgroundColor="red", margin=None
        )
        assert element.to_html() == '<div class="a b" style="background-color: red"></div>'

    @pytest.mark.unit
    def test_css_property(self):
        """camelCase keys become CSS property names."""
        assert css_property("gridTemplateColumns") == "grid-template-columns"
        assert css_property("margin") == "margin"
        assert css_property("border-color") == "border-color"

    @pytest.mark.unit
    def test_text_content_and_find(self):
        """Helpers traverse descendants."""
        root = Element("div").append(
            Element("span", attrs={"id": "x"}).append("a"), "b"
        )
        assert root.text_content() == "ab"
        assert root.find("span", id="x") is not None
        assert root.find("p") is None


class TestDispatch:
    """Tests for the renderer registry."""

    @pytest.mark.unit
    def test_every_component_type_has_renderer(self):
        """Dispatch covers the whole schema registry."""
        for ct in ComponentType:
            assert get_renderer(ct.value) is not None, f"No renderer for {ct}"
        assert len(list_renderers()) == len(ComponentType)

    @pytest.mark.unit
    def test_register_new_renderer(self, monkeypatch):
        """New types plug in without touching dispatch code."""
        list_renderers()
        monkeypatch.setattr(render_lib, "_registry", dict(render_lib._registry))

        @register_renderer
        class MarqueeRenderer(ComponentRenderer):
            component_type = "Marquee"

            def render(self, node, language, children):
                return Element("marquee").append(*children)

        node = ComponentNode(id="m", type="Marquee", props=ComponentProps())
        element = render_node(node, Language.EN, [])
        assert element.tag == "marquee"
        assert element.attrs[COMPONENT_ID_ATTR] == "m"

    @pytest.mark.unit
    def test_renderers_report_their_type(self):
        """Each built-in renderer reports the key it is registered under."""
        for name in list_renderers():
            renderer = get_renderer(name)
            assert isinstance(renderer, ComponentRenderer)
            assert renderer.component_type == name
            assert ComponentType(renderer.component_type).value == name

    @pytest.mark.unit
    def test_renderer_without_type_rejected(self, monkeypatch):
        """A renderer that does not name its component type cannot register."""
        list_renderers()
        monkeypatch.setattr(render_lib, "_registry", dict(render_lib._registry))

        class NamelessRenderer(ComponentRenderer):
            def render(self, node, language, children):
                return Element("div")

        with pytest.raises(TypeError):
            register_renderer(NamelessRenderer)
        assert len(render_lib._registry) == len(ComponentType)

    @pytest.mark.unit
    def test_unknown_type_warns_and_returns_none(self, caplog):
        """Unknown types are a logged no-op."""
        node = ComponentNode(id="x", type="Marquee", props=ComponentProps())
        with caplog.at_level(logging.WARNING):
            assert render_node(node, Language.EN, []) is None
        assert "Marquee" in caplog.text

    @pytest.mark.unit
    def test_base_props_applied(self):
        """className and style apply to the outer element."""
        element = _render(
            _node("s", "Spacer", {"className": "my-8", "style": {"backgroundColor": "red"}})
        )
        assert "my-8" in element.classes
        assert element.style["background-color"] == "red"
        assert element.style["height"] == "2rem"


class TestRenderTree:
    """Tests for post-order tree rendering."""

    @pytest.mark.unit
    def test_arabic_heading_example(self):
        """Arabic heading renders the Arabic text with no alignment class."""
        element = _render(
            _node("1", "Heading", {"text": {"en": "Hello", "ar": "مرحبا"}, "level": "h1"}),
            Language.AR,
        )
        assert element.tag == "h1"
        assert element.text_content() == "مرحبا"
        assert not any(c.startswith("text-") for c in element.classes)

    @pytest.mark.unit
    def test_children_order_and_ids(self):
        """Children keep source order and carry their node ids."""
        element = _render(
            _node(
                "root",
                "Container",
                children=[_node(f"p{i}", "Paragraph", {"text": str(i)}) for i in range(3)],
            )
        )
        ids = [child.attrs[COMPONENT_ID_ATTR] for child in element.element_children()]
        assert ids == ["p0", "p1", "p2"]

    @pytest.mark.unit
    def test_unknown_child_dropped(self):
        """One unknown child never blanks its siblings."""
        page = validate_page(
            {
                "root": _node(
                    "r",
                    "Container",
                    children=[_node(f"c{i}", "Spacer") for i in range(4)],
                )
            }
        ).data
        children = list(page.root.children)
        children[1] = replace(children[1], type="Marquee")
        root = replace(page.root, children=tuple(children))

        element = render_tree(root, Language.EN)
        ids = [child.attrs[COMPONENT_ID_ATTR] for child in element.element_children()]
        assert ids == ["c0", "c2", "c3"]

    @pytest.mark.unit
    def test_unknown_root(self):
        """An unknown root renders nothing."""
        root = ComponentNode(id="r", type="Marquee", props=ComponentProps())
        assert render_tree(root, "en") is None

    @pytest.mark.unit
    def test_unsupported_language_coerced(self):
        """Third languages fall back to English."""
        element = _render(_node("1", "Heading", {"text": {"en": "Hi", "ar": "أهلا"}}), "fr")
        assert element.text_content() == "Hi"


class TestRenderPage:
    """Tests for the page wrapper."""

    @pytest.mark.unit
    @pytest.mark.parametrize("language,direction", [("en", "ltr"), ("ar", "rtl")])
    def test_wrapper_direction(self, language, direction):
        """The wrapper carries dir and lang."""
        page = validate_page({"root": _node("1", "Spacer")}).data
        wrapper = render_page(page, language)
        assert wrapper.attrs["dir"] == direction
        assert wrapper.attrs["lang"] == language
        assert "min-h-screen" in wrapper.classes
        assert wrapper.element_children()[0].attrs[COMPONENT_ID_ATTR] == "1"

    @pytest.mark.unit
    def test_render_html(self):
        """Pages serialize to HTML."""
        page = validate_page({"root": _node("1", "Heading", {"text": "Hi"})}).data
        assert render_html(page, "ar") == (
            '<div class="min-h-screen" dir="rtl" lang="ar">'
            '<h2 data-component-id="1">Hi</h2></div>'
        )


class TestComponents:
    """Tests for individual component renderers."""

    @pytest.mark.unit
    def test_columns_tracks(self):
        """Columns renders N tracks holding the children in order."""
        element = _render(
            _node(
                "cols",
                "Columns",
                {"columns": 3},
                [_node("a", "Paragraph", {"text": "A"}), _node("b", "Paragraph", {"text": "B"})],
            )
        )
        assert element.style["grid-template-columns"] == "repeat(3, 1fr)"
        assert element.style["gap"] == "1rem"
        assert [c.text_content() for c in element.element_children()] == ["A", "B"]

    @pytest.mark.unit
    def test_alignment_mirrors(self):
        """Logical alignment resolves per direction."""
        root = _node("p", "Paragraph", {"text": "x", "align": "start"})
        assert "text-left" in _render(root, Language.EN).classes
        assert "text-right" in _render(root, Language.AR).classes

    @pytest.mark.unit
    def test_button_link_and_button(self):
        """href selects a link; variant and size select classes."""
        link = _render(_node("b", "Button", {"text": "Go", "href": "/go", "variant": "outline", "size": "sm"}))
        assert link.tag == "a"
        assert link.attrs["href"] == "/go"
        assert "border-input" in link.classes
        assert "h-9" in link.classes

        button = _render(_node("b", "Button", {"text": "Go", "onClick": "subscribe"}))
        assert button.tag == "button"
        assert button.attrs["data-action"] == "subscribe"
        assert "bg-primary" in button.classes

    @pytest.mark.unit
    def test_image_fixed_and_fluid(self):
        """Both dimensions give a fixed image, otherwise fluid."""
        src = "https://cdn.example.com/a.jpg"
        fixed = _render(_node("i", "Image", {"src": src, "alt": "A", "width": 40, "height": 30}))
        assert fixed.attrs["width"] == 40
        assert "width" not in fixed.style

        fluid = _render(_node("i", "Image", {"src": src, "alt": "A", "width": 40}))
        assert fluid.style["width"] == "100%"
        assert fluid.style["height"] == "auto"
        assert fluid.style["object-fit"] == "cover"

    @pytest.mark.unit
    def test_hero_without_link_has_no_cta(self):
        """ctaText alone does not produce a CTA."""
        hero = _render(_node("h", "HeroSection", {"title": "T", "ctaText": "Go"}))
        assert hero.find("a") is None
        assert hero.find("button") is None

    @pytest.mark.unit
    def test_hero_with_cta(self):
        """ctaText and ctaLink produce a large button link."""
        hero = _render(
            _node(
                "h",
                "HeroSection",
                {"title": "T", "ctaText": {"en": "Go", "ar": "ابدأ"}, "ctaLink": "/go", "ctaVariant": "ghost"},
            ),
            Language.AR,
        )
        cta = hero.find("a")
        assert cta.text_content() == "ابدأ"
        assert "h-11" in cta.classes
        assert "hover:bg-accent" in cta.classes

    @pytest.mark.unit
    def test_hero_overlay_needs_background_image(self):
        """Overlay opacity applies only over a background image."""
        plain = _render(_node("h", "HeroSection", {"title": "T"}))
        assert not plain.find_all(predicate=lambda el: "opacity" in el.style)

        pictured = _render(
            _node("h", "HeroSection", {"title": "T", "backgroundImage": "https://cdn.example.com/h.jpg", "overlayOpacity": 0.3})
        )
        overlays = pictured.find_all(predicate=lambda el: "opacity" in el.style)
        assert overlays[0].style["opacity"] == "0.3"
        assert pictured.style["background-image"] == "url(https://cdn.example.com/h.jpg)"

    @pytest.mark.unit
    def test_hero_default_alignment(self):
        """Hero text is centered by default."""
        hero = _render(_node("h", "HeroSection", {"title": "T"}))
        assert hero.find_all(predicate=lambda el: "text-center" in el.classes)

    @pytest.mark.unit
    def test_divider_and_spacer(self):
        """Leaf presentation elements use their defaults."""
        divider = _render(_node("d", "Divider"))
        assert divider.tag == "hr"
        assert divider.style == {
            "border-color": "#e5e7eb",
            "border-width": "1px",
            "margin": "1rem 0",
        }

    @pytest.mark.unit
    def test_accordion_exclusive_group(self):
        """Items share a group name unless allowMultiple is set."""
        items = [{"title": "Q1", "content": "A1"}, {"title": "Q2", "content": "A2"}]
        exclusive = _render(_node("faq", "Accordion", {"items": items}))
        names = {d.attrs["name"] for d in exclusive.find_all("details")}
        assert names == {"accordion-faq"}

        multiple = _render(_node("faq", "Accordion", {"items": items, "allowMultiple": True}))
        assert all(d.attrs["name"] is None for d in multiple.find_all("details"))

    @pytest.mark.unit
    def test_tabs_default_selected(self):
        """defaultTab selects the visible panel."""
        tabs = [{"label": "One", "content": "1"}, {"label": "Two", "content": "2"}]
        element = _render(_node("t", "Tabs", {"tabs": tabs, "defaultTab": 1}))
        selected = element.find_all(predicate=lambda el: el.attrs.get("aria-selected") == "true")
        assert [el.text_content() for el in selected] == ["Two"]
        hidden = [el.attrs["hidden"] for el in element.find_all(predicate=lambda el: el.attrs.get("role") == "tabpanel")]
        assert hidden == [True, False]

    @pytest.mark.unit
    def test_video_autoplay(self):
        """Autoplay adds the permission and query parameter."""
        element = _render(_node("v", "Video", {"url": "https://www.youtube.com/embed/x", "autoplay": True}))
        frame = element.find("iframe")
        assert frame.attrs["src"].endswith("?autoplay=1")
        assert frame.attrs["allow"].startswith("autoplay")
        assert element.style["aspect-ratio"] == "16/9"

    @pytest.mark.unit
    def test_card_with_children(self):
        """Cards hold title, description and child elements."""
        element = _render(
            _node(
                "c",
                "Card",
                {"title": {"en": "Card", "ar": "بطاقة"}, "shadow": False},
                [_node("b", "Button", {"text": "Go"})],
            ),
            Language.AR,
        )
        assert element.tag == "article"
        assert "shadow-md" not in element.classes
        assert element.find("h3").text_content() == "بطاقة"
        assert element.find("button") is not None

    @pytest.mark.unit
    def test_property_carousel_shell(self):
        """The carousel emits a mount point and a localized view-all link."""
        element = _render(
            _node("p", "PropertyCarousel", {"status": "Upcoming", "limit": 4}), Language.AR
        )
        mount = element.find("div", **{"data-property-status": "Upcoming"})
        assert mount.attrs["data-property-limit"] == 4
        link = element.find("a")
        assert link.attrs["href"] == "/properties"
        assert link.text_content() == "عرض الكل"
        assert "mr-4" in link.classes
