"""Interactive renderers: Accordion and Tabs.

Both render to plain HTML that works without scripts: accordions use
``details``/``summary`` and tabs use ``hidden`` panels.
"""

from cms_render.i18n import Language, resolve_text
from cms_render.schema import ComponentType
from cms_render.validation import ComponentNode

from ..element import Element
from ..lib import ComponentRenderer, register_renderer


@register_renderer
class AccordionRenderer(ComponentRenderer):
    """One ``details`` per item.

    Unless ``allowMultiple`` is set, items share a ``name`` so the browser
    keeps at most one open.
    """

    @property
    def component_type(self) -> str:
        return ComponentType.ACCORDION.value

    def render(
        self, node: ComponentNode, language: Language, children: list[Element]
    ) -> Element:
        props = node.props
        group = None if props.allow_multiple else f"accordion-{node.id}"

        accordion = Element("div", classes=["divide-y", "rounded-md", "border"])
        for item in props.items:
            summary = Element("summary", classes=["cursor-pointer", "px-4", "py-3", "font-medium"])
            content = Element("div", classes=["px-4", "pb-4"])
            details = Element("details", attrs={"name": group}).append(
                summary.append(resolve_text(item.title, language)),
                content.append(resolve_text(item.content, language)),
            )
            accordion.append(details)
        return accordion


@register_renderer
class TabsRenderer(ComponentRenderer):
    """Tab list with one panel per tab.

    Only the ``defaultTab`` panel is visible; the others carry ``hidden``.
    """

    @property
    def component_type(self) -> str:
        return ComponentType.TABS.value

    def render(
        self, node: ComponentNode, language: Language, children: list[Element]
    ) -> Element:
        props = node.props
        tab_list = Element("div", attrs={"role": "tablist"}, classes=["flex", "border-b"])
        panels = []
        for index, tab in enumerate(props.tabs):
            selected = index == props.default_tab
            tab_id = f"{node.id}-tab-{index}"
            panel_id = f"{node.id}-panel-{index}"

            button = Element(
                "button",
                attrs={
                    "type": "button",
                    "role": "tab",
                    "id": tab_id,
                    "aria-controls": panel_id,
                    "aria-selected": "true" if selected else "false",
                },
                classes=["px-4", "py-2"],
            )
            if selected:
                button.add_class("border-b-2 border-primary font-medium")
            tab_list.append(button.append(resolve_text(tab.label, language)))

            panel = Element(
                "div",
                attrs={
                    "role": "tabpanel",
                    "id": panel_id,
                    "aria-labelledby": tab_id,
                    "hidden": not selected,
                },
                classes=["py-4"],
            )
            panels.append(panel.append(resolve_text(tab.content, language)))

        return Element("div").append(tab_list, *panels)
