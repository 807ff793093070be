"""Rendered output tree.

Renderers produce Element trees rather than strings so callers can inspect
the structure (tests, outline printing) before serializing to HTML.
"""

import html
import re
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Union

# Elements that never have content or a closing tag
VOID_TAGS = frozenset({"area", "br", "hr", "img", "input", "source", "track"})

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")

Node = Union["Element", str]


def css_property(name: str) -> str:
    """Convert a camelCase style key to its CSS property name.

    Example:
        >>> css_property("backgroundColor")
        'background-color'
    """
    if "-" in name:
        return name
    return _CAMEL_BOUNDARY.sub("-", name).lower()


def css_style(values: Mapping[str, Any] | None) -> dict[str, str]:
    """Convert a style mapping to CSS declarations, dropping empty values."""
    if not values:
        return {}
    return {
        css_property(key): str(value)
        for key, value in values.items()
        if value is not None and value != ""
    }


@dataclass
class Element:
    """An HTML element in the rendered tree.

    Attributes:
        tag: Tag name.
        attrs: Attributes in output order. True renders a bare attribute;
            None and False are omitted.
        classes: CSS class tokens.
        style: CSS declarations keyed by property name.
        children: Child elements and text, in order.
    """

    tag: str
    attrs: dict[str, Any] = field(default_factory=dict)
    classes: list[str] = field(default_factory=list)
    style: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)

    def add_class(self, *tokens: str | None) -> "Element":
        """Append class tokens, splitting on whitespace and skipping blanks."""
        for token in tokens:
            if token:
                self.classes.extend(token.split())
        return self

    def set_style(self, **declarations: Any) -> "Element":
        """Set CSS declarations from camelCase keyword arguments."""
        self.style.update(css_style(declarations))
        return self

    def append(self, *nodes: Node | None) -> "Element":
        """Append children, skipping None."""
        self.children.extend(node for node in nodes if node is not None)
        return self

    def iter(self) -> Iterator["Element"]:
        """Yield this element and all descendant elements in pre-order."""
        yield self
        for child in self.children:
            if isinstance(child, Element):
                yield from child.iter()

    def find_all(
        self,
        tag: str | None = None,
        predicate: Callable[["Element"], bool] | None = None,
    ) -> list["Element"]:
        """Find descendant elements (including self) by tag and predicate."""
        return [
            element
            for element in self.iter()
            if (tag is None or element.tag == tag)
            and (predicate is None or predicate(element))
        ]

    def find(self, tag: str | None = None, **attrs: Any) -> "Element | None":
        """Find the first element with a tag and matching attributes."""
        matches = self.find_all(
            tag,
            lambda el: all(el.attrs.get(key) == value for key, value in attrs.items()),
        )
        return matches[0] if matches else None

    def element_children(self) -> list["Element"]:
        """Child elements, text nodes excluded."""
        return [child for child in self.children if isinstance(child, Element)]

    def text_content(self) -> str:
        """Concatenated text of this element and its descendants."""
        return "".join(
            child if isinstance(child, str) else child.text_content()
            for child in self.children
        )

    def to_html(self) -> str:
        """Serialize to an HTML string with escaped text and attributes."""
        parts = [self.tag]
        if self.classes:
            parts.append(f'class="{html.escape(" ".join(self.classes))}"')
        if self.style:
            declarations = "; ".join(f"{key}: {value}" for key, value in self.style.items())
            parts.append(f'style="{html.escape(declarations)}"')
        for name, value in self.attrs.items():
            if value is None or value is False:
                continue
            if value is True:
                parts.append(name)
            else:
                parts.append(f'{name}="{html.escape(str(value))}"')

        opening = f"<{' '.join(parts)}>"
        if self.tag in VOID_TAGS:
            return opening
        inner = "".join(
            html.escape(child, quote=False) if isinstance(child, str) else child.to_html()
            for child in self.children
        )
        return f"{opening}{inner}</{self.tag}>"


__all__ = ["VOID_TAGS", "Element", "css_property", "css_style"]
