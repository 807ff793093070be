"""Validated content tree models."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from cms_render.schema import ComponentProps

DEFAULT_VERSION = "1.0"


@dataclass(frozen=True)
class ComponentNode:
    """A node of a validated content tree.

    Instances are only produced by the validator, so ``props`` has already
    satisfied the schema registered for ``type`` and carries every default.

    Attributes:
        id: Identifier unique within the tree.
        type: Component type discriminator.
        props: Validated props model for the type.
        children: Child nodes in render order, or None when the source node
            had no ``children`` key.
    """

    id: str
    type: str
    props: ComponentProps
    children: tuple["ComponentNode", ...] | None = None

    def walk(self) -> Iterator["ComponentNode"]:
        """Yield this node and its descendants in depth-first pre-order."""
        yield self
        for child in self.children or ():
            yield from child.walk()

    def count_nodes(self) -> int:
        """Count nodes in this subtree, including this one."""
        return sum(1 for _ in self.walk())

    def to_dict(self) -> dict[str, Any]:
        """Serialize back to the CMS JSON form, defaults included."""
        data: dict[str, Any] = {
            "id": self.id,
            "type": self.type,
            "props": self.props.to_dict(),
        }
        if self.children is not None:
            data["children"] = [child.to_dict() for child in self.children]
        return data


@dataclass(frozen=True)
class PageContent:
    """A whole page: exactly one root node plus the content version.

    ``version`` is carried through untouched; migrations between versions
    happen outside this package.
    """

    root: ComponentNode
    version: str = DEFAULT_VERSION

    def to_dict(self) -> dict[str, Any]:
        return {"version": self.version, "root": self.root.to_dict()}


__all__ = ["DEFAULT_VERSION", "ComponentNode", "PageContent"]
