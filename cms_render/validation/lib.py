"""Page content validation.

Validates raw CMS JSON against the schema registry in a single pass and
produces an immutable, normalized tree with every default applied.

Policy: fail-fast. Nodes are checked depth-first, left-to-right, and the
first error in that order is reported. Within a node the checks run in this
order: shape, type, id, props, children.
"""

import json
import re
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from cms_render.core.log import get_logger
from cms_render.schema import ComponentProps, ComponentSchema, FieldSpec, get_schema

from .errors import (
    InvalidField,
    MalformedRoot,
    UnexpectedChildren,
    UnknownComponentType,
    ValidationIssue,
    ValidationResult,
)
from .models import DEFAULT_VERSION, ComponentNode, PageContent

logger = get_logger(__name__)

DOCUMENT_PATH = "$"
ROOT_PATH = "root"

# Deepest nesting accepted, counted in nodes from the root
MAX_DEPTH = 64


class _Invalid(Exception):
    """Unwinds the tree walk on the first error."""

    def __init__(self, issue: ValidationIssue):
        super().__init__(issue.message)
        self.issue = issue


def _decode(raw: Any) -> Any:
    if isinstance(raw, (str, bytes, bytearray)):
        try:
            return json.loads(raw)
        except RecursionError as exc:
            raise ValueError("document is nested too deeply") from exc
    return raw


def _field_path(data: Any, loc: tuple[Any, ...], missing: bool) -> str:
    """Build a field path from a pydantic error location.

    Location entries that do not address the input (union member tags such
    as "str" or "BilingualText") are skipped.
    """
    parts: list[str] = []
    current = data
    for position, key in enumerate(loc):
        is_last = position == len(loc) - 1
        if isinstance(key, int) and isinstance(current, list) and 0 <= key < len(current):
            parts.append(f"[{key}]")
            current = current[key]
        elif isinstance(key, str) and isinstance(current, Mapping) and key in current:
            parts.append(f".{key}" if parts else key)
            current = current[key]
        elif is_last and missing and isinstance(key, str):
            parts.append(f".{key}" if parts else key)
    return "".join(parts) or ".".join(str(key) for key in loc)


_FIELD_NAME = re.compile(r"[A-Za-z_]\w*")


def _field_spec(schema: ComponentSchema, field: str) -> FieldSpec | None:
    """Find the contract for a field path such as "items[0].content"."""
    specs = schema.fields
    spec = None
    for name in _FIELD_NAME.findall(field):
        spec = specs.get(name)
        if spec is None:
            return None
        specs = spec.item_fields
    return spec


def _issue_from_error(
    schema: ComponentSchema, props: Mapping[str, Any], exc: ValidationError, path: str
) -> InvalidField:
    error = exc.errors()[0]
    loc = tuple(error.get("loc", ()))
    missing = error.get("type") == "missing"
    field = _field_path(props, loc, missing)

    spec = _field_spec(schema, field)
    expected = spec.describe() if spec else "valid value"
    return InvalidField(
        path=path,
        type=schema.type.value,
        field=field,
        expected=expected,
        got=None if missing else error.get("input"),
        detail=error.get("msg", ""),
    )


def _validate_props(
    schema: ComponentSchema, props: Any, path: str
) -> ComponentProps:
    if props is None:
        props = {}
    if not isinstance(props, Mapping):
        raise _Invalid(
            InvalidField(
                path=path,
                type=schema.type.value,
                field="props",
                expected="object",
                got=props,
            )
        )
    try:
        return schema.props_model.model_validate(props)
    except ValidationError as exc:
        raise _Invalid(_issue_from_error(schema, props, exc, path)) from exc


def _validate_node(
    raw: Mapping[str, Any], path: str, seen_ids: set[str], depth: int = 1
) -> ComponentNode:
    schema = get_schema(raw.get("type"))
    if schema is None:
        raise _Invalid(UnknownComponentType(path=path, type=raw.get("type")))
    type_name = schema.type.value

    node_id = raw.get("id")
    if not isinstance(node_id, str) or not node_id:
        raise _Invalid(
            InvalidField(
                path=path,
                type=type_name,
                field="id",
                expected="non-empty string",
                got=node_id,
            )
        )
    if node_id in seen_ids:
        raise _Invalid(
            InvalidField(
                path=path,
                type=type_name,
                field="id",
                expected="id unique within the page",
                got=node_id,
                detail="duplicate id",
            )
        )
    seen_ids.add(node_id)

    props = _validate_props(schema, raw.get("props"), path)

    raw_children = raw.get("children")
    if raw_children is None:
        return ComponentNode(id=node_id, type=type_name, props=props)

    if not isinstance(raw_children, list):
        raise _Invalid(
            InvalidField(
                path=path,
                type=type_name,
                field="children",
                expected="array of component nodes",
                got=raw_children,
            )
        )
    if raw_children and not schema.accepts_children:
        raise _Invalid(
            UnexpectedChildren(path=path, type=type_name, count=len(raw_children))
        )
    if raw_children and depth >= MAX_DEPTH:
        raise _Invalid(
            InvalidField(
                path=path,
                type=type_name,
                field="children",
                expected=f"at most {MAX_DEPTH} levels of nesting",
                got=len(raw_children),
                detail="tree is nested too deeply",
            )
        )

    children = []
    for index, raw_child in enumerate(raw_children):
        child_path = f"{path}.children[{index}]"
        if not isinstance(raw_child, Mapping):
            raise _Invalid(
                InvalidField(
                    path=child_path,
                    type=type_name,
                    field="children",
                    expected="component node object",
                    got=raw_child,
                )
            )
        children.append(_validate_node(raw_child, child_path, seen_ids, depth + 1))

    return ComponentNode(
        id=node_id, type=type_name, props=props, children=tuple(children)
    )


def validate_page(raw: Any) -> ValidationResult[PageContent]:
    """Validate a whole page of CMS content.

    Args:
        raw: Decoded JSON (a mapping) or a JSON document as str/bytes.

    Returns:
        ValidationResult holding the normalized PageContent, or the first
        error found. Never raises for bad content and never mutates `raw`.

    Example:
        >>> result = validate_page({"root": {"id": "1", "type": "Spacer"}})
        >>> result.data.root.props.height
        '2rem'
    """
    try:
        document = _decode(raw)
    except ValueError as exc:
        return ValidationResult.fail(
            MalformedRoot(path=DOCUMENT_PATH, reason=f"invalid JSON ({exc})")
        )

    if not isinstance(document, Mapping):
        return ValidationResult.fail(
            MalformedRoot(path=DOCUMENT_PATH, reason="content must be an object")
        )
    if "root" not in document:
        return ValidationResult.fail(
            MalformedRoot(path=DOCUMENT_PATH, reason="missing 'root'")
        )
    root = document["root"]
    if not isinstance(root, Mapping):
        return ValidationResult.fail(
            MalformedRoot(path=ROOT_PATH, reason="'root' must be an object")
        )

    version = document.get("version", DEFAULT_VERSION)
    if not isinstance(version, str):
        return ValidationResult.fail(
            InvalidField(
                path=DOCUMENT_PATH, field="version", expected="string", got=version
            )
        )

    try:
        node = _validate_node(root, ROOT_PATH, set())
    except _Invalid as exc:
        logger.debug(f"Page validation failed: {exc.issue.message}")
        return ValidationResult.fail(exc.issue)
    except RecursionError:
        return ValidationResult.fail(
            MalformedRoot(path=ROOT_PATH, reason="content is nested too deeply")
        )

    logger.debug(f"Validated page with {node.count_nodes()} nodes")
    return ValidationResult.ok(PageContent(root=node, version=version))


def validate_component(component_type: Any, data: Any) -> ValidationResult[ComponentProps]:
    """Validate the props of a single component.

    Args:
        component_type: Type discriminator.
        data: Raw props mapping (None is treated as empty).

    Returns:
        ValidationResult holding the validated props model, or the error.
    """
    schema = get_schema(component_type)
    if schema is None:
        return ValidationResult.fail(
            UnknownComponentType(path=DOCUMENT_PATH, type=component_type)
        )
    try:
        return ValidationResult.ok(_validate_props(schema, data, DOCUMENT_PATH))
    except _Invalid as exc:
        return ValidationResult.fail(exc.issue)


def is_valid_page(raw: Any) -> bool:
    """Check whether raw content validates as a page."""
    return validate_page(raw).success


__all__ = ["MAX_DEPTH", "validate_page", "validate_component", "is_valid_page"]
