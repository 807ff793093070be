"""Unit tests for the page validator."""

import copy
import json

import pytest

from cms_render.i18n import BilingualText
from cms_render.validation import (
    MAX_DEPTH,
    ComponentNode,
    InvalidField,
    MalformedRoot,
    PageContent,
    UnexpectedChildren,
    UnknownComponentType,
    is_valid_page,
    validate_component,
    validate_page,
)


def _page(root, **extra):
    return {"version": "1.0", "root": root, **extra}


def _node(node_id, node_type, props=None, children=None):
    node = {"id": node_id, "type": node_type, "props": props or {}}
    if children is not None:
        node["children"] = children
    return node


WELL_FORMED = _page(
    _node(
        "root",
        "Container",
        {"maxWidth": "1200px", "padding": "2rem"},
        [
            _node(
                "hero",
                "HeroSection",
                {"title": {"en": "Invest", "ar": "استثمر"}, "ctaText": "Start", "ctaLink": "/signup"},
            ),
            _node(
                "cols",
                "Columns",
                {"columns": 3},
                [
                    _node("h1", "Heading", {"text": "One", "level": "h3"}),
                    _node("p1", "Paragraph", {"text": {"en": "Two"}, "align": "justify"}),
                ],
            ),
            _node(
                "card",
                "Card",
                {"title": "Card", "imageUrl": "https://cdn.example.com/c.png"},
                [_node("btn", "Button", {"text": "Go", "href": "/go", "variant": "outline"})],
            ),
            _node("img", "Image", {"src": "https://cdn.example.com/a.jpg", "alt": "A"}),
            _node("space", "Spacer"),
            _node("line", "Divider"),
            _node(
                "faq",
                "Accordion",
                {"items": [{"title": "Q", "content": "A"}]},
            ),
            _node(
                "tabs",
                "Tabs",
                {"tabs": [{"label": "One", "content": "1"}, {"label": "Two", "content": "2"}], "defaultTab": 1},
            ),
            _node("vid", "Video", {"url": "https://www.youtube.com/embed/x"}),
            _node("props", "PropertyCarousel", {"status": "Funded", "limit": 3}),
        ],
    )
)


class TestValidatePage:
    """Tests for whole-page validation."""

    @pytest.mark.unit
    def test_well_formed_page(self):
        """A page using every type validates."""
        result = validate_page(WELL_FORMED)
        assert result.success
        assert result.error is None
        assert isinstance(result.data, PageContent)
        assert result.data.root.count_nodes() == 14

    @pytest.mark.unit
    def test_defaults_applied(self):
        """Validated props carry schema defaults."""
        root = validate_page(WELL_FORMED).data.root
        nodes = {node.id: node for node in root.walk()}
        assert nodes["space"].props.height == "2rem"
        assert nodes["hero"].props.overlay_opacity == 0.5
        assert nodes["img"].props.object_fit == "cover"
        assert isinstance(nodes["hero"].props.title, BilingualText)

    @pytest.mark.unit
    def test_round_trip_modulo_defaults(self):
        """Output equals input with defaults filled in."""
        data = validate_page(WELL_FORMED).data.to_dict()
        heading = data["root"]["children"][1]["children"][0]
        assert heading == {
            "id": "h1",
            "type": "Heading",
            "props": {"text": "One", "level": "h3"},
        }
        divider = data["root"]["children"][5]
        assert divider["props"] == {
            "color": "#e5e7eb",
            "thickness": "1px",
            "margin": "1rem 0",
        }

    @pytest.mark.unit
    def test_idempotent(self):
        """Re-validating a validated tree yields an identical tree."""
        first = validate_page(WELL_FORMED).data
        second = validate_page(first.to_dict()).data
        assert second == first
        assert second.to_dict() == first.to_dict()

    @pytest.mark.unit
    def test_input_not_mutated(self):
        """Validation never modifies its input."""
        raw = copy.deepcopy(WELL_FORMED)
        validate_page(raw)
        assert raw == WELL_FORMED

    @pytest.mark.unit
    def test_json_text_input(self):
        """JSON documents are accepted as str and bytes."""
        text = json.dumps(WELL_FORMED)
        assert validate_page(text).success
        assert validate_page(text.encode("utf-8")).success

    @pytest.mark.unit
    def test_version_defaults(self):
        """A missing version defaults to 1.0."""
        result = validate_page({"root": _node("1", "Spacer")})
        assert result.data.version == "1.0"

    @pytest.mark.unit
    def test_props_optional(self):
        """Nodes without props validate against an empty mapping."""
        result = validate_page({"root": {"id": "1", "type": "Divider"}})
        assert result.success
        assert result.data.root.children is None

    @pytest.mark.unit
    def test_is_valid_page(self):
        """Convenience predicate mirrors the result."""
        assert is_valid_page(WELL_FORMED)
        assert not is_valid_page({})


class TestValidationErrors:
    """Tests for structured validation errors."""

    @pytest.mark.unit
    def test_unknown_type_at_root(self):
        """Unknown root type fails with UnknownComponentType."""
        result = validate_page({"root": {"id": "1", "type": "DoesNotExist", "props": {}}})
        assert not result.success
        assert isinstance(result.error, UnknownComponentType)
        assert result.error.type == "DoesNotExist"
        assert result.error.path == "root"

    @pytest.mark.unit
    def test_missing_type(self):
        """A node without type is an unknown type."""
        result = validate_page({"root": {"id": "1"}})
        assert isinstance(result.error, UnknownComponentType)
        assert result.error.type is None

    @pytest.mark.unit
    def test_missing_required_field(self):
        """Heading without text names the text field."""
        result = validate_page({"root": _node("1", "Heading", {"level": "h1"})})
        assert isinstance(result.error, InvalidField)
        assert result.error.field == "text"
        assert result.error.type == "Heading"
        assert result.error.got is None

    @pytest.mark.unit
    def test_enum_membership(self):
        """Enum values must match exactly."""
        result = validate_page({"root": _node("1", "Heading", {"text": "x", "level": "H1"})})
        assert result.error.field == "level"
        assert "h1" in result.error.expected
        assert result.error.got == "H1"

    @pytest.mark.unit
    @pytest.mark.parametrize("columns,valid", [(1, True), (12, True), (0, False), (13, False)])
    def test_numeric_bounds_inclusive(self, columns, valid):
        """Numeric bounds include their end points."""
        result = validate_page({"root": _node("1", "Columns", {"columns": columns})})
        assert result.success is valid

    @pytest.mark.unit
    def test_nested_field_path(self):
        """Errors inside array items name the item field."""
        result = validate_page(
            {"root": _node("1", "Accordion", {"items": [{"title": "Q"}]})}
        )
        assert result.error.field == "items[0].content"

    @pytest.mark.unit
    def test_children_on_leaf(self):
        """Non-empty children on a leaf type are rejected."""
        result = validate_page(
            {"root": _node("1", "Heading", {"text": "x"}, [_node("2", "Spacer")])}
        )
        assert isinstance(result.error, UnexpectedChildren)
        assert result.error.type == "Heading"
        assert result.error.count == 1

    @pytest.mark.unit
    def test_empty_children_tolerated(self):
        """An empty children list is accepted on any type."""
        result = validate_page({"root": _node("1", "Spacer", children=[])})
        assert result.success
        assert result.data.root.children == ()

    @pytest.mark.unit
    def test_children_must_be_list(self):
        """A non-list children value is an invalid field."""
        result = validate_page({"root": {"id": "1", "type": "Container", "children": {}}})
        assert isinstance(result.error, InvalidField)
        assert result.error.field == "children"

    @pytest.mark.unit
    def test_child_must_be_object(self):
        """Non-object children are reported at the child path."""
        result = validate_page({"root": _node("1", "Container", children=["text"])})
        assert result.error.field == "children"
        assert result.error.path == "root.children[0]"

    @pytest.mark.unit
    def test_duplicate_ids(self):
        """Ids must be unique within a tree."""
        result = validate_page(
            {"root": _node("1", "Container", children=[_node("a", "Spacer"), _node("a", "Divider")])}
        )
        assert result.error.field == "id"
        assert result.error.path == "root.children[1]"

    @pytest.mark.unit
    @pytest.mark.parametrize("node_id", [None, "", 7])
    def test_id_required(self, node_id):
        """Ids are non-empty strings."""
        result = validate_page({"root": {"id": node_id, "type": "Spacer"}})
        assert isinstance(result.error, InvalidField)
        assert result.error.field == "id"

    @pytest.mark.unit
    def test_props_must_be_object(self):
        """Props must be a mapping."""
        result = validate_page({"root": {"id": "1", "type": "Spacer", "props": []}})
        assert result.error.field == "props"

    @pytest.mark.unit
    def test_fail_fast_first_error_in_order(self):
        """The first error in depth-first order is reported."""
        result = validate_page(
            {
                "root": _node(
                    "1",
                    "Container",
                    children=[
                        _node("a", "Container", children=[_node("b", "Nope")]),
                        _node("c", "Heading"),
                    ],
                )
            }
        )
        assert isinstance(result.error, UnknownComponentType)
        assert result.error.path == "root.children[0].children[0]"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "raw",
        [{}, [], "null", "{not json", b"\xff", {"root": "Heading"}, {"root": None}],
    )
    def test_malformed_root(self, raw):
        """Documents without a root object fail with MalformedRoot."""
        result = validate_page(raw)
        assert isinstance(result.error, MalformedRoot)

    @pytest.mark.unit
    def test_version_must_be_string(self):
        """A non-string version is an invalid field."""
        result = validate_page({"version": 1, "root": _node("1", "Spacer")})
        assert result.error.field == "version"

    @pytest.mark.unit
    def test_result_to_dict(self):
        """Results serialize to the success/error envelope."""
        failed = validate_page({"root": _node("1", "Heading")}).to_dict()
        assert failed["success"] is False
        assert failed["error"]["kind"] == "invalid_field"
        assert "text" in failed["error"]["message"]

        passed = validate_page({"root": _node("1", "Spacer")}).to_dict()
        assert passed == {
            "success": True,
            "data": {
                "version": "1.0",
                "root": {"id": "1", "type": "Spacer", "props": {"height": "2rem"}},
            },
        }


class TestPropsCoercion:
    """Tests for how props values arriving as JSON are interpreted."""

    @pytest.mark.unit
    def test_whole_float_is_integer(self):
        """columns=3.0 validates as the integer 3."""
        result = validate_page({"root": _node("1", "Columns", {"columns": 3.0})})
        assert result.success, result.error
        columns = result.data.root.props.columns
        assert columns == 3
        assert isinstance(columns, int)

    @pytest.mark.unit
    def test_whole_float_from_json_text(self):
        """JSON text written with a decimal point still validates."""
        text = '{"root": {"id": "1", "type": "PropertyCarousel", "props": {"limit": 6.0}}}'
        result = validate_page(text)
        assert result.success, result.error
        assert result.data.root.props.to_dict()["limit"] == 6

    @pytest.mark.unit
    @pytest.mark.parametrize("columns", [2.5, "3", True])
    def test_non_integers_rejected(self, columns):
        """Fractions, strings and booleans are not integers."""
        result = validate_page({"root": _node("1", "Columns", {"columns": columns})})
        assert isinstance(result.error, InvalidField)
        assert result.error.field == "columns"
        assert result.error.got == columns

    @pytest.mark.unit
    def test_whole_float_still_bounded(self):
        """Bounds apply after the float is read as an integer."""
        result = validate_page({"root": _node("1", "Columns", {"columns": 13.0})})
        assert result.error.field == "columns"

    @pytest.mark.unit
    def test_snake_case_keys_ignored(self):
        """Only camelCase keys populate props; snake_case spellings are dropped."""
        result = validate_component("Button", {"text": "Go", "class_name": "x"})
        assert result.success
        assert result.data.class_name is None
        assert "className" not in result.data.to_dict()


class TestTabsProps:
    """Tests for the tabs list and its default index."""

    @pytest.mark.unit
    @pytest.mark.parametrize("props", [{"tabs": []}, {"tabs": [], "defaultTab": 3}])
    def test_empty_tabs_rejected(self, props):
        """A Tabs node needs at least one tab."""
        result = validate_page({"root": _node("t", "Tabs", props)})
        assert isinstance(result.error, InvalidField)
        assert result.error.field == "tabs"

    @pytest.mark.unit
    def test_default_tab_past_end(self):
        """defaultTab must index an existing tab."""
        props = {"tabs": [{"label": "A", "content": "a"}], "defaultTab": 1}
        result = validate_page({"root": _node("t", "Tabs", props)})
        assert result.error.field == "defaultTab"


class TestNestedFieldErrors:
    """Tests for errors inside array items."""

    @pytest.mark.unit
    def test_accordion_item_missing_content(self):
        """A missing item field reports the item field's own contract."""
        props = {"items": [{"title": "Fees"}]}
        result = validate_page({"root": _node("a", "Accordion", props)})
        assert isinstance(result.error, InvalidField)
        assert result.error.field == "items[0].content"
        assert result.error.expected == "string or {en, ar?} object"
        assert result.error.got is None

    @pytest.mark.unit
    def test_second_tab_bad_label(self):
        """Index and field name both appear in the path."""
        props = {"tabs": [{"label": "A", "content": "a"}, {"label": 7, "content": "b"}]}
        result = validate_page({"root": _node("t", "Tabs", props)})
        assert result.error.field.startswith("tabs[1].label")
        assert result.error.expected == "string or {en, ar?} object"


def _chain(depth):
    """Containers nested ``depth`` nodes deep, ending in a Spacer."""
    node = _node(f"n{depth}", "Spacer")
    for level in range(depth - 1, 0, -1):
        node = _node(f"n{level}", "Container", children=[node])
    return _page(node)


class TestNestingDepth:
    """Tests for the nesting limit."""

    @pytest.mark.unit
    def test_limit_accepted(self):
        """A tree exactly MAX_DEPTH nodes deep validates."""
        result = validate_page(_chain(MAX_DEPTH))
        assert result.success, result.error
        assert len(list(result.data.root.walk())) == MAX_DEPTH

    @pytest.mark.unit
    def test_past_limit_rejected(self):
        """One level more fails on the deepest node that has children."""
        result = validate_page(_chain(MAX_DEPTH + 1))
        assert isinstance(result.error, InvalidField)
        assert result.error.field == "children"
        assert result.error.type == "Container"
        assert result.error.path == "root" + ".children[0]" * (MAX_DEPTH - 1)

    @pytest.mark.unit
    def test_very_deep_tree_does_not_raise(self):
        """Trees far past the limit return an error result."""
        result = validate_page(_chain(5000))
        assert not result.success
        assert result.error.field == "children"

    @pytest.mark.unit
    def test_very_deep_json_text(self):
        """JSON text too deep to decode is a malformed document."""
        depth = 100_000
        result = validate_page("[" * depth + "]" * depth)
        assert isinstance(result.error, MalformedRoot)


class TestValidateComponent:
    """Tests for single-node validation."""

    @pytest.mark.unit
    def test_valid_props(self):
        """Valid props return the props model."""
        result = validate_component("Button", {"text": "Go", "size": "lg"})
        assert result.success
        assert result.data.size == "lg"
        assert result.data.variant == "default"

    @pytest.mark.unit
    def test_invalid_props(self):
        """Invalid props return InvalidField."""
        result = validate_component("Image", {"src": "relative.png", "alt": "x"})
        assert isinstance(result.error, InvalidField)
        assert result.error.field == "src"
        assert result.error.expected == "absolute URL"

    @pytest.mark.unit
    def test_unknown_type(self):
        """Unknown types return UnknownComponentType."""
        result = validate_component("Marquee", {})
        assert isinstance(result.error, UnknownComponentType)


class TestComponentNode:
    """Tests for the validated node model."""

    @pytest.mark.unit
    def test_walk_order(self):
        """walk() yields nodes in depth-first pre-order."""
        root = validate_page(WELL_FORMED).data.root
        ids = [node.id for node in root.walk()]
        assert ids[:5] == ["root", "hero", "cols", "h1", "p1"]

    @pytest.mark.unit
    def test_nodes_are_immutable(self):
        """Validated nodes cannot be modified."""
        root = validate_page(WELL_FORMED).data.root
        assert isinstance(root, ComponentNode)
        with pytest.raises(AttributeError):
            root.id = "other"
