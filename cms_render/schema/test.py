"""Unit tests for the schema registry."""

import json

import pytest
from pydantic import ValidationError

from cms_render.i18n import BilingualText
from cms_render.schema import (
    SCHEMA_REGISTRY,
    ButtonProps,
    ColumnsProps,
    ComponentCategory,
    ComponentType,
    DividerProps,
    FieldKind,
    HeadingProps,
    HeroSectionProps,
    ImageProps,
    PropertyCarouselProps,
    TabsProps,
    export_component_schemas,
    export_json_schema,
    get_components_by_category,
    get_field_specs,
    get_schema,
    list_component_types,
)


class TestRegistry:
    """Tests for SCHEMA_REGISTRY completeness."""

    @pytest.mark.unit
    def test_all_component_types_registered(self):
        """Every ComponentType has a registry entry."""
        for ct in ComponentType:
            assert ct in SCHEMA_REGISTRY, f"Missing schema for {ct}"

    @pytest.mark.unit
    def test_registry_has_14_entries(self):
        """Registry contains exactly 14 component types."""
        assert len(SCHEMA_REGISTRY) == 14
        assert len(list_component_types()) == 14

    @pytest.mark.unit
    def test_registry_is_read_only(self):
        """Registry cannot be mutated after import."""
        with pytest.raises(TypeError):
            SCHEMA_REGISTRY["Extra"] = None  # type: ignore[index]

    @pytest.mark.unit
    def test_only_containers_accept_children(self):
        """Container, Columns and Card are the only child-accepting types."""
        accepting = {ct for ct, meta in SCHEMA_REGISTRY.items() if meta.accepts_children}
        assert accepting == {
            ComponentType.CONTAINER,
            ComponentType.COLUMNS,
            ComponentType.CARD,
        }

    @pytest.mark.unit
    def test_entries_have_descriptions(self):
        """Every entry has a non-empty description."""
        for ct, meta in SCHEMA_REGISTRY.items():
            assert meta.description, f"{ct} missing description"

    @pytest.mark.unit
    def test_categories(self):
        """Category lookup groups related types."""
        layout = get_components_by_category(ComponentCategory.LAYOUT)
        assert ComponentType.COLUMNS in layout
        assert ComponentType.HEADING not in layout


class TestGetSchema:
    """Tests for registry lookup."""

    @pytest.mark.unit
    def test_known_type(self):
        """Lookup by discriminator string returns the entry."""
        schema = get_schema("Heading")
        assert schema is not None
        assert schema.props_model is HeadingProps

    @pytest.mark.unit
    def test_enum_member(self):
        """Lookup accepts ComponentType members."""
        assert get_schema(ComponentType.VIDEO).type is ComponentType.VIDEO

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["Carousel", "heading", "", None, 3])
    def test_unknown_type(self, value):
        """Unknown or non-string types return None."""
        assert get_schema(value) is None


class TestPropsDefaults:
    """Tests for defaults declared in props models."""

    @pytest.mark.unit
    def test_heading_defaults(self):
        """Heading level defaults to h2, align stays absent."""
        props = HeadingProps.model_validate({"text": "Hi"})
        assert props.level == "h2"
        assert props.align is None

    @pytest.mark.unit
    def test_hero_defaults(self):
        """HeroSection visual defaults are applied."""
        props = HeroSectionProps.model_validate({"title": "Welcome"})
        assert props.height == "600px"
        assert props.text_align == "center"
        assert props.text_color == "#ffffff"
        assert props.overlay_opacity == 0.5
        assert props.cta_variant == "default"

    @pytest.mark.unit
    def test_divider_defaults(self):
        """Divider has color, thickness and margin defaults."""
        props = DividerProps.model_validate({})
        assert props.to_dict() == {
            "color": "#e5e7eb",
            "thickness": "1px",
            "margin": "1rem 0",
        }

    @pytest.mark.unit
    def test_carousel_defaults(self):
        """PropertyCarousel defaults to active listings, limit 6."""
        props = PropertyCarouselProps.model_validate({})
        assert props.status == "Active"
        assert props.limit == 6
        assert props.show_view_all is True
        assert props.view_all_link == "/properties"

    @pytest.mark.unit
    def test_image_object_fit_default(self):
        """Images cover their box by default."""
        props = ImageProps.model_validate(
            {"src": "https://cdn.example.com/a.jpg", "alt": "A"}
        )
        assert props.object_fit == "cover"


class TestPropsValidation:
    """Tests for field constraints."""

    @pytest.mark.unit
    def test_camel_case_aliases(self):
        """Wire names are camelCase and round-trip through to_dict."""
        props = HeroSectionProps.model_validate(
            {"title": "T", "ctaText": "Go", "ctaLink": "/go", "className": "x"}
        )
        assert props.cta_text == "Go"
        data = props.to_dict()
        assert data["ctaLink"] == "/go"
        assert data["className"] == "x"

    @pytest.mark.unit
    def test_bilingual_record(self):
        """Bilingual fields accept a record with en and ar."""
        props = HeadingProps.model_validate({"text": {"en": "Hi", "ar": "مرحبا"}})
        assert isinstance(props.text, BilingualText)
        assert props.text.ar == "مرحبا"

    @pytest.mark.unit
    def test_bilingual_requires_english(self):
        """A bilingual record without en is rejected."""
        with pytest.raises(ValidationError):
            HeadingProps.model_validate({"text": {"ar": "مرحبا"}})

    @pytest.mark.unit
    def test_strict_types(self):
        """Numbers are not coerced from strings."""
        with pytest.raises(ValidationError):
            ColumnsProps.model_validate({"columns": "3"})

    @pytest.mark.unit
    def test_whole_floats_are_integers(self):
        """Integer fields accept whole-valued floats and store ints."""
        assert ColumnsProps.model_validate({"columns": 4.0}).columns == 4
        image = ImageProps.model_validate(
            {"src": "https://cdn.example.com/a.jpg", "alt": "A", "width": 640.0}
        )
        assert image.width == 640
        assert isinstance(image.width, int)

    @pytest.mark.unit
    @pytest.mark.parametrize("columns", [2.5, True, None])
    def test_non_integers_rejected(self, columns):
        """Fractions, booleans and null are not column counts."""
        with pytest.raises(ValidationError):
            ColumnsProps.model_validate({"columns": columns})

    @pytest.mark.unit
    def test_integer_bounds_in_field_specs(self):
        """Whole-number fields keep their bounds in the exported contract."""
        columns = get_field_specs("Columns")["columns"]
        assert columns.minimum == 1
        assert columns.maximum == 12

    @pytest.mark.unit
    @pytest.mark.parametrize("columns", [0, 13])
    def test_columns_bounds(self, columns):
        """Column count is limited to 1..12."""
        with pytest.raises(ValidationError):
            ColumnsProps.model_validate({"columns": columns})

    @pytest.mark.unit
    def test_overlay_opacity_bounds(self):
        """Overlay opacity is limited to 0..1."""
        with pytest.raises(ValidationError):
            HeroSectionProps.model_validate({"title": "T", "overlayOpacity": 1.5})

    @pytest.mark.unit
    def test_enum_values(self):
        """Enum fields reject unknown literals."""
        with pytest.raises(ValidationError):
            ButtonProps.model_validate({"text": "Go", "variant": "primary"})

    @pytest.mark.unit
    @pytest.mark.parametrize("src", ["/images/a.jpg", "cdn.example.com/a.jpg"])
    def test_image_src_must_be_absolute(self, src):
        """Relative image URLs are rejected."""
        with pytest.raises(ValidationError):
            ImageProps.model_validate({"src": src, "alt": "A"})

    @pytest.mark.unit
    def test_default_tab_in_range(self):
        """defaultTab must index an existing tab."""
        tabs = [{"label": "A", "content": "a"}, {"label": "B", "content": "b"}]
        assert TabsProps.model_validate({"tabs": tabs, "defaultTab": 1}).default_tab == 1
        with pytest.raises(ValidationError):
            TabsProps.model_validate({"tabs": tabs, "defaultTab": 2})

    @pytest.mark.unit
    @pytest.mark.parametrize("extra", [{}, {"defaultTab": 3}])
    def test_tabs_not_empty(self, extra):
        """An empty tab list is rejected whatever defaultTab says."""
        with pytest.raises(ValidationError) as info:
            TabsProps.model_validate({"tabs": [], **extra})
        assert info.value.errors()[0]["loc"] == ("tabs",)

    @pytest.mark.unit
    def test_unknown_keys_dropped(self):
        """Extra props are ignored, not carried through."""
        props = ButtonProps.model_validate({"text": "Go", "glow": True})
        assert "glow" not in props.to_dict()

    @pytest.mark.unit
    def test_snake_case_keys_dropped(self):
        """Python attribute names are not accepted as wire keys."""
        props = ButtonProps.model_validate({"text": "Go", "class_name": "x"})
        assert props.class_name is None
        assert "className" not in props.to_dict()

    @pytest.mark.unit
    def test_props_are_immutable(self):
        """Validated props cannot be modified."""
        props = ButtonProps.model_validate({"text": "Go"})
        with pytest.raises(ValidationError):
            props.text = "Stop"


class TestFieldSpecs:
    """Tests for field contract introspection."""

    @pytest.mark.unit
    def test_heading_fields(self):
        """Heading fields carry kind, requiredness and defaults."""
        fields = get_field_specs("Heading")
        assert fields["text"].kind is FieldKind.BILINGUAL
        assert fields["text"].required is True
        assert fields["level"].kind is FieldKind.ENUM
        assert fields["level"].default == "h2"
        assert fields["level"].choices == ("h1", "h2", "h3", "h4", "h5", "h6")

    @pytest.mark.unit
    def test_number_bounds(self):
        """Numeric bounds are exposed."""
        columns = get_field_specs("Columns")["columns"]
        assert columns.kind is FieldKind.NUMBER
        assert columns.minimum == 1
        assert columns.maximum == 12

    @pytest.mark.unit
    def test_url_and_boolean(self):
        """URL and boolean kinds are recognised."""
        video = get_field_specs("Video")
        assert video["url"].kind is FieldKind.URL
        assert video["autoplay"].kind is FieldKind.BOOLEAN
        assert video["autoplay"].default is False

    @pytest.mark.unit
    def test_array_items(self):
        """Array fields describe their item objects."""
        items = get_field_specs("Accordion")["items"]
        assert items.kind is FieldKind.ARRAY
        assert set(items.item_fields) == {"title", "content"}
        assert items.item_fields["title"].kind is FieldKind.BILINGUAL

    @pytest.mark.unit
    def test_shared_fields(self):
        """Every type exposes className and style."""
        for ct in ComponentType:
            fields = get_field_specs(ct)
            assert "className" in fields
            assert fields["style"].kind is FieldKind.OBJECT

    @pytest.mark.unit
    def test_unknown_type(self):
        """Unknown types have no field specs."""
        assert get_field_specs("Marquee") is None


class TestExport:
    """Tests for schema export."""

    @pytest.mark.unit
    def test_component_schemas_serializable(self):
        """Component export is JSON serializable."""
        exported = export_component_schemas()
        assert set(exported) == {ct.value for ct in ComponentType}
        assert exported["Card"]["accepts_children"] is True
        json.dumps(exported)

    @pytest.mark.unit
    def test_json_schema_structure(self):
        """Page JSON Schema defines a node variant per type."""
        schema = export_json_schema()
        assert schema["required"] == ["root"]
        variants = schema["$defs"]["ComponentNode"]["oneOf"]
        assert len(variants) == 14
        consts = {v["properties"]["type"]["const"] for v in variants}
        assert consts == {ct.value for ct in ComponentType}
        assert "HeadingProps" in schema["$defs"]
        json.dumps(schema)

    @pytest.mark.unit
    def test_children_only_on_accepting_variants(self):
        """Only child-accepting variants declare children."""
        variants = export_json_schema()["$defs"]["ComponentNode"]["oneOf"]
        with_children = {
            v["title"] for v in variants if "children" in v["properties"]
        }
        assert with_children == {"Container", "Columns", "Card"}
