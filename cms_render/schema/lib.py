"""Authoritative schema registry for CMS component types.

This module is the single source of truth for what a component node may
contain. It provides:
- One pydantic props model per component type, with every default declared
  in exactly one place
- Rich registry metadata (category, description, child acceptance)
- Field contract introspection for external authoring tools
- JSON Schema export for third-party content producers

Validation and rendering both route their type lookups through this module.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import Annotated, Any, Mapping
from urllib.parse import urlparse

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    ValidationInfo,
    WithJsonSchema,
    field_validator,
)
from pydantic.alias_generators import to_camel
from pydantic.json_schema import models_json_schema

from cms_render.i18n import BilingualText, BilingualValue, TextAlign

# =============================================================================
# Enumerations
# =============================================================================


class ComponentCategory(str, Enum):
    """High-level component groupings."""

    LAYOUT = "layout"
    TYPOGRAPHY = "typography"
    ACTION = "action"
    MEDIA = "media"
    SECTION = "section"
    INTERACTIVE = "interactive"
    DYNAMIC = "dynamic"


class ComponentType(str, Enum):
    """Closed set of component types the CMS may emit.

    Values are the exact discriminator strings found in the ``type`` field of
    content nodes.
    """

    CONTAINER = "Container"
    HEADING = "Heading"
    PARAGRAPH = "Paragraph"
    BUTTON = "Button"
    IMAGE = "Image"
    HERO_SECTION = "HeroSection"
    COLUMNS = "Columns"
    SPACER = "Spacer"
    DIVIDER = "Divider"
    ACCORDION = "Accordion"
    TABS = "Tabs"
    VIDEO = "Video"
    CARD = "Card"
    PROPERTY_CAROUSEL = "PropertyCarousel"


class HeadingLevel(str, Enum):
    """HTML heading level."""

    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    H4 = "h4"
    H5 = "h5"
    H6 = "h6"


class BlockAlign(str, Enum):
    """Alignment keywords for headings and hero text (no justify)."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    START = "start"
    END = "end"


class ButtonVariant(str, Enum):
    """Visual button style."""

    DEFAULT = "default"
    OUTLINE = "outline"
    GHOST = "ghost"
    DESTRUCTIVE = "destructive"


class ButtonSize(str, Enum):
    """Button size step."""

    SM = "sm"
    DEFAULT = "default"
    LG = "lg"


class ObjectFit(str, Enum):
    """CSS object-fit values allowed for images."""

    CONTAIN = "contain"
    COVER = "cover"
    FILL = "fill"
    NONE = "none"
    SCALE_DOWN = "scale-down"


class PropertyStatus(str, Enum):
    """Listing status filter for the property carousel."""

    ACTIVE = "Active"
    UPCOMING = "Upcoming"
    FUNDED = "Funded"
    CLOSED = "Closed"


class FieldKind(str, Enum):
    """Primitive kind of a props field, as seen by external tools."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ENUM = "enum"
    URL = "url"
    BILINGUAL = "bilingual"
    OBJECT = "object"
    ARRAY = "array"


# =============================================================================
# Shared field types
# =============================================================================


def _require_absolute_url(value: str) -> str:
    parsed = urlparse(value)
    if not parsed.scheme or not parsed.netloc:
        raise ValueError("must be an absolute URL with scheme and host")
    return value


AbsoluteUrl = Annotated[
    StrictStr,
    AfterValidator(_require_absolute_url),
    WithJsonSchema({"type": "string", "format": "uri"}),
]


def _integral_float_to_int(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


# Integers arrive as JSON numbers; 3.0 is accepted as 3, 2.5 and "3" are not.
# Must come after the Field constraints in Annotated metadata.
_WHOLE_NUMBER = BeforeValidator(_integral_float_to_int)

PositiveInt = Annotated[int, Field(strict=True, gt=0), _WHOLE_NUMBER]


# =============================================================================
# Props models
# =============================================================================


class ComponentProps(BaseModel):
    """Props shared by every component.

    Field names are snake_case in Python and camelCase on the wire.
    Unknown keys are dropped; validated props are immutable.
    """

    class_name: StrictStr | None = Field(None, description="Additional CSS classes")
    style: dict[str, Any] | None = Field(None, description="Inline styles object")

    model_config = ConfigDict(
        alias_generator=to_camel,
        frozen=True,
        extra="ignore",
        use_enum_values=True,
        validate_default=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the wire form (camelCase keys, unset fields omitted)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ContainerProps(ComponentProps):
    """Layout wrapper with configurable spacing and background."""

    max_width: StrictStr | None = Field(
        None, description="Max width (e.g., '1200px', '100%')"
    )
    padding: StrictStr | None = Field(
        None, description="Padding (e.g., '2rem', '20px 40px')"
    )
    margin: StrictStr | None = Field(None, description="Margin (e.g., '0 auto')")
    background_color: StrictStr | None = Field(
        None, description="Background color (hex, rgb, or CSS color name)"
    )


class HeadingProps(ComponentProps):
    """Text heading with configurable level."""

    text: BilingualValue = Field(
        ..., description="Heading text (string or bilingual object)"
    )
    level: HeadingLevel = Field(HeadingLevel.H2, description="HTML heading level")
    align: BlockAlign | None = Field(None, description="Text alignment")
    color: StrictStr | None = Field(None, description="Text color")


class ParagraphProps(ComponentProps):
    """Body text."""

    text: BilingualValue = Field(
        ..., description="Paragraph text (string or bilingual object)"
    )
    align: TextAlign | None = Field(None, description="Text alignment")
    font_size: StrictStr | None = Field(
        None, description="Font size (e.g., '16px', '1rem')"
    )
    color: StrictStr | None = Field(None, description="Text color")


class ButtonProps(ComponentProps):
    """Interactive button, rendered as a link when href is set."""

    text: BilingualValue = Field(
        ..., description="Button text (string or bilingual object)"
    )
    href: StrictStr | None = Field(None, description="Link URL")
    variant: ButtonVariant = Field(
        ButtonVariant.DEFAULT, description="Button style variant"
    )
    size: ButtonSize = Field(ButtonSize.DEFAULT, description="Button size")
    on_click: StrictStr | None = Field(
        None, description="Action identifier for custom handlers"
    )


class ImageProps(ComponentProps):
    """Image with an absolute source URL."""

    src: AbsoluteUrl = Field(..., description="Absolute image URL (S3 path)")
    alt: StrictStr = Field(..., description="Alt text for accessibility")
    width: PositiveInt | None = Field(None, description="Image width in pixels")
    height: PositiveInt | None = Field(None, description="Image height in pixels")
    object_fit: ObjectFit = Field(
        ObjectFit.COVER, description="CSS object-fit property"
    )


class HeroSectionProps(ComponentProps):
    """Full-width hero banner with optional background image and CTA.

    ctaText, ctaLink and ctaVariant form a Button-shaped sub-contract: they
    map onto ButtonProps text, href and variant.
    """

    title: BilingualValue = Field(..., description="Hero title")
    subtitle: BilingualValue | None = Field(None, description="Hero subtitle")
    background_image: AbsoluteUrl | None = Field(
        None, description="Background image URL (S3 path)"
    )
    background_color: StrictStr | None = Field(
        None, description="Background color (fallback or overlay)"
    )
    cta_text: BilingualValue | None = Field(
        None, description="Call-to-action button text"
    )
    cta_link: StrictStr | None = Field(None, description="Call-to-action link URL")
    cta_variant: ButtonVariant = Field(
        ButtonVariant.DEFAULT, description="CTA button variant"
    )
    height: StrictStr = Field("600px", description="Hero height (e.g., '60vh')")
    text_align: BlockAlign = Field(BlockAlign.CENTER, description="Text alignment")
    text_color: StrictStr = Field("#ffffff", description="Text color")
    overlay_opacity: Annotated[float, Field(strict=True, ge=0, le=1)] = Field(
        0.5, description="Background overlay opacity (0-1)"
    )


class ColumnsProps(ComponentProps):
    """Multi-column grid container."""

    columns: Annotated[int, Field(strict=True, ge=1, le=12), _WHOLE_NUMBER] = Field(
        2, description="Number of columns"
    )
    gap: StrictStr = Field("1rem", description="Gap between columns")


class SpacerProps(ComponentProps):
    """Vertical spacing element."""

    height: StrictStr = Field("2rem", description="Spacer height")


class DividerProps(ComponentProps):
    """Horizontal line separator."""

    color: StrictStr = Field("#e5e7eb", description="Divider color")
    thickness: StrictStr = Field("1px", description="Divider thickness")
    margin: StrictStr = Field("1rem 0", description="Margin around divider")


class AccordionItem(BaseModel):
    """One collapsible accordion section."""

    title: BilingualValue = Field(..., description="Accordion item title")
    content: BilingualValue = Field(..., description="Accordion item content")

    model_config = ConfigDict(frozen=True, extra="ignore")


class AccordionProps(ComponentProps):
    """Collapsible content sections."""

    items: list[AccordionItem] = Field(..., description="Accordion items")
    allow_multiple: StrictBool = Field(
        False, description="Allow several items to be open at once"
    )


class TabItem(BaseModel):
    """One tab and its panel content."""

    label: BilingualValue = Field(..., description="Tab label")
    content: BilingualValue = Field(..., description="Tab content")

    model_config = ConfigDict(frozen=True, extra="ignore")


class TabsProps(ComponentProps):
    """Tabbed content sections."""

    tabs: list[TabItem] = Field(
        ..., min_length=1, description="Tabs in display order"
    )
    default_tab: Annotated[int, Field(strict=True, ge=0), _WHOLE_NUMBER] = Field(
        0, description="Index of the initially active tab"
    )

    @field_validator("default_tab")
    @classmethod
    def _default_tab_in_range(cls, value: int, info: ValidationInfo) -> int:
        tabs = info.data.get("tabs")
        if tabs is not None and value >= len(tabs):
            raise ValueError(f"must be less than the number of tabs ({len(tabs)})")
        return value


class VideoProps(ComponentProps):
    """Embedded video (YouTube, Vimeo, etc.)."""

    url: AbsoluteUrl = Field(..., description="Video embed URL")
    aspect_ratio: StrictStr = Field("16/9", description="Aspect ratio (e.g., '4/3')")
    autoplay: StrictBool = Field(False, description="Autoplay video on load")


class CardProps(ComponentProps):
    """Content card with optional image and nested body components."""

    title: BilingualValue | None = Field(None, description="Card title")
    description: BilingualValue | None = Field(None, description="Card description")
    image_url: AbsoluteUrl | None = Field(
        None, description="Card image URL (S3 path)"
    )
    padding: StrictStr | None = Field(None, description="Card padding")
    shadow: StrictBool = Field(True, description="Show card shadow")


class PropertyCarouselProps(ComponentProps):
    """Carousel of live property listings loaded by the host page."""

    title: BilingualValue | None = Field(None, description="Carousel title")
    subtitle: BilingualValue | None = Field(None, description="Carousel subtitle")
    status: PropertyStatus = Field(
        PropertyStatus.ACTIVE, description="Property status filter"
    )
    limit: Annotated[int, Field(strict=True, ge=1, le=20), _WHOLE_NUMBER] = Field(
        6, description="Number of properties to display"
    )
    show_view_all: StrictBool = Field(True, description="Show 'View All' link")
    view_all_link: StrictStr = Field(
        "/properties", description="'View All' link target"
    )


# =============================================================================
# Registry
# =============================================================================


@dataclass(frozen=True)
class FieldSpec:
    """Introspectable contract of one props field.

    Attributes:
        name: Wire (camelCase) field name.
        kind: Primitive kind of the field.
        required: Whether the field must be present.
        default: Value applied when the field is absent.
        choices: Allowed literals for enum fields.
        minimum: Inclusive lower bound for numbers.
        maximum: Inclusive upper bound for numbers.
        exclusive_minimum: Exclusive lower bound for numbers.
        description: Human-readable description.
        item_fields: Field contracts of array items.
    """

    name: str
    kind: FieldKind
    required: bool = False
    default: Any = None
    choices: tuple[str, ...] | None = None
    minimum: float | None = None
    maximum: float | None = None
    exclusive_minimum: float | None = None
    description: str = ""
    item_fields: Mapping[str, "FieldSpec"] = field(default_factory=dict)

    def describe(self) -> str:
        """Short human-readable statement of the constraint."""
        if self.kind == FieldKind.ENUM and self.choices:
            return "one of " + ", ".join(repr(c) for c in self.choices)
        if self.kind == FieldKind.BILINGUAL:
            return "string or {en, ar?} object"
        if self.kind == FieldKind.URL:
            return "absolute URL"
        if self.kind == FieldKind.NUMBER:
            bounds = []
            if self.minimum is not None:
                bounds.append(f">= {self.minimum:g}")
            if self.exclusive_minimum is not None:
                bounds.append(f"> {self.exclusive_minimum:g}")
            if self.maximum is not None:
                bounds.append(f"<= {self.maximum:g}")
            return "number" + (f" ({', '.join(bounds)})" if bounds else "")
        if self.kind == FieldKind.ARRAY and self.item_fields:
            return "array of {" + ", ".join(self.item_fields) + "} objects"
        return self.kind.value

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-compatible dictionary."""
        data = asdict(self)
        data["kind"] = self.kind.value
        data["choices"] = list(self.choices) if self.choices else None
        data["item_fields"] = {
            name: spec.to_dict() for name, spec in self.item_fields.items()
        }
        return data


@dataclass(frozen=True)
class ComponentSchema:
    """Registry entry for a component type.

    Attributes:
        type: Component type discriminator.
        category: High-level grouping.
        description: What the component is for.
        props_model: Pydantic model validating the node's props.
        accepts_children: Whether nodes of this type may carry children.
    """

    type: ComponentType
    category: ComponentCategory
    description: str
    props_model: type[ComponentProps]
    accepts_children: bool = False

    @property
    def fields(self) -> dict[str, FieldSpec]:
        """Field contracts keyed by wire name."""
        return describe_props(self.props_model)

    def to_dict(self) -> dict[str, Any]:
        """Convert the entry to a dictionary for schema export."""
        return {
            "type": self.type.value,
            "category": self.category.value,
            "description": self.description,
            "accepts_children": self.accepts_children,
            "fields": {name: spec.to_dict() for name, spec in self.fields.items()},
        }


def _entry(
    component_type: ComponentType,
    category: ComponentCategory,
    props_model: type[ComponentProps],
    accepts_children: bool = False,
) -> ComponentSchema:
    return ComponentSchema(
        type=component_type,
        category=category,
        description=(props_model.__doc__ or "").strip().splitlines()[0],
        props_model=props_model,
        accepts_children=accepts_children,
    )


SCHEMA_REGISTRY: Mapping[ComponentType, ComponentSchema] = MappingProxyType(
    {
        entry.type: entry
        for entry in (
            _entry(
                ComponentType.CONTAINER,
                ComponentCategory.LAYOUT,
                ContainerProps,
                accepts_children=True,
            ),
            _entry(ComponentType.HEADING, ComponentCategory.TYPOGRAPHY, HeadingProps),
            _entry(
                ComponentType.PARAGRAPH, ComponentCategory.TYPOGRAPHY, ParagraphProps
            ),
            _entry(ComponentType.BUTTON, ComponentCategory.ACTION, ButtonProps),
            _entry(ComponentType.IMAGE, ComponentCategory.MEDIA, ImageProps),
            _entry(
                ComponentType.HERO_SECTION,
                ComponentCategory.SECTION,
                HeroSectionProps,
            ),
            _entry(
                ComponentType.COLUMNS,
                ComponentCategory.LAYOUT,
                ColumnsProps,
                accepts_children=True,
            ),
            _entry(ComponentType.SPACER, ComponentCategory.LAYOUT, SpacerProps),
            _entry(ComponentType.DIVIDER, ComponentCategory.LAYOUT, DividerProps),
            _entry(
                ComponentType.ACCORDION,
                ComponentCategory.INTERACTIVE,
                AccordionProps,
            ),
            _entry(ComponentType.TABS, ComponentCategory.INTERACTIVE, TabsProps),
            _entry(ComponentType.VIDEO, ComponentCategory.MEDIA, VideoProps),
            _entry(
                ComponentType.CARD,
                ComponentCategory.SECTION,
                CardProps,
                accepts_children=True,
            ),
            _entry(
                ComponentType.PROPERTY_CAROUSEL,
                ComponentCategory.DYNAMIC,
                PropertyCarouselProps,
            ),
        )
    }
)


# =============================================================================
# Lookup
# =============================================================================


def get_schema(component_type: Any) -> ComponentSchema | None:
    """Look up the schema registered for a component type.

    Args:
        component_type: Type discriminator string or ComponentType.

    Returns:
        The ComponentSchema, or None when the type is not registered.
    """
    if not isinstance(component_type, str):
        return None
    try:
        return SCHEMA_REGISTRY[ComponentType(component_type)]
    except ValueError:
        return None


def list_component_types() -> list[str]:
    """List registered type discriminators in registry order."""
    return [ct.value for ct in SCHEMA_REGISTRY]


def get_components_by_category(category: ComponentCategory) -> list[ComponentType]:
    """Get all component types in a category."""
    return [
        meta.type for meta in SCHEMA_REGISTRY.values() if meta.category == category
    ]


# =============================================================================
# Field introspection
# =============================================================================


def _resolve(
    subschema: dict[str, Any], defs: dict[str, Any]
) -> tuple[str | None, dict[str, Any]]:
    """Follow a $ref (or single-entry allOf) to its definition."""
    if "$ref" in subschema:
        name = subschema["$ref"].rsplit("/", 1)[-1]
        return name, defs[name]
    if len(subschema.get("allOf", ())) == 1:
        return _resolve(subschema["allOf"][0], defs)
    return None, subschema


def _field_spec(
    name: str, prop: dict[str, Any], defs: dict[str, Any], required: bool
) -> FieldSpec:
    options = [
        _resolve(option, defs)
        for option in prop.get("anyOf", [prop])
        if option.get("type") != "null"
    ]
    names = {ref for ref, _ in options}
    schemas = [schema for _, schema in options]
    primary = schemas[0]

    kwargs: dict[str, Any] = {}
    if BilingualText.__name__ in names:
        kind = FieldKind.BILINGUAL
    elif "enum" in primary:
        kind = FieldKind.ENUM
        kwargs["choices"] = tuple(primary["enum"])
    elif primary.get("format") == "uri":
        kind = FieldKind.URL
    elif primary.get("type") == "boolean":
        kind = FieldKind.BOOLEAN
    elif primary.get("type") in ("integer", "number"):
        kind = FieldKind.NUMBER
        kwargs["minimum"] = primary.get("minimum")
        kwargs["maximum"] = primary.get("maximum")
        kwargs["exclusive_minimum"] = primary.get("exclusiveMinimum")
    elif primary.get("type") == "array":
        kind = FieldKind.ARRAY
        _, item_schema = _resolve(primary.get("items", {}), defs)
        kwargs["item_fields"] = _object_fields(item_schema, defs)
    elif primary.get("type") == "object":
        kind = FieldKind.OBJECT
    else:
        kind = FieldKind.STRING

    return FieldSpec(
        name=name,
        kind=kind,
        required=required,
        default=prop.get("default"),
        description=prop.get("description", ""),
        **kwargs,
    )


def _object_fields(
    schema: dict[str, Any], defs: dict[str, Any]
) -> dict[str, FieldSpec]:
    required = set(schema.get("required", ()))
    return {
        name: _field_spec(name, prop, defs, name in required)
        for name, prop in schema.get("properties", {}).items()
    }


@lru_cache(maxsize=None)
def describe_props(props_model: type[BaseModel]) -> dict[str, FieldSpec]:
    """Derive field contracts for a props model from its JSON Schema.

    Args:
        props_model: Pydantic props model.

    Returns:
        Mapping of wire field name to FieldSpec, in declaration order.
    """
    schema = props_model.model_json_schema()
    return _object_fields(schema, schema.get("$defs", {}))


def get_field_specs(component_type: Any) -> dict[str, FieldSpec] | None:
    """Get the field contracts for a component type, or None if unknown."""
    schema = get_schema(component_type)
    return schema.fields if schema else None


# =============================================================================
# Schema export
# =============================================================================


def export_component_schemas() -> dict[str, dict[str, Any]]:
    """Export every registry entry with its field contracts.

    Returns:
        Dict keyed by type discriminator, suitable for JSON serialization.
    """
    return {ct.value: meta.to_dict() for ct, meta in SCHEMA_REGISTRY.items()}


def export_json_schema() -> dict[str, Any]:
    """Export a JSON Schema document describing a whole page.

    The document defines one props schema per component type and a
    ComponentNode schema whose variants are discriminated by ``type``.

    Returns:
        JSON Schema dict (draft 2020-12).
    """
    models = [(meta.props_model, "validation") for meta in SCHEMA_REGISTRY.values()]
    _, combined = models_json_schema(models)
    defs: dict[str, Any] = dict(combined.get("$defs", {}))

    variants = []
    for ct, meta in SCHEMA_REGISTRY.items():
        properties: dict[str, Any] = {
            "id": {"type": "string", "description": "Unique node identifier"},
            "type": {"const": ct.value},
            "props": {"$ref": f"#/$defs/{meta.props_model.__name__}"},
        }
        if meta.accepts_children:
            properties["children"] = {
                "type": "array",
                "items": {"$ref": "#/$defs/ComponentNode"},
            }
        variants.append(
            {
                "type": "object",
                "title": ct.value,
                "required": ["id", "type"],
                "properties": properties,
            }
        )
    defs["ComponentNode"] = {"oneOf": variants}

    return {
        "$schema": "https://json-schema.org/draft/2020-12/schema",
        "title": "PageContent",
        "type": "object",
        "required": ["root"],
        "properties": {
            "version": {
                "type": "string",
                "default": "1.0",
                "description": "Schema version for future migrations",
            },
            "root": {"$ref": "#/$defs/ComponentNode"},
        },
        "$defs": defs,
    }


__all__ = [
    # Enums
    "ComponentCategory",
    "ComponentType",
    "HeadingLevel",
    "BlockAlign",
    "ButtonVariant",
    "ButtonSize",
    "ObjectFit",
    "PropertyStatus",
    "FieldKind",
    # Props models
    "ComponentProps",
    "ContainerProps",
    "HeadingProps",
    "ParagraphProps",
    "ButtonProps",
    "ImageProps",
    "HeroSectionProps",
    "ColumnsProps",
    "SpacerProps",
    "DividerProps",
    "AccordionItem",
    "AccordionProps",
    "TabItem",
    "TabsProps",
    "VideoProps",
    "CardProps",
    "PropertyCarouselProps",
    # Registry
    "FieldSpec",
    "ComponentSchema",
    "SCHEMA_REGISTRY",
    "get_schema",
    "list_component_types",
    "get_components_by_category",
    "describe_props",
    "get_field_specs",
    # Export
    "export_component_schemas",
    "export_json_schema",
]
