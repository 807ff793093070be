"""Schema registry - authoritative component contracts.

Single source of truth for the 14 component types: their props models,
categories, child acceptance, and field contracts.

Example usage:
    >>> from cms_render.schema import ComponentType, get_schema
    >>> schema = get_schema("Columns")
    >>> schema.accepts_children
    True
    >>> schema.fields["columns"].default
    2
"""

from .lib import (
    SCHEMA_REGISTRY,
    AccordionItem,
    AccordionProps,
    BlockAlign,
    ButtonProps,
    ButtonSize,
    ButtonVariant,
    CardProps,
    ColumnsProps,
    ComponentCategory,
    ComponentProps,
    ComponentSchema,
    ComponentType,
    ContainerProps,
    DividerProps,
    FieldKind,
    FieldSpec,
    HeadingLevel,
    HeadingProps,
    HeroSectionProps,
    ImageProps,
    ObjectFit,
    ParagraphProps,
    PropertyCarouselProps,
    PropertyStatus,
    SpacerProps,
    TabItem,
    TabsProps,
    VideoProps,
    describe_props,
    export_component_schemas,
    export_json_schema,
    get_components_by_category,
    get_field_specs,
    get_schema,
    list_component_types,
)

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
