"""Tree validator for CMS page content.

Example usage:
    >>> from cms_render.validation import validate_page
    >>> result = validate_page('{"root": {"id": "1", "type": "Marquee"}}')
    >>> result.success, result.error.kind
    (False, 'unknown_component_type')
"""

from .errors import (
    InvalidField,
    MalformedRoot,
    UnexpectedChildren,
    UnknownComponentType,
    ValidationIssue,
    ValidationResult,
)
from .lib import MAX_DEPTH, is_valid_page, validate_component, validate_page
from .models import DEFAULT_VERSION, ComponentNode, PageContent

__all__ = [
    # Models
    "DEFAULT_VERSION",
    "ComponentNode",
    "PageContent",
    # Errors
    "ValidationIssue",
    "UnknownComponentType",
    "InvalidField",
    "UnexpectedChildren",
    "MalformedRoot",
    "ValidationResult",
    # Validators
    "MAX_DEPTH",
    "validate_page",
    "validate_component",
    "is_valid_page",
]
