"""Structured validation errors and the tagged validation result.

Errors are plain data. Validators return them inside a ValidationResult and
never raise them.
"""

from dataclasses import asdict, dataclass
from typing import Any, ClassVar, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ValidationIssue:
    """Base class for validation errors.

    Attributes:
        path: Location of the offending node ("root.children[0]"), or "$"
            for the document itself.
    """

    path: str

    kind: ClassVar[str] = "validation_issue"

    @property
    def message(self) -> str:
        return f"Invalid content at {self.path}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-compatible dictionary."""
        data = asdict(self)
        data["kind"] = self.kind
        data["message"] = self.message
        return data

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class UnknownComponentType(ValidationIssue):
    """A node's ``type`` is missing or not registered."""

    type: Any = None

    kind: ClassVar[str] = "unknown_component_type"

    @property
    def message(self) -> str:
        return f"Unknown component type {self.type!r} at {self.path}"


@dataclass(frozen=True)
class InvalidField(ValidationIssue):
    """A field violates its contract.

    Attributes:
        type: Component type owning the field, or None for page-level fields.
        field: Offending field path relative to the node ("text",
            "items[0].title", "id").
        expected: Human-readable constraint.
        got: Actual value (None when the field is missing).
        detail: Short description of the failure.
    """

    type: str | None = None
    field: str = ""
    expected: str = ""
    got: Any = None
    detail: str = ""

    kind: ClassVar[str] = "invalid_field"

    @property
    def message(self) -> str:
        owner = f"{self.type}." if self.type else ""
        detail = f"{self.detail}; " if self.detail else ""
        return (
            f"Invalid field '{owner}{self.field}' at {self.path}: "
            f"{detail}expected {self.expected}, got {self.got!r}"
        )


@dataclass(frozen=True)
class UnexpectedChildren(ValidationIssue):
    """A node carries children but its type does not accept them."""

    type: str = ""
    count: int = 0

    kind: ClassVar[str] = "unexpected_children"

    @property
    def message(self) -> str:
        return (
            f"{self.type} at {self.path} does not accept children "
            f"(got {self.count})"
        )


@dataclass(frozen=True)
class MalformedRoot(ValidationIssue):
    """The document is not an object with a ``root`` node object."""

    reason: str = ""

    kind: ClassVar[str] = "malformed_root"

    @property
    def message(self) -> str:
        return f"Malformed page content at {self.path}: {self.reason}"


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """Tagged success/failure result of a validation.

    Exactly one of ``data`` and ``error`` is set.
    """

    success: bool
    data: T | None = None
    error: ValidationIssue | None = None

    @classmethod
    def ok(cls, data: T) -> "ValidationResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: ValidationIssue) -> "ValidationResult[T]":
        return cls(success=False, error=error)

    def to_dict(self) -> dict[str, Any]:
        """Convert to ``{"success", "data" | "error"}``."""
        if self.success:
            return {"success": True, "data": self.data.to_dict()}  # type: ignore[union-attr]
        return {"success": False, "error": self.error.to_dict()}  # type: ignore[union-attr]


__all__ = [
    "ValidationIssue",
    "UnknownComponentType",
    "InvalidField",
    "UnexpectedChildren",
    "MalformedRoot",
    "ValidationResult",
]
