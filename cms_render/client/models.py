"""Wire models for the headless CMS API."""

from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class _CmsModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )


class CmsPage(_CmsModel):
    """A published page with per-language content trees."""

    slug: str = Field(..., description="URL slug ('home' for the homepage)")
    title: str = Field(..., description="English title")
    title_ar: str | None = Field(None, description="Arabic title")
    content_json: Any = Field(None, description="English page content tree")
    content_json_ar: Any = Field(None, description="Arabic page content tree")
    meta_description: str | None = Field(None, description="English meta description")
    meta_description_ar: str | None = Field(
        None, description="Arabic meta description"
    )
    published_at: datetime | None = Field(None, description="Publication time")


class PlatformContent(_CmsModel):
    """A keyed block of platform content."""

    key: str = Field(..., description="Content key")
    content: Any = Field(None, description="English content")
    content_ar: Any = Field(None, description="Arabic content")


class ApiResponse(_CmsModel, Generic[T]):
    """Response envelope shared by every CMS endpoint."""

    success: bool = Field(..., description="Whether the request succeeded")
    data: T | None = Field(None, description="Payload")
    error: str | None = Field(None, description="Error message")
    cached: bool | None = Field(None, description="Served from the CMS cache")


class HealthStatus(_CmsModel):
    """Health endpoint payload."""

    success: bool = False
    status: str | None = None

    @property
    def healthy(self) -> bool:
        return self.success and self.status == "ok"


__all__ = ["CmsPage", "PlatformContent", "ApiResponse", "HealthStatus"]
