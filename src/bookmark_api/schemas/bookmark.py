"""Pydantic schemas for bookmark endpoints."""
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from bookmark_api.schemas.validators import BOOKMARK_FIELDS, is_present


class BookmarkCreate(BaseModel):
    """
    Documented shape of a create request.

    Not used to parse the body: presence, URL and rating checks produce
    specific 400 messages (see schemas.validators), so the handler works on
    the raw JSON object. This model only feeds the OpenAPI schema.
    """

    title: str = Field(description="Non-empty title")
    url: str = Field(description="Absolute URL with scheme and host", examples=["https://example.com"])
    description: str = Field(description="Free text; markup is neutralized on output")
    rating: int = Field(ge=1, le=5, description="Integer rating between 1 and 5")


class BookmarkUpdate(BaseModel):
    """Documented shape of a partial update request. Every field is optional."""

    title: str | None = None
    url: str | None = None
    description: str | None = None
    rating: int | None = Field(default=None, ge=1, le=5)


class BookmarkResponse(BaseModel):
    """Schema for bookmark responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    url: str
    description: str
    rating: int


def extract_bookmark_fields(payload: Mapping[str, Any] | None) -> dict[str, Any]:
    """
    Pick the recognized bookmark fields out of a request body.

    Unrecognized keys and null values are dropped, so the result holds exactly
    the fields the client is setting.
    """
    if not payload:
        return {}
    return {key: payload[key] for key in BOOKMARK_FIELDS if is_present(payload, key)}
