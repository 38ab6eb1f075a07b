"""Pydantic schemas for bookmark endpoints."""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Fields that may never be set to null once a bookmark exists
NON_NULLABLE_FIELDS = ("title", "url", "rating")


class BookmarkCreate(BaseModel):
    """Schema for creating a new bookmark."""

    title: str = Field(min_length=1)
    url: str = Field(min_length=1)
    description: str | None = None
    rating: int = Field(strict=True)


class BookmarkUpdate(BaseModel):
    """
    Schema for partially updating an existing bookmark.

    Every field is optional. Only fields present in the request body are
    applied (see `model_fields_set`); unknown keys are ignored.
    """

    title: str | None = Field(default=None, min_length=1)
    url: str | None = Field(default=None, min_length=1)
    description: str | None = None
    rating: int | None = Field(default=None, strict=True)

    @model_validator(mode="before")
    @classmethod
    def reject_null_required_fields(cls, data: Any) -> Any:
        """Reject explicit nulls for columns that must always hold a value."""
        if isinstance(data, dict):
            for field in NON_NULLABLE_FIELDS:
                if field in data and data[field] is None:
                    raise ValueError(f"'{field}' cannot be null")
        return data

    def has_updates(self) -> bool:
        """True if the request body supplied at least one updatable field."""
        return bool(self.model_fields_set)


class BookmarkResponse(BaseModel):
    """Schema for bookmark responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    url: str
    description: str | None
    rating: int
