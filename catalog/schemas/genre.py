"""
Genre Pydantic Schemas

Schemas for genre-related operations.
Follows the same pattern as Author schemas.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from catalog.schemas.common import require


class GenreForm(BaseModel):
    """Validation rules for the genre form: a name of 3-100 characters."""

    name: str = Field(
        ...,
        min_length=3,
        max_length=100,
        description="Genre name",
        examples=["Fantasy", "Poetry"],
    )

    @field_validator("name", mode="before")
    @classmethod
    def name_required(cls, v: Any) -> Any:
        return require(v, "Genre name required")


class GenreResponse(BaseModel):
    """Schema for genre records handed to a view."""

    id: int = Field(..., description="Unique identifier")
    name: str = Field(..., description="Genre name")
    url: str

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {"id": 1, "name": "Fantasy", "url": "/catalog/genre/1"}
        },
    )
