"""
BookInstance Pydantic Schemas

Schemas for physical copies of books.
"""

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from catalog.models.book_instance import BookInstanceStatus
from catalog.schemas.book import BookResponse
from catalog.schemas.common import parse_optional_date, require


class BookInstanceForm(BaseModel):
    """
    Validation rules for the book copy form.

    A blank status means Maintenance; a blank due_back date means
    "not given" (the lifecycle fills in today's date).
    """

    book: int = Field(..., description="Id of the book this copy belongs to")

    imprint: str = Field(
        ...,
        max_length=255,
        description="Publisher and edition details",
        examples=["Gollancz, 2011."],
    )

    status: BookInstanceStatus = Field(
        default=BookInstanceStatus.MAINTENANCE,
        description="Availability of the copy",
    )

    due_back: date | None = Field(
        default=None,
        description="When the copy is expected back",
    )

    @field_validator("book", mode="before")
    @classmethod
    def book_required(cls, v: Any) -> Any:
        return require(v, "Book must be specified")

    @field_validator("imprint", mode="before")
    @classmethod
    def imprint_required(cls, v: Any) -> Any:
        return require(v, "Imprint must be specified")

    @field_validator("status", mode="before")
    @classmethod
    def default_status(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return BookInstanceStatus.MAINTENANCE
        return v

    @field_validator("due_back", mode="before")
    @classmethod
    def parse_due_back(cls, v: Any) -> date | None:
        return parse_optional_date(v, "Invalid date")


class BookInstanceResponse(BaseModel):
    """Schema for book copy records handed to a view."""

    id: int = Field(..., description="Unique identifier")
    imprint: str
    status: BookInstanceStatus
    due_back: date
    due_back_formatted: str = Field(..., description="e.g. 'June 8th, 2024'")
    book: BookResponse
    url: str

    model_config = ConfigDict(from_attributes=True)
