"""
Author Pydantic Schemas

These schemas define the shape of data for Author-related operations.

- AuthorForm: rules applied to a submitted form (trimmed, not yet escaped)
- AuthorResponse: what a rendered page receives for an Author record
"""

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from catalog.schemas.common import parse_optional_date, require


class AuthorForm(BaseModel):
    """
    Validation rules for the author create/update form.

    Both names are required and limited to 100 characters. Dates are
    optional; when both are given, death may not precede birth.
    """

    first_name: str = Field(
        ...,
        max_length=100,
        description="Author's first name",
        examples=["Patrick"],
    )

    family_name: str = Field(
        ...,
        max_length=100,
        description="Author's family name",
        examples=["Rothfuss"],
    )

    # date_of_birth is declared first so its value is available
    # (info.data) when date_of_death is checked
    date_of_birth: date | None = Field(
        default=None,
        description="Date of birth",
        examples=["1973-06-06"],
    )

    date_of_death: date | None = Field(
        default=None,
        description="Date of death",
    )

    @field_validator("first_name", mode="before")
    @classmethod
    def first_name_required(cls, v: Any) -> Any:
        return require(v, "First name must be specified.")

    @field_validator("family_name", mode="before")
    @classmethod
    def family_name_required(cls, v: Any) -> Any:
        return require(v, "Family name must be specified.")

    @field_validator("date_of_birth", mode="before")
    @classmethod
    def parse_date_of_birth(cls, v: Any) -> date | None:
        return parse_optional_date(v, "Invalid date of birth")

    @field_validator("date_of_death", mode="before")
    @classmethod
    def parse_date_of_death(cls, v: Any) -> date | None:
        return parse_optional_date(v, "Invalid date of death")

    @field_validator("date_of_death")
    @classmethod
    def death_not_before_birth(cls, v: date | None, info: ValidationInfo) -> date | None:
        """Reject a date of death earlier than the date of birth."""
        born = info.data.get("date_of_birth")
        if v is not None and born is not None and v < born:
            raise PydanticCustomError(
                "date_order",
                "Date of death must not precede date of birth",
            )
        return v


class AuthorResponse(BaseModel):
    """
    Schema for author records handed to a view.

    from_attributes=True lets the schema read the SQLAlchemy model,
    including the derived properties (full_name, lifespan, url).
    """

    id: int = Field(..., description="Unique identifier", examples=[1])
    first_name: str
    family_name: str
    date_of_birth: date | None = None
    date_of_death: date | None = None
    full_name: str = Field(..., description="'family_name, first_name'")
    lifespan: str = Field(..., description="'YYYY-MM-DD - YYYY-MM-DD'")
    url: str

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "first_name": "Patrick",
                "family_name": "Rothfuss",
                "date_of_birth": "1973-06-06",
                "date_of_death": None,
                "full_name": "Rothfuss, Patrick",
                "lifespan": "1973-06-06 - ",
                "url": "/catalog/author/1",
            }
        },
    )
