"""
Shared Schema Helpers

Reusable "before" validators for submitted form values.

Errors are raised as PydanticCustomError so the message shown next to
the form field is exactly the text given here (a plain ValueError
would be prefixed with "Value error, ").
"""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import PydanticCustomError


def require(value: Any, message: str) -> Any:
    """Reject None and blank strings with a field-specific message."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise PydanticCustomError("required", message)
    return value


def parse_optional_date(value: Any, message: str) -> date | None:
    """
    Parse an optional calendar date.

    Empty values mean "not given". Strings must be ISO dates
    (YYYY-MM-DD).
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise PydanticCustomError("date_invalid", message) from None


class FieldErrorResponse(BaseModel):
    """One validation message attached to a form field."""

    field: str = Field(..., description="Name of the submitted field")
    message: str = Field(..., description="Human-readable problem")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {"field": "name", "message": "Genre name required"}
        },
    )
