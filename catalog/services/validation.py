"""
Validation & Sanitization Layer

Turns a raw submitted field mapping into either Valid(fields) or
Invalid(fields, errors). Never raises for bad input; the caller decides
whether to persist or re-render the form.

Pipeline
========
1. Normalize:
   - text: trimmed, HTML entities decoded
   - dates: '' -> None, ISO strings -> datetime.date, anything else is
     kept as the trimmed string so the form can show it again
   - lists: a single value becomes a one-element list; blanks dropped
2. Validate the normalized mapping with the entity's Pydantic form model.
   Length and required rules therefore count the characters the user
   typed, not their escaped form.
3. Escape the text (always, whatever the outcome)
4. Fold pydantic's ValidationError into FieldError(field, message)

Escaping decodes existing entities first, so it is idempotent:
sanitize(sanitize(x)) == sanitize(x).
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any

from markupsafe import Markup, escape
from pydantic import BaseModel, ValidationError

from catalog.schemas import AuthorForm, BookForm, BookInstanceForm, GenreForm


@dataclass(frozen=True)
class FieldError:
    """One problem with one submitted field."""

    field: str
    message: str


@dataclass
class Valid:
    """Sanitized, validated values ready to persist."""

    fields: dict[str, Any]


@dataclass
class Invalid:
    """Sanitized values plus the reasons they were rejected."""

    fields: dict[str, Any]
    errors: list[FieldError] = field(default_factory=list)


# =============================================================================
# Sanitizers
# =============================================================================
def plain_text(value: Any) -> str:
    """Trim a submitted value and decode any HTML entities in it."""
    if value is None:
        return ""
    return Markup(str(value).strip()).unescape()


def escape_text(value: Any) -> str:
    """Trim and HTML-escape a submitted value."""
    return str(escape(plain_text(value)))


def coerce_date(value: Any) -> date | str | None:
    """Normalize a submitted date; unparseable input is returned trimmed."""
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
        return text


def coerce_list(value: Any) -> list[str]:
    """Normalize a single or repeated form value into a list of strings."""
    if value is None:
        return []
    items = value if isinstance(value, (list, tuple)) else [value]
    return [plain_text(item) for item in items if str(item).strip()]


def _escape_value(value: Any) -> Any:
    # Enum members (BookInstanceStatus) are str subclasses; keep them intact
    if isinstance(value, str) and not isinstance(value, Enum):
        return escape_text(value)
    if isinstance(value, list):
        return [_escape_value(item) for item in value]
    return value


def collect_errors(exc: ValidationError) -> list[FieldError]:
    """Convert pydantic errors into FieldErrors, one per message."""
    errors: list[FieldError] = []
    for error in exc.errors():
        loc = error.get("loc") or ("__all__",)
        field_error = FieldError(field=str(loc[0]), message=error["msg"])
        if field_error not in errors:
            errors.append(field_error)
    return errors


# =============================================================================
# Rule Sets
# =============================================================================
@dataclass(frozen=True)
class RuleSet:
    """
    Sanitizers and validation rules for one entity's form.

    Attributes:
        form: Pydantic model holding the validation rules
        text_fields: Fields trimmed and escaped
        date_fields: Fields coerced to dates
        list_fields: Multi-valued fields (checkbox groups)
    """

    form: type[BaseModel]
    text_fields: tuple[str, ...] = ()
    date_fields: tuple[str, ...] = ()
    list_fields: tuple[str, ...] = ()

    def normalize(self, raw: Mapping[str, Any]) -> dict[str, Any]:
        """Trim and coerce without escaping; missing text fields become ''."""
        fields: dict[str, Any] = {}
        for name in self.text_fields:
            fields[name] = plain_text(raw.get(name))
        for name in self.date_fields:
            fields[name] = coerce_date(raw.get(name))
        for name in self.list_fields:
            fields[name] = coerce_list(raw.get(name))
        return fields

    def escape_fields(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        """HTML-escape the text and list fields of a normalized mapping."""
        escaped = dict(fields)
        for name in (*self.text_fields, *self.list_fields):
            if name in escaped:
                escaped[name] = _escape_value(escaped[name])
        return escaped

    def sanitize(self, raw: Mapping[str, Any]) -> dict[str, Any]:
        """Apply the sanitizers; missing text fields become ''."""
        return self.escape_fields(self.normalize(raw))

    def validate(self, raw: Mapping[str, Any]) -> Valid | Invalid:
        """Validate the submitted text as typed, then escape it."""
        plain = self.normalize(raw)
        try:
            form = self.form.model_validate(plain)
        except ValidationError as exc:
            return Invalid(fields=self.escape_fields(plain), errors=collect_errors(exc))
        return Valid(fields=self.escape_fields(form.model_dump()))


AUTHOR_RULES = RuleSet(
    form=AuthorForm,
    text_fields=("first_name", "family_name"),
    date_fields=("date_of_birth", "date_of_death"),
)

GENRE_RULES = RuleSet(
    form=GenreForm,
    text_fields=("name",),
)

BOOK_RULES = RuleSet(
    form=BookForm,
    text_fields=("title", "author", "summary", "isbn"),
    list_fields=("genre",),
)

BOOK_INSTANCE_RULES = RuleSet(
    form=BookInstanceForm,
    text_fields=("book", "imprint", "status"),
    date_fields=("due_back",),
)
