"""
Presentation Adapter

Maps lifecycle outcomes onto one of three results:
- Render(view, context): show a page
- Redirect(location): send the browser elsewhere (303 See Other, so
  a form POST is followed by a GET)
- ErrorResult(status_code, message): an HTTP error

to_response() turns a result into a FastAPI response. Pages are
rendered as JSON documents ({"view": ..., **context}); ORM records go
through the Pydantic response schemas, so a view never sees columns
that are not part of its schema.
"""

from dataclasses import dataclass, field
from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, RedirectResponse, Response

from catalog.models import Author, Book, BookInstance, Genre
from catalog.schemas import (
    AuthorResponse,
    BookInstanceResponse,
    BookResponse,
    FieldErrorResponse,
    GenreResponse,
)
from catalog.services.lifecycle import (
    Blocked,
    Deleted,
    Persisted,
    RevalidationNeeded,
)
from catalog.services.validation import FieldError

RESPONSE_SCHEMAS = {
    Author: AuthorResponse,
    Genre: GenreResponse,
    Book: BookResponse,
    BookInstance: BookInstanceResponse,
}


@dataclass
class Render:
    view: str
    context: dict[str, Any] = field(default_factory=dict)


@dataclass
class Redirect:
    location: str


@dataclass
class ErrorResult:
    status_code: int
    message: str


def serialize(value: Any) -> Any:
    """Convert records, field errors and containers into JSON-ready data."""
    schema = RESPONSE_SCHEMAS.get(type(value))
    if schema is not None:
        return schema.model_validate(value).model_dump(mode="json")
    if isinstance(value, FieldError):
        return FieldErrorResponse.model_validate(value).model_dump()
    if isinstance(value, dict):
        return {key: serialize(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize(item) for item in value]
    return jsonable_encoder(value)


def to_response(result: Render | Redirect | ErrorResult) -> Response:
    """Build the HTTP response for a presentation result."""
    if isinstance(result, Redirect):
        return RedirectResponse(result.location, status_code=status.HTTP_303_SEE_OTHER)
    if isinstance(result, ErrorResult):
        return JSONResponse(
            status_code=result.status_code,
            content={"detail": result.message},
        )
    return JSONResponse(content={"view": result.view, **serialize(result.context)})


def render(view: str, **context: Any) -> Response:
    return to_response(Render(view=view, context=context))


def redirect(location: str) -> Response:
    return to_response(Redirect(location=location))


# =============================================================================
# Lifecycle Outcomes
# =============================================================================
def present_saved(
    outcome: Persisted | RevalidationNeeded,
    *,
    view: str,
    title: str,
    record_key: str,
) -> Response:
    """
    Present a create/update outcome.

    Persisted -> redirect to the record's page.
    RevalidationNeeded -> the form again, with sanitized values,
    errors and the freshly fetched lists.
    """
    if isinstance(outcome, Persisted):
        return redirect(outcome.record.url)

    return to_response(
        Render(
            view=view,
            context={
                "title": title,
                record_key: outcome.record,
                "errors": outcome.errors,
                **outcome.context,
            },
        )
    )


def present_deleted(
    outcome: Deleted | Blocked,
    *,
    view: str,
    title: str,
    record_key: str,
    dependents_key: str,
    list_url: str,
) -> Response:
    """
    Present a delete outcome.

    Deleted -> redirect to the list page.
    Blocked -> the delete page again, listing what blocks the delete.
    """
    if isinstance(outcome, Deleted):
        return redirect(list_url)

    return to_response(
        Render(
            view=view,
            context={
                "title": title,
                record_key: outcome.record,
                dependents_key: outcome.blocking_records,
            },
        )
    )
