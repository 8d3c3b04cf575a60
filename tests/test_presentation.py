"""
Tests for the Presentation Adapter

Outcomes are built by hand, so these tests need no database.
"""

import json
from datetime import date

from fastapi import status

from catalog.models import Author, Genre
from catalog.services.lifecycle import Blocked, Deleted, Persisted, RevalidationNeeded
from catalog.services.presentation import (
    ErrorResult,
    Redirect,
    Render,
    present_deleted,
    present_saved,
    serialize,
    to_response,
)
from catalog.services.validation import FieldError


def body(response) -> dict:
    return json.loads(response.body)


class TestToResponse:
    """Tests for to_response()."""

    def test_redirect_is_see_other(self):
        response = to_response(Redirect("/catalog/genres"))

        assert response.status_code == status.HTTP_303_SEE_OTHER
        assert response.headers["location"] == "/catalog/genres"

    def test_error(self):
        response = to_response(ErrorResult(status.HTTP_404_NOT_FOUND, "Genre not found"))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert body(response) == {"detail": "Genre not found"}

    def test_render(self):
        response = to_response(Render("genre_list", {"title": "Genre List", "genre_list": []}))

        assert response.status_code == status.HTTP_200_OK
        assert body(response) == {"view": "genre_list", "title": "Genre List", "genre_list": []}


class TestSerialize:
    """Tests for serialize()."""

    def test_record_uses_response_schema(self):
        author = Author(
            id=1,
            first_name="Isaac",
            family_name="Asimov",
            date_of_birth=date(1920, 1, 2),
        )

        assert serialize(author) == {
            "id": 1,
            "first_name": "Isaac",
            "family_name": "Asimov",
            "date_of_birth": "1920-01-02",
            "date_of_death": None,
            "full_name": "Asimov, Isaac",
            "lifespan": "1920-01-02 - ",
            "url": "/catalog/author/1",
        }

    def test_field_errors_and_dates(self):
        value = {
            "errors": [FieldError("name", "Genre name required")],
            "due_back": date(2024, 6, 8),
        }

        assert serialize(value) == {
            "errors": [{"field": "name", "message": "Genre name required"}],
            "due_back": "2024-06-08",
        }


class TestPresentOutcomes:
    """Tests for present_saved() and present_deleted()."""

    def test_persisted_redirects_to_record(self):
        response = present_saved(
            Persisted(record=Genre(id=4, name="Poetry")),
            view="genre_form",
            title="Create Genre",
            record_key="genre",
        )

        assert response.status_code == status.HTTP_303_SEE_OTHER
        assert response.headers["location"] == "/catalog/genre/4"

    def test_revalidation_renders_form(self):
        response = present_saved(
            RevalidationNeeded(
                record={"name": ""},
                errors=[FieldError("name", "Genre name required")],
            ),
            view="genre_form",
            title="Create Genre",
            record_key="genre",
        )

        assert response.status_code == status.HTTP_200_OK
        assert body(response) == {
            "view": "genre_form",
            "title": "Create Genre",
            "genre": {"name": ""},
            "errors": [{"field": "name", "message": "Genre name required"}],
        }

    def test_deleted_redirects_to_list(self):
        response = present_deleted(
            Deleted(record_id=4),
            view="genre_delete",
            title="Delete Genre",
            record_key="genre",
            dependents_key="genre_books",
            list_url="/catalog/genres",
        )

        assert response.headers["location"] == "/catalog/genres"

    def test_blocked_renders_dependents(self):
        response = present_deleted(
            Blocked(record=Genre(id=4, name="Poetry"), blocking_records=[]),
            view="genre_delete",
            title="Delete Genre",
            record_key="genre",
            dependents_key="genre_books",
            list_url="/catalog/genres",
        )

        data = body(response)
        assert data["genre"]["name"] == "Poetry"
        assert data["genre_books"] == []
