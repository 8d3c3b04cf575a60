"""
Tests for Author pages

Tests for the /catalog/author* routes.
"""

from fastapi import status

from tests.conftest import created_id


class TestListAuthors:
    """Tests for GET /catalog/authors."""

    def test_list_authors_empty(self, client):
        response = client.get("/catalog/authors")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["author_list"] == []

    def test_list_authors_sorted(self, client, author_id):
        client.post(
            "/catalog/author/create",
            data={"first_name": "Isaac", "family_name": "Asimov"},
        )

        response = client.get("/catalog/authors")

        names = [author["full_name"] for author in response.json()["author_list"]]
        assert names == ["Asimov, Isaac", "Bova, Ben"]


class TestGetAuthor:
    """Tests for GET /catalog/author/{author_id}."""

    def test_get_author_success(self, client, author_id, book_id):
        response = client.get(f"/catalog/author/{author_id}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["view"] == "author_detail"
        assert data["author"]["full_name"] == "Bova, Ben"
        assert data["author"]["lifespan"] == "1932-11-08 - "
        assert data["author"]["date_of_birth"] == "1932-11-08"
        assert [book["id"] for book in data["author_books"]] == [book_id]

    def test_get_author_not_found(self, client):
        response = client.get("/catalog/author/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"detail": "Author not found"}


class TestCreateAuthor:
    """Tests for /catalog/author/create."""

    def test_create_author(self, client):
        response = client.post(
            "/catalog/author/create",
            data={
                "first_name": "Isaac",
                "family_name": "Asimov",
                "date_of_birth": "1920-01-02",
                "date_of_death": "1992-04-06",
            },
        )

        author_id = created_id(response)
        data = client.get(f"/catalog/author/{author_id}").json()
        assert data["author"]["lifespan"] == "1920-01-02 - 1992-04-06"

    def test_create_author_missing_names(self, client):
        response = client.post("/catalog/author/create", data={"first_name": "Isaac"})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["view"] == "author_form"
        assert data["author"]["first_name"] == "Isaac"
        assert data["errors"] == [
            {"field": "family_name", "message": "Family name must be specified."}
        ]

    def test_create_author_death_before_birth(self, client):
        response = client.post(
            "/catalog/author/create",
            data={
                "first_name": "Jim",
                "family_name": "Jones",
                "date_of_birth": "1971-12-16",
                "date_of_death": "1901-01-01",
            },
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["errors"] == [
            {
                "field": "date_of_death",
                "message": "Date of death must not precede date of birth",
            }
        ]
        assert client.get("/catalog/authors").json()["author_list"] == []


class TestUpdateAuthor:
    """Tests for /catalog/author/{author_id}/update."""

    def test_update_author(self, client, author_id):
        response = client.post(
            f"/catalog/author/{author_id}/update",
            data={
                "first_name": "Benjamin",
                "family_name": "Bova",
                "date_of_birth": "1932-11-08",
                "date_of_death": "2020-11-29",
            },
        )

        assert response.status_code == status.HTTP_303_SEE_OTHER
        assert response.headers["location"] == f"/catalog/author/{author_id}"
        data = client.get(f"/catalog/author/{author_id}").json()
        assert data["author"]["full_name"] == "Bova, Benjamin"
        assert data["author"]["date_of_death"] == "2020-11-29"

    def test_update_author_not_found(self, client):
        response = client.post(
            "/catalog/author/99999/update",
            data={"first_name": "A", "family_name": "B"},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestDeleteAuthor:
    """Tests for /catalog/author/{author_id}/delete."""

    def test_delete_author(self, client, author_id):
        response = client.post(f"/catalog/author/{author_id}/delete")

        assert response.status_code == status.HTTP_303_SEE_OTHER
        assert response.headers["location"] == "/catalog/authors"

    def test_delete_author_blocked_by_books(self, client, author_id, book_id):
        response = client.post(f"/catalog/author/{author_id}/delete")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["view"] == "author_delete"
        assert [book["title"] for book in data["author_books"]] == ["Apes and Angels"]

    def test_delete_form_missing_redirects_to_list(self, client):
        response = client.get("/catalog/author/99999/delete")

        assert response.status_code == status.HTTP_303_SEE_OTHER
        assert response.headers["location"] == "/catalog/authors"
