"""
Tests for Genre pages

Tests for the /catalog/genre* routes.
"""

from fastapi import status

from tests.conftest import created_id


class TestListGenres:
    """Tests for GET /catalog/genres."""

    def test_list_genres_empty(self, client):
        """Test listing genres when database is empty."""
        response = client.get("/catalog/genres")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["view"] == "genre_list"
        assert data["genre_list"] == []

    def test_list_genres_sorted_by_name(self, client):
        for name in ["Horror", "Drama", "Adventure"]:
            client.post("/catalog/genre/create", data={"name": name})

        response = client.get("/catalog/genres")

        names = [genre["name"] for genre in response.json()["genre_list"]]
        assert names == ["Adventure", "Drama", "Horror"]


class TestGetGenre:
    """Tests for GET /catalog/genre/{genre_id}."""

    def test_get_genre_success(self, client, genre_id, book_id):
        """Test getting a genre with the books filed under it."""
        response = client.get(f"/catalog/genre/{genre_id}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["view"] == "genre_detail"
        assert data["genre"] == {
            "id": genre_id,
            "name": "Science Fiction",
            "url": f"/catalog/genre/{genre_id}",
        }
        assert [book["id"] for book in data["genre_books"]] == [book_id]

    def test_get_genre_not_found(self, client):
        """Test getting a non-existent genre returns 404."""
        response = client.get("/catalog/genre/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"detail": "Genre not found"}


class TestCreateGenre:
    """Tests for /catalog/genre/create."""

    def test_create_form(self, client):
        response = client.get("/catalog/genre/create")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"view": "genre_form", "title": "Create Genre"}

    def test_create_genre_redirects_to_detail(self, client):
        response = client.post("/catalog/genre/create", data={"name": "Mystery"})

        assert response.status_code == status.HTTP_303_SEE_OTHER
        genre_id = created_id(response)
        assert response.headers["location"] == f"/catalog/genre/{genre_id}"

    def test_create_genre_duplicate_name(self, client, genre_id):
        """A duplicate name redirects to the existing genre."""
        response = client.post("/catalog/genre/create", data={"name": "Science Fiction"})

        assert created_id(response) == genre_id
        listed = client.get("/catalog/genres").json()["genre_list"]
        assert len(listed) == 1

    def test_create_genre_empty_name(self, client):
        """Test that an empty name re-renders the form with an error."""
        response = client.post("/catalog/genre/create", data={"name": "   "})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["view"] == "genre_form"
        assert data["genre"] == {"name": ""}
        assert data["errors"] == [{"field": "name", "message": "Genre name required"}]

    def test_create_genre_escapes_markup(self, client):
        response = client.post("/catalog/genre/create", data={"name": "<em>Noir</em>"})

        detail = client.get(response.headers["location"]).json()
        assert detail["genre"]["name"] == "&lt;em&gt;Noir&lt;/em&gt;"


class TestUpdateGenre:
    """Tests for /catalog/genre/{genre_id}/update."""

    def test_update_form(self, client, genre_id):
        response = client.get(f"/catalog/genre/{genre_id}/update")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["title"] == "Update Genre"
        assert data["genre"]["id"] == genre_id

    def test_update_genre(self, client, genre_id):
        response = client.post(f"/catalog/genre/{genre_id}/update", data={"name": "Sci-Fi"})

        assert response.status_code == status.HTTP_303_SEE_OTHER
        assert response.headers["location"] == f"/catalog/genre/{genre_id}"
        detail = client.get(f"/catalog/genre/{genre_id}").json()
        assert detail["genre"]["name"] == "Sci-Fi"

    def test_update_genre_invalid(self, client, genre_id):
        response = client.post(f"/catalog/genre/{genre_id}/update", data={"name": "ab"})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["genre"] == {"name": "ab", "id": genre_id}
        assert data["errors"][0]["field"] == "name"

    def test_update_genre_not_found(self, client):
        """Test updating a non-existent genre returns 404."""
        response = client.post("/catalog/genre/99999/update", data={"name": "Updated"})

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestDeleteGenre:
    """Tests for /catalog/genre/{genre_id}/delete."""

    def test_delete_form_lists_books(self, client, genre_id, book_id):
        response = client.get(f"/catalog/genre/{genre_id}/delete")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["view"] == "genre_delete"
        assert [book["id"] for book in data["genre_books"]] == [book_id]

    def test_delete_form_missing_redirects_to_list(self, client):
        response = client.get("/catalog/genre/99999/delete")

        assert response.status_code == status.HTTP_303_SEE_OTHER
        assert response.headers["location"] == "/catalog/genres"

    def test_delete_genre(self, client, genre_id):
        response = client.post(f"/catalog/genre/{genre_id}/delete")

        assert response.status_code == status.HTTP_303_SEE_OTHER
        assert response.headers["location"] == "/catalog/genres"
        assert client.get(f"/catalog/genre/{genre_id}").status_code == status.HTTP_404_NOT_FOUND

    def test_delete_genre_blocked_by_book(self, client, genre_id, book_id):
        response = client.post(f"/catalog/genre/{genre_id}/delete")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["view"] == "genre_delete"
        assert data["genre"]["id"] == genre_id
        assert [book["id"] for book in data["genre_books"]] == [book_id]
        assert client.get(f"/catalog/genre/{genre_id}").status_code == status.HTTP_200_OK
