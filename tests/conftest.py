"""
pytest Fixtures for Local Library Tests

This file contains shared fixtures used across all test files.

WHAT ARE FIXTURES?
==================
Fixtures are reusable test setup/teardown functions.
They provide:
- Test data (sample authors, genres, books)
- Test resources (database handles, HTTP clients)
- Setup/cleanup logic (create tables, close connections)

Two kinds of tests share these fixtures:

1. Service tests (async, pytest-asyncio)
   - `database` opens a Database on a temporary SQLite file
   - `store` and the lifecycle fixtures run against it
   - sample_* fixtures insert records through the store

2. HTTP tests (sync, FastAPI TestClient)
   - `client` builds a fresh app with create_app(settings)
   - the app's lifespan opens its own Database on the same file and
     creates the tables
   - records are seeded by posting forms, the way a browser would

Every test gets its own tmp_path, and therefore its own database file.
"""

from collections.abc import AsyncGenerator, Generator
from datetime import date

import pytest
import pytest_asyncio
from fastapi import status
from fastapi.testclient import TestClient

from catalog.config import Settings
from catalog.database import Database, open_database
from catalog.main import create_app
from catalog.models import Author, Book, BookInstance, BookInstanceStatus, Genre
from catalog.services.authors import AuthorLifecycle
from catalog.services.book_instances import BookInstanceLifecycle
from catalog.services.books import BookLifecycle
from catalog.services.genres import GenreLifecycle
from catalog.services.store import EntityStore

# =============================================================================
# SETTINGS AND DATABASE FIXTURES
# =============================================================================
# SQLite through aiosqlite, stored in a file so that several connections
# (concurrent lookups, the TestClient's event loop) see the same data.


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a fresh SQLite file, with tables created on startup."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        create_tables=True,
        environment="development",
        debug=False,
        log_level="DEBUG",
    )


@pytest_asyncio.fixture
async def database(settings: Settings) -> AsyncGenerator[Database, None]:
    """
    Open a Database handle with all tables created.

    The handle is closed after the test; the file is removed with tmp_path.
    """
    database = open_database(settings)
    await database.create_tables()

    yield database

    await database.close()


@pytest.fixture
def store(database: Database) -> EntityStore:
    return EntityStore(database.session_factory)


@pytest.fixture
def authors(store: EntityStore) -> AuthorLifecycle:
    return AuthorLifecycle(store)


@pytest.fixture
def genres(store: EntityStore) -> GenreLifecycle:
    return GenreLifecycle(store)


@pytest.fixture
def books(store: EntityStore) -> BookLifecycle:
    return BookLifecycle(store)


@pytest.fixture
def book_instances(store: EntityStore) -> BookInstanceLifecycle:
    return BookInstanceLifecycle(store)


# =============================================================================
# SAMPLE DATA FIXTURES (store level)
# =============================================================================


@pytest_asyncio.fixture
async def sample_author(store: EntityStore) -> Author:
    """Create a sample author for testing."""
    return await store.insert(
        Author,
        {
            "first_name": "Patrick",
            "family_name": "Rothfuss",
            "date_of_birth": date(1973, 6, 6),
        },
    )


@pytest_asyncio.fixture
async def sample_genre(store: EntityStore) -> Genre:
    """Create a sample genre for testing."""
    return await store.insert(Genre, {"name": "Fantasy"})


@pytest_asyncio.fixture
async def sample_book(
    store: EntityStore,
    sample_author: Author,
    sample_genre: Genre,
) -> Book:
    """
    Create a sample book with author and genre associations.

    This fixture depends on sample_author and sample_genre fixtures.
    pytest automatically resolves these dependencies.
    """
    return await store.insert(
        Book,
        {
            "title": "The Name of the Wind",
            "summary": "The tale of Kvothe, told in his own words.",
            "isbn": "9780756404741",
            "author_id": sample_author.id,
            "genres": [sample_genre.id],
        },
    )


@pytest_asyncio.fixture
async def sample_book_instance(store: EntityStore, sample_book: Book) -> BookInstance:
    """Create a sample copy of sample_book."""
    return await store.insert(
        BookInstance,
        {
            "book_id": sample_book.id,
            "imprint": "DAW Books, 2007.",
            "status": BookInstanceStatus.AVAILABLE,
            "due_back": date(2026, 6, 8),
        },
    )


# =============================================================================
# HTTP FIXTURES
# =============================================================================


@pytest.fixture
def client(settings: Settings) -> Generator[TestClient, None, None]:
    """
    Create a test client for a fresh application instance.

    Entering the TestClient context runs the lifespan, which opens the
    database and creates the tables. Redirects are not followed so that
    tests can assert on 303 responses and their Location header.
    """
    app = create_app(settings)
    with TestClient(app, follow_redirects=False) as test_client:
        yield test_client


def created_id(response) -> int:
    """Extract the new record's id from a create redirect."""
    assert response.status_code == status.HTTP_303_SEE_OTHER
    return int(response.headers["location"].rstrip("/").rsplit("/", 1)[-1])


@pytest.fixture
def author_id(client: TestClient) -> int:
    """Create an author through the form endpoint."""
    response = client.post(
        "/catalog/author/create",
        data={
            "first_name": "Ben",
            "family_name": "Bova",
            "date_of_birth": "1932-11-08",
            "date_of_death": "",
        },
    )
    return created_id(response)


@pytest.fixture
def genre_id(client: TestClient) -> int:
    """Create a genre through the form endpoint."""
    response = client.post("/catalog/genre/create", data={"name": "Science Fiction"})
    return created_id(response)


@pytest.fixture
def book_id(client: TestClient, author_id: int, genre_id: int) -> int:
    """Create a book by author_id, filed under genre_id."""
    response = client.post(
        "/catalog/book/create",
        data={
            "title": "Apes and Angels",
            "author": str(author_id),
            "summary": "Humankind headed out to the stars.",
            "isbn": "9780765379528",
            "genre": [str(genre_id)],
        },
    )
    return created_id(response)


@pytest.fixture
def bookinstance_id(client: TestClient, book_id: int) -> int:
    """Create an available copy of book_id."""
    response = client.post(
        "/catalog/bookinstance/create",
        data={
            "book": str(book_id),
            "imprint": "Tor, 2016.",
            "status": "Available",
            "due_back": "",
        },
    )
    return created_id(response)
