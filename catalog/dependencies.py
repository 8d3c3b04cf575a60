"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

WHY Dependency Injection?
=========================
1. Reusability: Write once, use in many routes
2. Testing: Easy to swap the database for a temporary one
3. Separation of Concerns: Routes only translate HTTP to lifecycle calls

Common Dependency Patterns here:
- The entity store (built from the app's Database handle)
- One lifecycle controller per entity
- The submitted form, as a plain mapping
"""

from typing import Annotated, Any

from fastapi import Depends, Request

from catalog.database import Database
from catalog.services.authors import AuthorLifecycle
from catalog.services.book_instances import BookInstanceLifecycle
from catalog.services.books import BookLifecycle
from catalog.services.genres import GenreLifecycle
from catalog.services.store import EntityStore


# =============================================================================
# Database and Store
# =============================================================================
def get_database(request: Request) -> Database:
    """The Database handle opened by the application lifespan."""
    return request.app.state.database


def get_store(database: Annotated[Database, Depends(get_database)]) -> EntityStore:
    """
    Entity store for one request.

    The store itself holds no session; each operation opens its own.
    """
    return EntityStore(database.session_factory)


Store = Annotated[EntityStore, Depends(get_store)]


# =============================================================================
# Lifecycle Controllers
# =============================================================================
def get_author_lifecycle(store: Store) -> AuthorLifecycle:
    return AuthorLifecycle(store)


def get_genre_lifecycle(store: Store) -> GenreLifecycle:
    return GenreLifecycle(store)


def get_book_lifecycle(store: Store) -> BookLifecycle:
    return BookLifecycle(store)


def get_book_instance_lifecycle(store: Store) -> BookInstanceLifecycle:
    return BookInstanceLifecycle(store)


Authors = Annotated[AuthorLifecycle, Depends(get_author_lifecycle)]
Genres = Annotated[GenreLifecycle, Depends(get_genre_lifecycle)]
Books = Annotated[BookLifecycle, Depends(get_book_lifecycle)]
BookInstances = Annotated[BookInstanceLifecycle, Depends(get_book_instance_lifecycle)]


# =============================================================================
# Submitted Forms
# =============================================================================
async def read_form(request: Request) -> dict[str, Any]:
    """
    Read an urlencoded or multipart form body.

    Keys submitted once map to a string; repeated keys (checkbox
    groups such as a book's genres) map to a list of strings.

    Usage:
        @router.post("/genre/create")
        async def genre_create(form: FormFields, genres: Genres):
            outcome = await genres.create(form)
    """
    form = await request.form()
    fields: dict[str, Any] = {}
    for key in form.keys():
        values = form.getlist(key)
        fields[key] = values if len(values) > 1 else values[0]
    return fields


FormFields = Annotated[dict[str, Any], Depends(read_form)]
