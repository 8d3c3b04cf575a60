"""Record counts for the catalog home page, fetched concurrently."""

import asyncio

from catalog.models import Author, Book, BookInstance, BookInstanceStatus, Genre
from catalog.services.store import EntityStore


async def catalog_summary(store: EntityStore) -> dict[str, int]:
    """
    Count every kind of record.

    Returns:
        Mapping with book_count, book_instance_count,
        book_instance_available_count, author_count and genre_count
    """
    counts = await asyncio.gather(
        store.count_where(Book),
        store.count_where(BookInstance),
        store.count_where(
            BookInstance, BookInstance.status == BookInstanceStatus.AVAILABLE
        ),
        store.count_where(Author),
        store.count_where(Genre),
    )
    keys = (
        "book_count",
        "book_instance_count",
        "book_instance_available_count",
        "author_count",
        "genre_count",
    )
    return dict(zip(keys, counts))
