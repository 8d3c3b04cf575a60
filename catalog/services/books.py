"""
Book Lifecycle

A book references one author and any number of genres. Both are
checked for existence before a write; the form needs the author and
genre lists to offer choices.
"""

import asyncio
from collections.abc import Mapping
from typing import Any

from catalog.models import Author, Book, Genre
from catalog.services.lifecycle import RecordLifecycle
from catalog.services.validation import BOOK_RULES, FieldError


class BookLifecycle(RecordLifecycle[Book]):
    model = Book
    rules = BOOK_RULES
    order_by = [Book.title]

    def to_record_fields(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        return {
            "title": fields["title"],
            "author_id": fields["author"],
            "summary": fields["summary"],
            "isbn": fields["isbn"],
            "genres": list(dict.fromkeys(fields["genre"])),
        }

    async def check_consistency(
        self,
        fields: Mapping[str, Any],
        record_id: int | None = None,
    ) -> list[FieldError]:
        genre_ids = set(fields["genre"])
        author, genre_count = await asyncio.gather(
            self.store.find_by_id(Author, fields["author"]),
            self.store.count_where(Genre, Genre.id.in_(list(genre_ids))),
        )

        errors = []
        if author is None:
            errors.append(FieldError("author", "Author not found"))
        if genre_count != len(genre_ids):
            errors.append(FieldError("genre", "Genre not found"))
        return errors

    async def auxiliary(self) -> dict[str, Any]:
        authors, genres = await asyncio.gather(
            self.store.find_all(Author, order_by=[Author.family_name, Author.first_name]),
            self.store.find_all(Genre, order_by=Genre.name),
        )
        return {"author_list": authors, "genre_list": genres}
