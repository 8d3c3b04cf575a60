"""
BookInstance Lifecycle

Copies are leaves: nothing references them, so they can always be
deleted. The form needs the list of books and the status choices.
"""

from collections.abc import Mapping
from datetime import date
from typing import Any

from catalog.models import Book, BookInstance, BookInstanceStatus
from catalog.services.lifecycle import RecordLifecycle
from catalog.services.validation import BOOK_INSTANCE_RULES, FieldError


class BookInstanceLifecycle(RecordLifecycle[BookInstance]):
    model = BookInstance
    rules = BOOK_INSTANCE_RULES

    def to_record_fields(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        return {
            "book_id": fields["book"],
            "imprint": fields["imprint"],
            "status": fields["status"],
            # A blank date takes the column default: today
            "due_back": fields["due_back"] or date.today(),
        }

    async def check_consistency(
        self,
        fields: Mapping[str, Any],
        record_id: int | None = None,
    ) -> list[FieldError]:
        book = await self.store.find_by_id(Book, fields["book"])
        if book is None:
            return [FieldError("book", "Book not found")]
        return []

    async def auxiliary(self) -> dict[str, Any]:
        books = await self.store.find_all(Book, order_by=Book.title)
        return {
            "book_list": books,
            "status_choices": [status.value for status in BookInstanceStatus],
        }
