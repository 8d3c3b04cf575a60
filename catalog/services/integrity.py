"""
Referential Integrity Guard

Decides whether a record may be deleted without orphaning references.

Dependency rules:
- Genre G:        blocked while any Book lists G among its genres
- Author A:       blocked while any Book has author A
- Book B:         blocked while any BookInstance copies B
- BookInstance:   never blocked (nothing references a copy)

The check is count-then-fetch: a count by foreign key decides, and the
dependents are loaded only when there are some to report. Callers that
delete should run the check and the delete in one
EntityStore.transaction(); the non-cascading foreign keys reject any
delete that a concurrent insert makes unsafe.

Two styles are offered. can_delete() returns a DeleteCheck and is what
the lifecycle controllers use, so a refused delete re-renders the
delete page. ensure_can_delete() is the raise-style API for scripts and
other callers with no page to show; if its IntegrityBlockedError reaches
the application, it is rendered as 409 Conflict.
"""

from dataclasses import dataclass, field
from typing import Any

from catalog.exceptions import IntegrityBlockedError
from catalog.models import Author, Book, BookInstance, Genre
from catalog.services.store import EntityStore


@dataclass
class DeleteCheck:
    """Result of can_delete()."""

    allowed: bool
    blocking_records: list[Any] = field(default_factory=list)


def _dependents_query(model: type, record_id: int) -> tuple[type, tuple, Any] | None:
    """Return (dependent model, criteria, ordering) for model, or None for leaves."""
    if model is Genre:
        return Book, (Book.genres.any(Genre.id == record_id),), Book.title
    if model is Author:
        return Book, (Book.author_id == record_id,), Book.title
    if model is Book:
        return BookInstance, (BookInstance.book_id == record_id,), BookInstance.id
    return None


class IntegrityGuard:
    """Delete-time dependency checks backed by an EntityStore."""

    def __init__(self, store: EntityStore) -> None:
        self.store = store

    async def dependents_of(self, model: type, record_id: int) -> list[Any]:
        """All records that reference the given record (empty for leaves)."""
        query = _dependents_query(model, record_id)
        if query is None:
            return []
        dependent_model, criteria, order_by = query
        return await self.store.find_all(dependent_model, *criteria, order_by=order_by)

    async def can_delete(self, model: type, record_id: int) -> DeleteCheck:
        """
        Check whether a record can be deleted.

        Returns:
            DeleteCheck(allowed=True) when nothing references the record,
            otherwise allowed=False with the referencing records
        """
        query = _dependents_query(model, record_id)
        if query is None:
            return DeleteCheck(allowed=True)

        dependent_model, criteria, _ = query
        count = await self.store.count_where(dependent_model, *criteria)
        if count == 0:
            return DeleteCheck(allowed=True)

        return DeleteCheck(
            allowed=False,
            blocking_records=await self.dependents_of(model, record_id),
        )

    async def ensure_can_delete(self, model: type, record_id: int) -> None:
        """
        Raise instead of returning a DeleteCheck.

        Raises:
            IntegrityBlockedError: if any record references this one
        """
        check = await self.can_delete(model, record_id)
        if not check.allowed:
            raise IntegrityBlockedError(model.__name__, record_id, check.blocking_records)
