"""
Tests for the Referential Integrity Guard
"""

import pytest

from catalog.exceptions import IntegrityBlockedError
from catalog.models import Author, Book, BookInstance, Genre
from catalog.services.integrity import IntegrityGuard


@pytest.fixture
def guard(store) -> IntegrityGuard:
    return IntegrityGuard(store)


class TestCanDelete:
    """Tests for can_delete() per record kind."""

    @pytest.mark.asyncio
    async def test_unused_genre_allowed(self, guard, sample_genre):
        check = await guard.can_delete(Genre, sample_genre.id)

        assert check.allowed is True
        assert check.blocking_records == []

    @pytest.mark.asyncio
    async def test_genre_blocked_by_book(self, guard, sample_book, sample_genre):
        check = await guard.can_delete(Genre, sample_genre.id)

        assert check.allowed is False
        assert [book.id for book in check.blocking_records] == [sample_book.id]

    @pytest.mark.asyncio
    async def test_author_blocked_by_books(self, guard, store, sample_book, sample_author):
        second = await store.insert(
            Book,
            {
                "title": "A Second Book",
                "summary": "-",
                "isbn": "9780756411336",
                "author_id": sample_author.id,
            },
        )

        check = await guard.can_delete(Author, sample_author.id)

        assert check.allowed is False
        # Dependents are listed by title
        assert [book.id for book in check.blocking_records] == [second.id, sample_book.id]

    @pytest.mark.asyncio
    async def test_book_blocked_by_copies(self, guard, sample_book, sample_book_instance):
        check = await guard.can_delete(Book, sample_book.id)

        assert check.allowed is False
        assert [copy.id for copy in check.blocking_records] == [sample_book_instance.id]

    @pytest.mark.asyncio
    async def test_book_without_copies_allowed(self, guard, sample_book):
        check = await guard.can_delete(Book, sample_book.id)

        assert check.allowed is True

    @pytest.mark.asyncio
    async def test_copy_always_allowed(self, guard, sample_book_instance):
        check = await guard.can_delete(BookInstance, sample_book_instance.id)

        assert check.allowed is True


class TestDependentsOf:
    """Tests for dependents_of()."""

    @pytest.mark.asyncio
    async def test_leaf_has_no_dependents(self, guard, sample_book_instance):
        assert await guard.dependents_of(BookInstance, sample_book_instance.id) == []

    @pytest.mark.asyncio
    async def test_books_of_genre(self, guard, sample_book, sample_genre):
        books = await guard.dependents_of(Genre, sample_genre.id)

        assert [book.title for book in books] == ["The Name of the Wind"]


class TestEnsureCanDelete:
    """Tests for ensure_can_delete()."""

    @pytest.mark.asyncio
    async def test_raises_when_blocked(self, guard, sample_book, sample_author):
        with pytest.raises(IntegrityBlockedError) as exc_info:
            await guard.ensure_can_delete(Author, sample_author.id)

        assert exc_info.value.kind == "Author"
        assert len(exc_info.value.blocking_records) == 1

    @pytest.mark.asyncio
    async def test_passes_when_free(self, guard, sample_genre):
        await guard.ensure_can_delete(Genre, sample_genre.id)
