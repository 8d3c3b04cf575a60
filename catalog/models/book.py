"""
Book Model

Represents a book (the title, not a physical copy) in the catalog.

This file also contains the association table for the many-to-many
relationship between books and genres:
- book_genres: Links books to genres

WHY no ondelete="CASCADE"?
==========================
Deleting an author, genre or book must never silently remove the
records that point at it. The foreign keys are plain (NO ACTION), so
the database refuses a delete that would orphan a reference; the
integrity guard checks first and reports the blocking records.
"""

from typing import TYPE_CHECKING

from sqlalchemy import Column, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.database import Base

if TYPE_CHECKING:
    from catalog.models.author import Author
    from catalog.models.genre import Genre


# =============================================================================
# Association Tables
# =============================================================================
book_genres = Table(
    "book_genres",
    Base.metadata,
    Column(
        "book_id",
        Integer,
        ForeignKey("books.id"),
        primary_key=True,
    ),
    Column(
        "genre_id",
        Integer,
        ForeignKey("genres.id"),
        primary_key=True,
    ),
    comment="Association table linking books to their genres",
)


class Book(Base):
    """
    Book model representing titles held by the library.

    Table: books

    Fields:
    - title: Book title (required)
    - summary: Short description (required)
    - isbn: International Standard Book Number, stored without hyphens

    Relationships:
    - author: Many-to-One (books.author_id -> authors.id)
    - genres: Many-to-Many through book_genres

    Both relationships use lazy="selectin" so a Book returned by the
    entity store is fully usable after its session has closed.

    Example:
        book = Book(
            title="The Name of the Wind",
            summary="The first day of Kvothe's story...",
            isbn="9780756404741",
            author_id=author.id,
        )
    """

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True)

    # Escaped form of a title of up to 500 characters
    title: Mapped[str] = mapped_column(
        String(2500),
        index=True,
        nullable=False,
        comment="Book title"
    )

    summary: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Book summary"
    )

    isbn: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        comment="International Standard Book Number"
    )

    author_id: Mapped[int] = mapped_column(
        ForeignKey("authors.id"),
        index=True,
        nullable=False,
        comment="Author who wrote the book"
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    author: Mapped["Author"] = relationship(
        "Author",
        lazy="selectin",
    )

    genres: Mapped[list["Genre"]] = relationship(
        "Genre",
        secondary=book_genres,
        lazy="selectin",
        order_by="Genre.name",
    )

    @property
    def url(self) -> str:
        return f"/catalog/book/{self.id}"

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}', isbn='{self.isbn}')"
