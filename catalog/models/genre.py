"""
Genre Model

Represents a book genre/category in the catalog.

A book can belong to multiple genres (e.g., "Fantasy" and "Adventure").
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from catalog.database import Base


class Genre(Base):
    """
    Genre model representing book categories.

    Table: genres

    Indexes:
    - Primary key on id (automatic)
    - name: Unique index; backstop for the find-or-create-by-name flow
      when two requests race past the existence check

    Example:
        genre = Genre(name="Fantasy")
    """

    __tablename__ = "genres"

    id: Mapped[int] = mapped_column(primary_key=True)

    # unique=True creates a UNIQUE constraint in the database.
    # Sized for the escaped form of a 100-character name.
    name: Mapped[str] = mapped_column(
        String(500),
        unique=True,
        index=True,
        nullable=False,
        comment="Genre name (e.g., 'Fantasy', 'Poetry')"
    )

    @property
    def url(self) -> str:
        return f"/catalog/genre/{self.id}"

    def __repr__(self) -> str:
        return f"Genre(id={self.id}, name='{self.name}')"
