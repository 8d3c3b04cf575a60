"""
Author Model

Represents an author in the catalog.

SQLAlchemy 2.0 Features Used:
- mapped_column(): New way to define columns with full type support
- Mapped[]: Type hint wrapper for SQLAlchemy columns
"""

from datetime import date

from sqlalchemy import Date, String
from sqlalchemy.orm import Mapped, mapped_column

from catalog.database import Base
from catalog.utils.dates import input_format


class Author(Base):
    """
    Author model representing writers in the catalog.

    Table: authors

    Books reference authors through books.author_id; there is no
    relationship attribute here; dependents are queried explicitly
    by the integrity guard.

    Example:
        author = Author(
            first_name="Patrick",
            family_name="Rothfuss",
            date_of_birth=date(1973, 6, 6),
        )
    """

    __tablename__ = "authors"

    # -------------------------------------------------------------------------
    # Primary Key
    # -------------------------------------------------------------------------
    id: Mapped[int] = mapped_column(primary_key=True)

    # -------------------------------------------------------------------------
    # Basic Fields
    # -------------------------------------------------------------------------
    # Escaped text: a 100-character name may store up to five
    # characters per submitted character
    first_name: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
        comment="Author's first name"
    )

    family_name: Mapped[str] = mapped_column(
        String(500),
        index=True,
        nullable=False,
        comment="Author's family name"
    )

    # Date (not DateTime) because we only care about the day
    date_of_birth: Mapped[date | None] = mapped_column(
        Date,
        nullable=True,
        comment="Date of birth"
    )

    date_of_death: Mapped[date | None] = mapped_column(
        Date,
        nullable=True,
        comment="Date of death"
    )

    # -------------------------------------------------------------------------
    # Derived Values
    # -------------------------------------------------------------------------
    @property
    def full_name(self) -> str:
        """Name as shown in lists: 'family_name, first_name'."""
        return f"{self.family_name}, {self.first_name}"

    @property
    def name(self) -> str:
        return self.full_name

    @property
    def lifespan(self) -> str:
        """Birth and death dates joined by ' - ', either side may be blank."""
        return f"{input_format(self.date_of_birth)} - {input_format(self.date_of_death)}"

    @property
    def date_of_birth_input_format(self) -> str:
        return input_format(self.date_of_birth)

    @property
    def date_of_death_input_format(self) -> str:
        return input_format(self.date_of_death)

    @property
    def url(self) -> str:
        return f"/catalog/author/{self.id}"

    def __repr__(self) -> str:
        return f"Author(id={self.id}, name='{self.full_name}')"
