"""
BookInstance Model

A physical copy of a book that can be borrowed.
"""

from datetime import date
from enum import StrEnum
from typing import TYPE_CHECKING

from sqlalchemy import Date, Enum, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.database import Base
from catalog.utils.dates import input_format, long_format

if TYPE_CHECKING:
    from catalog.models.book import Book


class BookInstanceStatus(StrEnum):
    """Availability of a single copy."""

    AVAILABLE = "Available"
    MAINTENANCE = "Maintenance"
    LOANED = "Loaned"
    RESERVED = "Reserved"


class BookInstance(Base):
    """
    BookInstance model representing one copy of a Book.

    Table: book_instances

    Relationships:
    - book: Many-to-One (book_instances.book_id -> books.id)

    Defaults:
    - status: Maintenance
    - due_back: the day the record is created
    """

    __tablename__ = "book_instances"

    id: Mapped[int] = mapped_column(primary_key=True)

    book_id: Mapped[int] = mapped_column(
        ForeignKey("books.id"),
        index=True,
        nullable=False,
        comment="The book this copy belongs to"
    )

    # Escaped form of an imprint of up to 255 characters
    imprint: Mapped[str] = mapped_column(
        String(1275),
        nullable=False,
        comment="Publisher and edition details"
    )

    # values_callable stores the human-readable values ("Available"),
    # not the member names ("AVAILABLE")
    status: Mapped[BookInstanceStatus] = mapped_column(
        Enum(
            BookInstanceStatus,
            name="book_instance_status",
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        nullable=False,
        default=BookInstanceStatus.MAINTENANCE,
        comment="Availability of the copy"
    )

    due_back: Mapped[date] = mapped_column(
        Date,
        nullable=False,
        default=date.today,
        comment="When the copy is expected back"
    )

    book: Mapped["Book"] = relationship(
        "Book",
        lazy="selectin",
    )

    @property
    def due_back_formatted(self) -> str:
        return long_format(self.due_back)

    @property
    def due_back_input_format(self) -> str:
        return input_format(self.due_back)

    @property
    def url(self) -> str:
        return f"/catalog/bookinstance/{self.id}"

    def __repr__(self) -> str:
        return f"BookInstance(id={self.id}, book_id={self.book_id}, status='{self.status}')"
