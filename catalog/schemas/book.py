"""
Book Pydantic Schemas

The most involved schemas, handling:
- References to an author and a set of genres (submitted as ids)
- ISBN validation
"""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from catalog.schemas.author import AuthorResponse
from catalog.schemas.common import require
from catalog.schemas.genre import GenreResponse


class BookForm(BaseModel):
    """
    Validation rules for the book form.

    Contains validation for:
    - required title, author, summary and ISBN
    - ISBN format (ISBN-10 or ISBN-13)
    - genre ids (checkboxes; zero or more)
    """

    title: str = Field(
        ...,
        max_length=500,
        description="Book title",
        examples=["The Name of the Wind"],
    )

    author: int = Field(
        ...,
        description="Id of the book's author",
        examples=[1],
    )

    summary: str = Field(
        ...,
        max_length=5000,
        description="Book summary",
    )

    isbn: str = Field(
        ...,
        max_length=20,
        description="ISBN-10 or ISBN-13",
        examples=["978-0756404741"],
    )

    genre: list[int] = Field(
        default_factory=list,
        description="Ids of the book's genres",
        examples=[[1, 3]],
    )

    @field_validator("title", mode="before")
    @classmethod
    def title_required(cls, v: Any) -> Any:
        return require(v, "Title must not be empty.")

    @field_validator("author", mode="before")
    @classmethod
    def author_required(cls, v: Any) -> Any:
        return require(v, "Author must not be empty.")

    @field_validator("summary", mode="before")
    @classmethod
    def summary_required(cls, v: Any) -> Any:
        return require(v, "Summary must not be empty.")

    @field_validator("isbn", mode="before")
    @classmethod
    def isbn_required(cls, v: Any) -> Any:
        return require(v, "ISBN must not be empty.")

    @field_validator("isbn")
    @classmethod
    def validate_isbn(cls, v: str) -> str:
        """
        Validate ISBN format.

        Accepts:
        - ISBN-10: 10 characters, 9 digits followed by a digit or X
        - ISBN-13: 13 digits

        ISBNs can include hyphens and spaces, which we strip for storage.
        """
        cleaned = re.sub(r"[-\s]", "", v)

        if len(cleaned) == 10:
            if not re.match(r"^\d{9}[\dX]$", cleaned):
                raise PydanticCustomError(
                    "isbn_invalid",
                    "Invalid ISBN-10 format. Must be 10 characters: "
                    "9 digits followed by a digit or 'X'",
                )
        elif len(cleaned) == 13:
            if not cleaned.isdigit():
                raise PydanticCustomError(
                    "isbn_invalid",
                    "Invalid ISBN-13 format. Must be exactly 13 digits",
                )
        else:
            raise PydanticCustomError(
                "isbn_invalid",
                "ISBN must be either 10 or 13 characters (excluding hyphens)",
            )

        return cleaned


class BookResponse(BaseModel):
    """
    Schema for book records handed to a view.

    The nested data uses AuthorResponse and GenreResponse schemas,
    so a page gets full information without additional lookups.
    """

    id: int = Field(..., description="Unique identifier")
    title: str
    summary: str
    isbn: str
    author: AuthorResponse
    genres: list[GenreResponse] = Field(default=[])
    url: str

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "The Name of the Wind",
                "summary": "I have stolen princesses back from sleeping barrow kings...",
                "isbn": "9780756404741",
                "author": {
                    "id": 1,
                    "first_name": "Patrick",
                    "family_name": "Rothfuss",
                    "date_of_birth": "1973-06-06",
                    "date_of_death": None,
                    "full_name": "Rothfuss, Patrick",
                    "lifespan": "1973-06-06 - ",
                    "url": "/catalog/author/1",
                },
                "genres": [{"id": 1, "name": "Fantasy", "url": "/catalog/genre/1"}],
                "url": "/catalog/book/1",
            }
        },
    )
