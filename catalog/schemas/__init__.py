"""
Pydantic Schemas Package

This package contains Pydantic models for form validation and for the
records handed to views.

WHY Separate Schemas from SQLAlchemy Models?
============================================
1. Control exactly what data a page receives
2. Validation rules live next to the form they check
3. Database schema can evolve independently of the views

Schema Naming Convention:
- XxxForm: Rules applied to a submitted create/update form
- XxxResponse: Fields handed to a view for a stored record
"""

from catalog.schemas.author import AuthorForm, AuthorResponse
from catalog.schemas.book import BookForm, BookResponse
from catalog.schemas.book_instance import BookInstanceForm, BookInstanceResponse
from catalog.schemas.common import FieldErrorResponse
from catalog.schemas.genre import GenreForm, GenreResponse

__all__ = [
    # Author schemas
    "AuthorForm",
    "AuthorResponse",
    # Genre schemas
    "GenreForm",
    "GenreResponse",
    # Book schemas
    "BookForm",
    "BookResponse",
    # BookInstance schemas
    "BookInstanceForm",
    "BookInstanceResponse",
    # Shared
    "FieldErrorResponse",
]
