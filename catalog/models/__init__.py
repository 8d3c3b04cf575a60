"""
SQLAlchemy Models Package

This package contains all database models for the catalog.

Model Relationships:
- Book -> Author: Many-to-One (a book has one author)
- Book <-> Genre: Many-to-Many (through the book_genres table)
- BookInstance -> Book: Many-to-One (a book has many copies)

Import all models here to:
1. Make them available as: from catalog.models import Book, Author, Genre
2. Ensure Alembic and create_tables() discover them
"""

# The order matters for SQLAlchemy to resolve relationships
from catalog.models.author import Author
from catalog.models.genre import Genre
from catalog.models.book import Book, book_genres
from catalog.models.book_instance import BookInstance, BookInstanceStatus

__all__ = [
    "Author",
    "Genre",
    "Book",
    "book_genres",
    "BookInstance",
    "BookInstanceStatus",
]
