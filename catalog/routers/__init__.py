"""
Catalog Routers Package

WHY Routers?
============
1. Organization: Group related endpoints together
2. Modularity: Each router can have its own tags and responses
3. Maintainability: Easy to find and modify endpoint code

Router Structure (all under /catalog):
- catalog.py: / (home page counts)
- authors.py: /authors, /author/*
- genres.py: /genres, /genre/*
- books.py: /books, /book/*
- book_instances.py: /bookinstances, /bookinstance/*

Each router is imported and registered in main.py.
"""

from catalog.routers.authors import router as authors_router
from catalog.routers.book_instances import router as book_instances_router
from catalog.routers.books import router as books_router
from catalog.routers.catalog import router as catalog_router
from catalog.routers.genres import router as genres_router

__all__ = [
    "catalog_router",
    "authors_router",
    "genres_router",
    "books_router",
    "book_instances_router",
]
