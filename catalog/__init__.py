"""
Local Library Catalog Package

This is the main application package for the Local Library catalog.
It manages authors, genres, books and book copies (instances).

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: Async SQLAlchemy engine and session factory handle
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection functions
- exceptions.py: Catalog error taxonomy
- models/: SQLAlchemy ORM models
- schemas/: Pydantic form and response schemas
- routers/: Catalog route handlers
- services/: Record lifecycle, validation, integrity and presentation
- utils/: Helper functions
"""

__version__ = "0.1.0"
