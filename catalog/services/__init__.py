"""
Services Package

Business logic kept separate from HTTP handling (routers), reusable
from scripts and easy to test in isolation.

Current services:
- store.py: EntityStore, async CRUD over the SQLAlchemy models
- validation.py: sanitization and per-entity form rules
- integrity.py: delete-time dependency checks
- lifecycle.py: shared create/read/update/delete flow and outcomes
- authors.py, genres.py, books.py, book_instances.py: per-entity controllers
- summary.py: record counts for the home page
- presentation.py: outcomes -> render/redirect/error responses
"""
