"""
Test Suite for the Local Library catalog

Test Organization:
- conftest.py: Shared fixtures (temporary database, client, sample data)
- test_validation.py, test_models.py, test_presentation.py: no database
- test_store.py, test_integrity.py, test_lifecycle.py: services (async)
- test_authors.py, test_genres.py, test_books.py,
  test_book_instances.py, test_catalog.py: HTTP routes

Running Tests:
    # Run all tests
    pytest

    # Run specific file
    pytest tests/test_genres.py

    # Run with verbose output
    pytest -v
"""
