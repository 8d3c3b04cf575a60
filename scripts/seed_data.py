#!/usr/bin/env python3
"""
Database Seed Script

Populates the catalog with sample authors, genres, books and copies
for development.

USAGE:
    # From the project root with the venv activated
    python scripts/seed_data.py

This script:
1. Opens the database from the application settings
2. Recreates the tables (optional, destroys existing data)
3. Inserts the sample records through the entity store
"""

import asyncio
import sys
from datetime import date
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from catalog.config import get_settings
from catalog.database import open_database
from catalog.models import Author, Book, BookInstance, BookInstanceStatus, Genre
from catalog.services.store import EntityStore

AUTHORS = [
    {"first_name": "Patrick", "family_name": "Rothfuss", "date_of_birth": date(1973, 6, 6)},
    {"first_name": "Ben", "family_name": "Bova", "date_of_birth": date(1932, 11, 8)},
    {"first_name": "Isaac", "family_name": "Asimov",
     "date_of_birth": date(1920, 1, 2), "date_of_death": date(1992, 4, 6)},
    {"first_name": "Bob", "family_name": "Billings"},
    {"first_name": "Jim", "family_name": "Jones", "date_of_birth": date(1971, 12, 16)},
]

GENRES = ["Fantasy", "Science Fiction", "French Poetry"]

# (title, summary, isbn, author family name, genre names)
BOOKS = [
    (
        "The Name of the Wind (The Kingkiller Chronicle, #1)",
        "I have stolen princesses back from sleeping barrow kings. I burned down "
        "the town of Trebon. I have spent the night with Felurian and left with "
        "both my sanity and my life.",
        "9781473211896",
        "Rothfuss",
        ["Fantasy"],
    ),
    (
        "The Wise Man's Fear (The Kingkiller Chronicle, #2)",
        "Picking up the tale of Kvothe Kingkiller once again, we follow him into "
        "exile, into political intrigue, courtship, adventure, love and magic.",
        "9788401352836",
        "Rothfuss",
        ["Fantasy"],
    ),
    (
        "The Slow Regard of Silent Things (Kingkiller Chronicle)",
        "Deep below the University, there is a dark place. Few people know of it: "
        "a broken web of ancient passageways and abandoned rooms.",
        "9780756411336",
        "Rothfuss",
        ["Fantasy"],
    ),
    (
        "Apes and Angels",
        "Humankind headed out to the stars not for conquest, nor exploration, "
        "nor even for curiosity.",
        "9780765379528",
        "Bova",
        ["Science Fiction"],
    ),
    (
        "Death Wave",
        "In Ben Bova's previous novel New Earth, Jordan Kell led the first human "
        "mission beyond the solar system.",
        "9780765379504",
        "Bova",
        ["Science Fiction"],
    ),
    ("Test Book 1", "Summary of test book 1", "ISBN111111", "Billings", ["Fantasy", "Science Fiction"]),
    ("Test Book 2", "Summary of test book 2", "ISBN222222", "Billings", []),
]

# (book title, imprint, status, due back)
BOOK_INSTANCES = [
    ("The Name of the Wind (The Kingkiller Chronicle, #1)", "London Gollancz, 2014.",
     BookInstanceStatus.AVAILABLE, None),
    ("The Wise Man's Fear (The Kingkiller Chronicle, #2)", "Gollancz, 2011.",
     BookInstanceStatus.LOANED, date(2026, 11, 1)),
    ("The Slow Regard of Silent Things (Kingkiller Chronicle)", "Gollancz, 2015.",
     BookInstanceStatus.AVAILABLE, None),
    ("Apes and Angels", "New York Tom Doherty Associates, 2016.",
     BookInstanceStatus.AVAILABLE, None),
    ("Apes and Angels", "New York Tom Doherty Associates, 2016.",
     BookInstanceStatus.AVAILABLE, None),
    ("Death Wave", "New York, NY Tom Doherty Associates, LLC, 2015.",
     BookInstanceStatus.AVAILABLE, None),
    ("Death Wave", "New York, NY Tom Doherty Associates, LLC, 2015.",
     BookInstanceStatus.MAINTENANCE, None),
    ("Death Wave", "New York, NY Tom Doherty Associates, LLC, 2015.",
     BookInstanceStatus.LOANED, date(2026, 12, 15)),
    ("Test Book 1", "Imprint XXX2", BookInstanceStatus.AVAILABLE, None),
    ("Test Book 2", "Imprint XXX3", BookInstanceStatus.RESERVED, None),
]


async def create_authors(store: EntityStore) -> dict[str, Author]:
    """Create sample authors, keyed by family name."""
    print("Creating authors...")
    authors = {}
    for fields in AUTHORS:
        author = await store.insert(Author, fields)
        authors[author.family_name] = author
    print(f"Created {len(authors)} authors.")
    return authors


async def create_genres(store: EntityStore) -> dict[str, Genre]:
    print("Creating genres...")
    genres = {}
    for name in GENRES:
        genres[name] = await store.insert(Genre, {"name": name})
    print(f"Created {len(genres)} genres.")
    return genres


async def create_books(
    store: EntityStore,
    authors: dict[str, Author],
    genres: dict[str, Genre],
) -> dict[str, Book]:
    print("Creating books...")
    books = {}
    for title, summary, isbn, family_name, genre_names in BOOKS:
        books[title] = await store.insert(
            Book,
            {
                "title": title,
                "summary": summary,
                "isbn": isbn,
                "author_id": authors[family_name].id,
                "genres": [genres[name].id for name in genre_names],
            },
        )
    print(f"Created {len(books)} books.")
    return books


async def create_book_instances(
    store: EntityStore,
    books: dict[str, Book],
) -> list[BookInstance]:
    print("Creating book instances...")
    instances = []
    for title, imprint, status, due_back in BOOK_INSTANCES:
        instances.append(
            await store.insert(
                BookInstance,
                {
                    "book_id": books[title].id,
                    "imprint": imprint,
                    "status": status,
                    "due_back": due_back or date.today(),
                },
            )
        )
    print(f"Created {len(instances)} book instances.")
    return instances


async def seed_database(clear_existing: bool = True) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, drops and recreates all tables first.
    """
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    settings = get_settings()
    database = open_database(settings)

    try:
        if clear_existing:
            print("Clearing existing data...")
            await database.drop_tables()
        await database.create_tables()

        store = EntityStore(database.session_factory)
        async with store.transaction() as tx:
            authors = await create_authors(tx)
            genres = await create_genres(tx)
            books = await create_books(tx, authors, genres)
            instances = await create_book_instances(tx, books)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print("\nSummary:")
        print(f"  - Authors: {len(authors)}")
        print(f"  - Genres: {len(genres)}")
        print(f"  - Books: {len(books)}")
        print(f"  - Book instances: {len(instances)}")
        print(f"\nThe catalog is at http://localhost:{settings.port}/catalog/")

    except Exception as e:
        print(f"Error seeding database: {e}")
        raise
    finally:
        await database.close()


if __name__ == "__main__":
    asyncio.run(seed_database())
