"""
Genre Lifecycle

Genres are unique by name. Creating a genre whose name already exists
resolves to the existing record instead of inserting a duplicate:

1. look the name up (fast path)
2. insert if absent
3. if a concurrent request inserted the same name first, the UNIQUE
   constraint raises IntegrityError; re-read and return the winner

Renaming a genre onto another genre's name is a validation error.
"""

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy.exc import IntegrityError

from catalog.models import Genre
from catalog.services.lifecycle import Persisted, RecordLifecycle
from catalog.services.validation import GENRE_RULES, FieldError

logger = logging.getLogger(__name__)


class GenreLifecycle(RecordLifecycle[Genre]):
    model = Genre
    rules = GENRE_RULES
    order_by = [Genre.name]

    async def check_consistency(
        self,
        fields: Mapping[str, Any],
        record_id: int | None = None,
    ) -> list[FieldError]:
        if record_id is None:
            # Creates resolve duplicates in _insert()
            return []

        clash = await self.store.find_one(
            Genre, Genre.name == fields["name"], Genre.id != record_id
        )
        if clash is not None:
            return [FieldError("name", "Genre with this name already exists")]
        return []

    async def _insert(self, fields: Mapping[str, Any]) -> Persisted[Genre]:
        name = fields["name"]

        existing = await self.store.find_one(Genre, Genre.name == name)
        if existing is not None:
            logger.info(f"Genre '{name}' already exists as {existing!r}")
            return Persisted(record=existing, created=False)

        try:
            record = await self.store.insert(Genre, {"name": name})
        except IntegrityError:
            existing = await self.store.find_one(Genre, Genre.name == name)
            if existing is None:
                raise
            logger.info(f"Genre '{name}' was created concurrently as {existing!r}")
            return Persisted(record=existing, created=False)

        logger.info(f"Created {record!r}")
        return Persisted(record=record)
