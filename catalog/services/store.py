"""
Entity Store

Persistence operations for every catalog model, addressed by model
class and id.

Unit-of-Work Scope
==================
Outside a transaction every call opens its own AsyncSession, commits
on success and closes it. Two calls never share a session, so
independent lookups can run concurrently:

    genre, books = await asyncio.gather(
        store.find_by_id(Genre, genre_id),
        store.find_all(Book, Book.genres.any(Genre.id == genre_id)),
    )

Inside `async with store.transaction() as tx:` every call on `tx` runs
in one session and one database transaction, committed when the block
exits (rolled back on error). Calls on a transactional store must be
awaited one at a time.

Relationship Fields
===================
insert() and update() take plain field mappings. Many-to-one references
are written through their foreign key column (author_id, book_id).
Collections (Book.genres) are written as lists of ids; the store loads
the targets inside the write session.

Errors: any SQLAlchemyError propagates unchanged.
"""

import logging
from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from typing import Any, TypeVar

from sqlalchemy import func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from catalog.database import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class EntityStore:
    """Async CRUD access to catalog records."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        session: AsyncSession | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._session = session

    # -------------------------------------------------------------------------
    # Session Handling
    # -------------------------------------------------------------------------
    @asynccontextmanager
    async def _unit(self) -> AsyncIterator[AsyncSession]:
        """Yield the bound session, or a fresh one that commits on exit."""
        if self._session is not None:
            yield self._session
            return

        async with self._session_factory() as session:
            async with session.begin():
                yield session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator["EntityStore"]:
        """
        Run several store calls atomically.

        Nested use joins the outer transaction.
        """
        if self._session is not None:
            yield self
            return

        async with self._session_factory() as session:
            async with session.begin():
                yield EntityStore(self._session_factory, session)

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------
    async def find_by_id(self, model: type[ModelT], record_id: int) -> ModelT | None:
        """Return the record with this id, or None."""
        async with self._unit() as session:
            return await session.get(model, record_id)

    async def find_all(
        self,
        model: type[ModelT],
        *criteria: Any,
        order_by: Any = None,
    ) -> list[ModelT]:
        """
        Return all records matching criteria.

        Args:
            model: Model class to query
            *criteria: SQLAlchemy WHERE clauses, ANDed together
            order_by: Column or list of columns; defaults to id (insertion order)
        """
        if order_by is None:
            order_by = [model.id]
        elif not isinstance(order_by, (list, tuple)):
            order_by = [order_by]

        stmt = select(model).where(*criteria).order_by(*order_by)
        async with self._unit() as session:
            result = await session.execute(stmt)
            return list(result.scalars().all())

    async def find_one(self, model: type[ModelT], *criteria: Any) -> ModelT | None:
        """Return the first record matching criteria (lowest id), or None."""
        stmt = select(model).where(*criteria).order_by(model.id).limit(1)
        async with self._unit() as session:
            result = await session.execute(stmt)
            return result.scalar_one_or_none()

    async def count_where(self, model: type[ModelT], *criteria: Any) -> int:
        """Count records matching criteria."""
        stmt = select(func.count()).select_from(model).where(*criteria)
        async with self._unit() as session:
            result = await session.execute(stmt)
            return result.scalar() or 0

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------
    async def insert(self, model: type[ModelT], fields: Mapping[str, Any]) -> ModelT:
        """
        Insert a new record and return it with its generated id.

        Raises:
            sqlalchemy.exc.IntegrityError: on constraint violations
        """
        async with self._unit() as session:
            record = model()
            await self._apply(session, record, fields)
            session.add(record)
            await session.flush()
            record = await self._reload(session, model, record.id)

        logger.debug(f"Inserted {record!r}")
        return record

    async def update(
        self,
        model: type[ModelT],
        record_id: int,
        fields: Mapping[str, Any],
    ) -> ModelT | None:
        """
        Overwrite the given fields of an existing record.

        Returns:
            The updated record, or None if the id does not exist
        """
        async with self._unit() as session:
            record = await session.get(model, record_id)
            if record is None:
                return None
            await self._apply(session, record, fields)
            await session.flush()
            record = await self._reload(session, model, record_id)

        logger.debug(f"Updated {record!r}")
        return record

    async def remove(self, model: type[ModelT], record_id: int) -> bool:
        """
        Delete a record.

        Association rows owned by the record (book_genres) are removed
        with it; referencing rows in other tables are not.

        Returns:
            True if a record was deleted, False if the id did not exist
        """
        async with self._unit() as session:
            record = await session.get(model, record_id)
            if record is None:
                return False
            await session.delete(record)
            await session.flush()

        logger.debug(f"Removed {model.__name__} {record_id}")
        return True

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------
    async def _apply(
        self,
        session: AsyncSession,
        record: Base,
        fields: Mapping[str, Any],
    ) -> None:
        """Copy fields onto record, resolving collection ids to objects."""
        relationships = inspect(type(record)).relationships

        for key, value in fields.items():
            prop = relationships.get(key)
            if prop is not None and prop.uselist:
                target = prop.mapper.class_
                ids = list(value or [])
                if ids:
                    result = await session.execute(
                        select(target).where(target.id.in_(ids))
                    )
                    value = list(result.scalars().all())
                else:
                    value = []
            setattr(record, key, value)

    async def _reload(self, session: AsyncSession, model: type[ModelT], record_id: int) -> ModelT:
        """Re-select a record so eager relationships reflect the write."""
        stmt = (
            select(model)
            .where(model.id == record_id)
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one()
