"""
Database Configuration Module

This module sets up SQLAlchemy 2.0's asyncio extension for the catalog.

Connection Handle Pattern
=========================
There is no module-level engine. open_database(settings) builds a
Database handle holding:
- the AsyncEngine (connection pool)
- the async_sessionmaker used by the entity store

The FastAPI lifespan opens the handle at startup, stores it on
app.state.database and closes it at shutdown. Scripts and tests open
their own handle the same way.

Session Management Pattern
==========================
Sessions are short-lived: each store operation opens one, commits or
rolls back, and closes it. expire_on_commit=False keeps loaded
attributes readable after the session is gone, and relationships are
eagerly loaded (lazy="selectin") because lazy loading is not available
outside an async context.
"""

import logging

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from catalog.config import Settings

logger = logging.getLogger(__name__)


# =============================================================================
# Base Model Class
# =============================================================================
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    The Base class:
    1. Provides the SQLAlchemy mapper registry
    2. Enables table/model relationship tracking
    3. Is used by Alembic to discover models for migrations
    """
    pass


# =============================================================================
# Connection Handle
# =============================================================================
class Database:
    """
    Owns the engine and session factory for one process (or one test).

    Usage:
        database = open_database(settings)
        async with database.session_factory() as session:
            ...
        await database.close()
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine
        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            bind=engine,
            autoflush=False,
            expire_on_commit=False,
        )

    async def create_tables(self) -> None:
        """
        Create all database tables.

        WARNING: In production, use Alembic migrations instead!
        """
        # Models must be imported so they register with Base.metadata
        import catalog.models  # noqa: F401

        async with self.engine.begin() as connection:
            await connection.run_sync(Base.metadata.create_all)

    async def drop_tables(self) -> None:
        """
        Drop all database tables.

        DANGER: This deletes all data! Only use in development and tests.
        """
        import catalog.models  # noqa: F401

        async with self.engine.begin() as connection:
            await connection.run_sync(Base.metadata.drop_all)

    async def close(self) -> None:
        """Dispose of the connection pool."""
        await self.engine.dispose()
        logger.info("Database connections closed")


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores FOREIGN KEY clauses unless asked per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def open_database(settings: Settings) -> Database:
    """
    Create the async engine described by settings.

    Key parameters:
    - pool_size / max_overflow: connection pool bounds (server databases)
    - pool_pre_ping: test connection health before using
    - NullPool for SQLite: one connection per checkout, so concurrent
      readers never share a connection
    - echo: log all SQL statements

    Args:
        settings: Application settings

    Returns:
        Database handle; call close() when done
    """
    if settings.is_sqlite:
        engine = create_async_engine(
            settings.database_url,
            poolclass=NullPool,
            echo=settings.db_echo,
        )
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    else:
        engine = create_async_engine(
            settings.database_url,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=True,
            echo=settings.db_echo,
        )

    logger.info(f"Database engine created for {engine.url.render_as_string(hide_password=True)}")
    return Database(engine)
