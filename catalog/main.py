"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app(settings) returns a configured app
   - Tests build their own app against a temporary database
   - The module-level `app` uses the cached process settings

2. Lifespan Events
   - startup: open the Database handle (and optionally create tables)
   - shutdown: dispose of the connection pool

3. Exception Handlers
   - NotFoundError -> 404
   - IntegrityBlockedError -> 409
   - Database errors -> 500, logged with details hidden from users
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import Response
from sqlalchemy.exc import SQLAlchemyError

from catalog import __version__
from catalog.config import Settings, get_settings
from catalog.database import open_database
from catalog.exceptions import IntegrityBlockedError, NotFoundError
from catalog.routers import (
    authors_router,
    book_instances_router,
    books_router,
    catalog_router,
    genres_router,
)
from catalog.services.presentation import ErrorResult, redirect, to_response

logger = logging.getLogger(__name__)


# =============================================================================
# Logging Configuration
# =============================================================================
def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield: Runs on startup
    Code after yield: Runs on shutdown

    The Database handle lives on app.state.database for the lifetime of
    the application; request dependencies read it from there.
    """
    settings: Settings = app.state.settings

    # ----- STARTUP -----
    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Environment: {settings.environment}, debug mode: {settings.debug}")

    database = open_database(settings)
    if settings.create_tables:
        await database.create_tables()
        logger.info("Database tables created")
    app.state.database = database

    yield  # Application runs here

    # ----- SHUTDOWN -----
    logger.info(f"Shutting down {settings.app_name}...")
    await database.close()


# =============================================================================
# Application Factory
# =============================================================================
def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration to use; defaults to the cached process
                  settings from get_settings()

    Returns:
        Configured FastAPI application instance
    """
    if settings is None:
        settings = get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="""
## Local Library

A catalog of a small library's holdings.

### Records
- **Authors**: people who wrote the books
- **Genres**: categories books are filed under
- **Books**: titles, with one author and any number of genres
- **Book instances**: the physical copies that can be borrowed

Records cannot be deleted while other records still reference them.
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> Response:
        return to_response(ErrorResult(status.HTTP_404_NOT_FOUND, str(exc)))

    @app.exception_handler(IntegrityBlockedError)
    async def integrity_blocked_handler(
        request: Request,
        exc: IntegrityBlockedError,
    ) -> Response:
        logger.warning(str(exc))
        return to_response(ErrorResult(status.HTTP_409_CONFLICT, str(exc)))

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request,
        exc: SQLAlchemyError,
    ) -> Response:
        """
        Handle SQLAlchemy database errors.

        Logs the actual error for debugging while hiding details from users.
        """
        logger.error(f"Database error: {exc}")
        return to_response(
            ErrorResult(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "A database error occurred. Please try again later.",
            )
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> Response:
        """
        Catch-all exception handler.

        In production, hide internal errors from users.
        In debug mode, show more details.
        """
        logger.error(f"Unhandled error: {exc}", exc_info=True)
        message = str(exc) if settings.debug else "An internal error occurred."
        return to_response(ErrorResult(status.HTTP_500_INTERNAL_SERVER_ERROR, message))

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    app.include_router(catalog_router)
    app.include_router(authors_router)
    app.include_router(genres_router)
    app.include_router(books_router)
    app.include_router(book_instances_router)

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check if the application is running.",
    )
    async def health_check() -> dict:
        return {
            "status": "healthy",
            "app": settings.app_name,
            "version": __version__,
            "environment": settings.environment,
        }

    @app.get(
        "/",
        tags=["Root"],
        summary="Site root",
        description="Redirects to the catalog home page.",
    )
    async def root() -> Response:
        return redirect("/catalog/")

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn catalog.main:app

app = create_app()


# =============================================================================
# Development Server
# =============================================================================
# In production, use: uvicorn catalog.main:app --host 0.0.0.0 --port 8001

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "catalog.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
