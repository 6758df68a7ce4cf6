"""
Restaurant Ordering API: Database Session Management
=======================================================

What:  Async SQLAlchemy engine/session factories and the per-request
       session dependency.
Why:   Centralizes all database connection logic in one place.
How:   create_app() builds an engine and session factory (or receives them
       from the caller) and stores the factory on app.state. The
       get_db_session dependency pulls it from there, so no handler ever
       reaches for a module-level pool.
Who:   Used by route handlers via FastAPI's dependency injection system.
When:  Engine is created once per app; sessions are created per request.

Connection Pooling Strategy (PostgreSQL):
    pool_size / max_overflow come from Settings.
    pool_pre_ping validates connections before use.
    pool_recycle=3600 recycles connections every hour.
    SQLite (tests, local runs) ignores pool sizing.
"""

from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.config import Settings


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Every model registers with this metadata, which Alembic reads for
    autogeneration and tests use for create_all().
    """
    pass


def create_engine_from_settings(config: Settings) -> AsyncEngine:
    """
    Build the async engine described by `config`.

    Pool sizing arguments are only passed for server databases; the SQLite
    dialect uses its own pool classes and rejects them.
    """
    options = {
        "pool_pre_ping": config.db_pool_pre_ping,
        "echo": config.log_level == "DEBUG",
    }
    if not config.is_sqlite:
        options.update(
            pool_size=config.db_pool_size,
            max_overflow=config.db_max_overflow,
            pool_recycle=3600,
        )
    return create_async_engine(config.database_url, **options)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False: inserted rows keep their attributes (e.g. id)
    # after the service commits
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Takes the session factory the app was built with
        2. Yields a fresh session to the route handler
        3. On success: commits anything still pending
        4. On error: rolls back and re-raises for the global error handlers
        5. Always: the context manager closes the session

    Example usage in a route:
        @router.get("/api/menus")
        async def list_menus(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    factory: async_sessionmaker[AsyncSession] = request.app.state.session_factory
    async with factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
