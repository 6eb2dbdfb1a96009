"""
Database configuration and session management
Flow: Settings -> Engine (one per process) -> SessionFactory -> get_db dependency

The engine is created on first use and cached, so every request, script and
reload in the same process shares a single connection pool.
"""

from contextlib import asynccontextmanager
from functools import lru_cache
from typing import Any, AsyncGenerator, AsyncIterator

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from gallery.config.settings import get_settings

# Create declarative base
Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str, **overrides: Any) -> AsyncEngine:
    """Create an async engine with the pool options that suit the backend."""
    options: dict[str, Any] = {
        "echo": get_settings().DEBUG,
        "future": True,
    }
    if not url.startswith("sqlite"):
        options.update(pool_size=10, max_overflow=20, pool_pre_ping=True)
    options.update(overrides)

    engine = create_async_engine(url, **options)
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


@lru_cache()
def get_engine() -> AsyncEngine:
    """Get the process-wide engine, creating it on first call."""
    return build_engine(get_database_url())


@lru_cache()
def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get the process-wide session factory bound to the shared engine."""
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


async def dispose_engine() -> None:
    """Close pooled connections and forget the cached engine."""
    if get_engine.cache_info().currsize:
        await get_engine().dispose()
    get_session_factory.cache_clear()
    get_engine.cache_clear()


def get_database_url() -> str:
    """Get database URL for scripts."""
    return get_settings().SQLALCHEMY_DATABASE_URL


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency to get database session."""
    async with get_session_factory()() as session:
        try:
            yield session
        finally:
            await session.close()


@asynccontextmanager
async def request_session(request: Request) -> AsyncIterator[AsyncSession]:
    """
    Open a session inside a dependency that only sometimes needs one.

    Goes through get_db (or its override on the app), so the engine is only
    built when a caller actually asks for a session.
    """
    provider = request.app.dependency_overrides.get(get_db, get_db)
    async with asynccontextmanager(provider)() as session:
        yield session
