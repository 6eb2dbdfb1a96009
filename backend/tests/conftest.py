"""
Pytest fixtures for the gallery backend.

Every test gets its own SQLite database file (aiosqlite) with the full schema,
and API tests talk to the app through an in-process httpx client whose
get_db dependency is bound to that database.
"""

import os
import tempfile
from collections.abc import AsyncGenerator

import pytest

# Configure settings before any gallery module is imported
_default_db_dir = tempfile.mkdtemp(prefix="gallery-tests-")
os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{_default_db_dir}/default.db")
os.environ.setdefault("CATALOG_SOURCE", "database")
os.environ.setdefault("LOG_FORMAT", "console")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402

from gallery.catalog.registry import COMPONENT_REGISTRY  # noqa: E402
from gallery.core.database import Base, build_engine, get_db  # noqa: E402
from gallery.main import app  # noqa: E402
from gallery.models import User  # noqa: E402
from gallery.scripts.seed_database import seed_components  # noqa: E402

ADMIN_ID = "admin-1"
MEMBER_ID = "member-1"


@pytest.fixture
async def engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """Fresh database with all tables created."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path}/gallery.db", poolclass=NullPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
async def seeded(session_factory) -> int:
    """Database populated from the component registry."""
    async with session_factory() as session:
        return await seed_components(session, COMPONENT_REGISTRY)


@pytest.fixture
async def users(session_factory) -> dict:
    """One admin and one regular user."""
    async with session_factory() as session:
        session.add_all([
            User(id=ADMIN_ID, email="admin@example.com", name="Admin", role="admin"),
            User(id=MEMBER_ID, email="member@example.com", name="Member", role="user"),
        ])
        await session.commit()
    return {"admin": ADMIN_ID, "member": MEMBER_ID}


@pytest.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def admin_headers(users) -> dict:
    return {"X-User-Id": users["admin"]}


@pytest.fixture
def member_headers(users) -> dict:
    return {"X-User-Id": users["member"]}
