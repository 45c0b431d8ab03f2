"""Pytest fixtures for testing."""
import os
from collections.abc import AsyncGenerator

# Settings are read when the app modules are first imported, so the
# environment has to be in place before anything imports bookmark_api.api.
TEST_API_TOKEN = "test-api-token"
TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ["API_TOKEN"] = TEST_API_TOKEN
os.environ["DEV_MODE"] = "false"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from bookmark_api.models.base import Base  # noqa: E402
from bookmark_api.models.bookmark import Bookmark  # noqa: E402
from bookmark_fixtures import make_bookmarks_array  # noqa: E402


@pytest.fixture
def database_url() -> str:
    """Database the tests run against (in-memory SQLite unless TEST_DATABASE_URL is set)."""
    return TEST_DATABASE_URL


@pytest.fixture
async def async_engine(database_url: str) -> AsyncGenerator[AsyncEngine]:
    """Create an async engine with a fresh bookmarks schema for each test."""
    if database_url.startswith("sqlite"):
        # One shared connection, otherwise every checkout sees a new empty database
        engine = create_async_engine(database_url, echo=False, poolclass=StaticPool)
    else:
        engine = create_async_engine(database_url, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def db_session(async_engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Create an async session bound to the per-test engine."""
    session_factory = async_sessionmaker(
        bind=async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with session_factory() as session:
        yield session


@pytest.fixture
async def seed_bookmarks(db_session: AsyncSession) -> list[dict]:
    """Insert make_bookmarks_array() directly and return the raw rows."""
    rows = make_bookmarks_array()
    db_session.add_all(Bookmark(**row) for row in rows)
    await db_session.commit()
    return rows


@pytest.fixture
async def client(
    db_session: AsyncSession,
) -> AsyncGenerator[AsyncClient]:
    """Create an authenticated test client with database session override."""
    # Clear the settings cache so it picks up the test environment
    from bookmark_api.core.config import get_settings

    get_settings.cache_clear()

    from bookmark_api.api.main import app
    from bookmark_api.db.session import get_async_session

    async def override_get_async_session() -> AsyncGenerator[AsyncSession]:
        yield db_session

    app.dependency_overrides[get_async_session] = override_get_async_session

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers={"Authorization": f"Bearer {TEST_API_TOKEN}"},
    ) as test_client:
        yield test_client

    app.dependency_overrides.clear()
