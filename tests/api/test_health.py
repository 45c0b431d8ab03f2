"""Tests for the health check endpoint."""
from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock

from httpx import AsyncClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from bookmark_api.api.dependencies import get_async_session


async def test_health_endpoint_returns_healthy_status(client: AsyncClient) -> None:
    """The health endpoint reports a reachable, empty bookmarks table."""
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "database": "healthy", "bookmarks": 0}


async def test_health_endpoint_counts_bookmarks(
    client: AsyncClient,
    seed_bookmarks: list[dict],
) -> None:
    """The bookmark count reflects the table contents."""
    response = await client.get("/health")
    assert response.json()["bookmarks"] == len(seed_bookmarks)


async def test_health_endpoint_needs_no_token(client: AsyncClient) -> None:
    """Health is reachable without the bearer token."""
    response = await client.get("/health", headers={"Authorization": ""})
    assert response.status_code == 200


async def test_health_endpoint_reports_degraded_database(client: AsyncClient) -> None:
    """A failing database is reported as degraded instead of raising."""
    from bookmark_api.api.main import app

    broken = AsyncMock(spec=AsyncSession)
    broken.scalar.side_effect = OperationalError("SELECT count(*)", {}, Exception("down"))

    async def override_get_async_session() -> AsyncGenerator[AsyncSession]:
        yield broken

    app.dependency_overrides[get_async_session] = override_get_async_session

    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "degraded", "database": "unhealthy", "bookmarks": None}
