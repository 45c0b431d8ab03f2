"""Health check endpoint (unauthenticated)."""
import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bookmark_api.api.dependencies import get_async_session
from bookmark_api.models.bookmark import Bookmark


logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response. `bookmarks` is None when the table is unreachable."""

    status: str
    database: str
    bookmarks: int | None = None


@router.get("/health", response_model=HealthResponse)
async def health_check(
    db: AsyncSession = Depends(get_async_session),
) -> HealthResponse:
    """Check that the bookmarks table can be queried."""
    try:
        count = await db.scalar(select(func.count()).select_from(Bookmark))
    except SQLAlchemyError:
        logger.exception("Database health check failed")
        return HealthResponse(status="degraded", database="unhealthy")

    return HealthResponse(status="healthy", database="healthy", bookmarks=count)
