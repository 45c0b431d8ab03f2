"""Service layer for bookmark CRUD operations."""
import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bookmark_api.models.bookmark import Bookmark
from bookmark_api.schemas.validators import BOOKMARK_FIELDS
from bookmark_api.services.exceptions import StoreError

logger = logging.getLogger(__name__)

# Range of the 4-byte integer primary key. Ids outside it cannot exist.
MIN_BOOKMARK_ID = 1
MAX_BOOKMARK_ID = 2_147_483_647


@contextmanager
def _store_errors(operation: str) -> Iterator[None]:
    """Re-raise database failures as StoreError."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.error("bookmark_store_failed", extra={"operation": operation, "error": str(e)})
        raise StoreError(operation) from e


def _is_storable_id(bookmark_id: int) -> bool:
    return MIN_BOOKMARK_ID <= bookmark_id <= MAX_BOOKMARK_ID


def _writable(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Keep only the bookmark columns a client may set."""
    return {key: value for key, value in fields.items() if key in BOOKMARK_FIELDS}


async def list_bookmarks(db: AsyncSession) -> list[Bookmark]:
    """Get all bookmarks in primary key order. An empty table gives an empty list."""
    with _store_errors("list"):
        result = await db.execute(select(Bookmark).order_by(Bookmark.id))
        return list(result.scalars().all())


async def get_bookmark(db: AsyncSession, bookmark_id: int) -> Bookmark | None:
    """Get a bookmark by ID. Returns None if not found."""
    if not _is_storable_id(bookmark_id):
        return None
    with _store_errors("get"):
        result = await db.execute(select(Bookmark).where(Bookmark.id == bookmark_id))
        return result.scalar_one_or_none()


async def create_bookmark(db: AsyncSession, fields: Mapping[str, Any]) -> Bookmark:
    """
    Insert a bookmark and return it with its assigned ID.

    Fields are stored verbatim; callers validate and coerce beforehand.

    Note: Does not commit. Caller (session generator) handles commit at request end.

    Raises:
        StoreError: On constraint violations or connectivity failures.
    """
    bookmark = Bookmark(**_writable(fields))
    with _store_errors("create"):
        db.add(bookmark)
        await db.flush()
        await db.refresh(bookmark)
    return bookmark


async def update_bookmark(
    db: AsyncSession,
    bookmark_id: int,
    fields: Mapping[str, Any],
) -> int:
    """
    Update only the supplied fields of a bookmark.

    Returns the number of rows affected; 0 means the bookmark does not exist.

    Note: Does not commit. Caller (session generator) handles commit at request end.
    """
    values = _writable(fields)
    if not values:
        raise ValueError("update_bookmark requires at least one bookmark field")
    if not _is_storable_id(bookmark_id):
        return 0

    with _store_errors("update"):
        result = await db.execute(
            update(Bookmark)
            .where(Bookmark.id == bookmark_id)
            .values(**values)
            .execution_options(synchronize_session="fetch"),
        )
    return result.rowcount


async def delete_bookmark(db: AsyncSession, bookmark_id: int) -> int:
    """
    Delete a bookmark.

    Returns the number of rows deleted; 0 means the bookmark does not exist.

    Note: Does not commit. Caller (session generator) handles commit at request end.
    """
    if not _is_storable_id(bookmark_id):
        return 0
    with _store_errors("delete"):
        result = await db.execute(
            delete(Bookmark)
            .where(Bookmark.id == bookmark_id)
            .execution_options(synchronize_session="fetch"),
        )
    return result.rowcount
