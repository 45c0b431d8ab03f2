"""Bookmark CRUD endpoints."""
import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from bookmark_api.api.dependencies import get_async_session, require_api_token
from bookmark_api.schemas.bookmark import (
    BookmarkCreate,
    BookmarkResponse,
    BookmarkUpdate,
    extract_bookmark_fields,
)
from bookmark_api.schemas.errors import ErrorResponse
from bookmark_api.schemas.validators import (
    coerce_rating,
    find_missing_field,
    validate_bookmark_fields,
)
from bookmark_api.services import bookmark_service
from bookmark_api.services.exceptions import EmptyPatchBodyError, MissingFieldError
from bookmark_api.services.sanitizer import sanitize_bookmark

logger = logging.getLogger(__name__)

BOOKMARK_NOT_FOUND = "Bookmark doesn't exist"

router = APIRouter(
    prefix="/bookmarks",
    tags=["bookmarks"],
    dependencies=[Depends(require_api_token)],
    responses={401: {"model": ErrorResponse}},
)


def _not_found() -> HTTPException:
    return HTTPException(status_code=404, detail=BOOKMARK_NOT_FOUND)


@router.get("", response_model=list[BookmarkResponse])
async def list_bookmarks(
    db: AsyncSession = Depends(get_async_session),
) -> list[BookmarkResponse]:
    """List all bookmarks in creation order."""
    bookmarks = await bookmark_service.list_bookmarks(db)
    return [sanitize_bookmark(BookmarkResponse.model_validate(b)) for b in bookmarks]


@router.post(
    "",
    response_model=BookmarkResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}},
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": BookmarkCreate.model_json_schema()}},
        },
    },
)
async def create_bookmark(
    request: Request,
    response: Response,
    payload: dict[str, Any] | None = Body(default=None),
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse:
    """
    Create a new bookmark.

    All of title, url, description and rating are required. The first missing
    field (in that order) is reported. Unrecognized keys are ignored.
    """
    fields = extract_bookmark_fields(payload)

    missing = find_missing_field(fields)
    if missing is not None:
        raise MissingFieldError(missing)

    error = validate_bookmark_fields(fields)
    if error is not None:
        raise error

    fields["rating"] = coerce_rating(fields["rating"])

    bookmark = await bookmark_service.create_bookmark(db, fields)
    logger.info("bookmark_created", extra={"bookmark_id": bookmark.id})

    response.headers["Location"] = str(
        request.app.url_path_for("get_bookmark", bookmark_id=bookmark.id),
    )
    return sanitize_bookmark(BookmarkResponse.model_validate(bookmark))


@router.get(
    "/{bookmark_id}",
    response_model=BookmarkResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_bookmark(
    bookmark_id: int,
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse:
    """Get a single bookmark by ID."""
    bookmark = await bookmark_service.get_bookmark(db, bookmark_id)
    if bookmark is None:
        raise _not_found()
    return sanitize_bookmark(BookmarkResponse.model_validate(bookmark))


@router.patch(
    "/{bookmark_id}",
    status_code=204,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": BookmarkUpdate.model_json_schema()}},
        },
    },
)
async def update_bookmark(
    bookmark_id: int,
    payload: dict[str, Any] | None = Body(default=None),
    db: AsyncSession = Depends(get_async_session),
) -> None:
    """
    Partially update a bookmark.

    Only the supplied fields are validated and written; the rest keep their
    stored values. A body with none of the bookmark fields is rejected.
    """
    fields = extract_bookmark_fields(payload)
    if not fields:
        raise EmptyPatchBodyError()

    error = validate_bookmark_fields(fields)
    if error is not None:
        raise error

    if "rating" in fields:
        fields["rating"] = coerce_rating(fields["rating"])

    updated = await bookmark_service.update_bookmark(db, bookmark_id, fields)
    if updated == 0:
        raise _not_found()
    logger.info(
        "bookmark_updated",
        extra={"bookmark_id": bookmark_id, "fields": sorted(fields)},
    )


@router.delete(
    "/{bookmark_id}",
    status_code=204,
    responses={404: {"model": ErrorResponse}},
)
async def delete_bookmark(
    bookmark_id: int,
    db: AsyncSession = Depends(get_async_session),
) -> None:
    """Delete a bookmark."""
    deleted = await bookmark_service.delete_bookmark(db, bookmark_id)
    if deleted == 0:
        raise _not_found()
    logger.info("bookmark_deleted", extra={"bookmark_id": bookmark_id})
