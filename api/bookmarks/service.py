"""
Bookmark business logic.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from core.db import Database, fits_bigint
from core.errors import database_failure

from . import repository, schemas

# Bookmarks without an explicit owner belong to the default user.
DEFAULT_USER_ID = 1

logger = logging.getLogger(__name__)


async def list_bookmarks(db: Database, *, user_id: int | None = None) -> list[dict]:
    user_id = user_id or DEFAULT_USER_ID
    # No row can carry an id the column type cannot hold.
    if not fits_bigint(user_id):
        return []

    with database_failure("Failed to fetch bookmarks", log=logger, event="bookmarks_fetch_failed"):
        return await repository.list_bookmarks(db, user_id=user_id)


async def add_bookmark(db: Database, payload: schemas.CreateBookmarkRequest) -> schemas.CreateBookmarkResponse:
    if not payload.article_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="article_id is required",
        )

    user_id = payload.user_id or DEFAULT_USER_ID
    for name, value in (("user_id", user_id), ("article_id", payload.article_id)):
        if not fits_bigint(value):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"{name} is out of range",
            )

    with database_failure("Failed to add bookmark", log=logger, event="bookmark_create_failed"):
        bookmark_id = await repository.create_bookmark(
            db,
            user_id=user_id,
            article_id=payload.article_id,
        )

    if bookmark_id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Article already bookmarked",
        )

    logger.info("bookmark_created id=%s user_id=%s article_id=%s", bookmark_id, user_id, payload.article_id)
    return schemas.CreateBookmarkResponse(message="Bookmark added successfully", id=bookmark_id)


async def remove_bookmark(db: Database, bookmark_id: int) -> schemas.MessageResponse:
    deleted = False
    if fits_bigint(bookmark_id):
        with database_failure("Failed to delete bookmark", log=logger, event="bookmark_delete_failed"):
            deleted = await repository.delete_bookmark(db, bookmark_id)

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Bookmark not found",
        )
    return schemas.MessageResponse(message="Bookmark removed successfully")
