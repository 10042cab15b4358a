"""
Bookmark API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from core.db import Database
from core.dependencies import get_db

from . import schemas, service

router = APIRouter()


@router.get("/bookmarks", response_model=list[schemas.Bookmark])
async def list_bookmarks(
    user_id: int | None = Query(default=None),
    db: Database = Depends(get_db),
) -> list[dict]:
    """
    Bookmarks for a user (default user 1), newest first.
    """
    return await service.list_bookmarks(db, user_id=user_id)


@router.post(
    "/bookmarks",
    status_code=status.HTTP_201_CREATED,
    response_model=schemas.CreateBookmarkResponse,
)
async def add_bookmark(
    request: schemas.CreateBookmarkRequest | None = None,
    db: Database = Depends(get_db),
) -> schemas.CreateBookmarkResponse:
    return await service.add_bookmark(db, request or schemas.CreateBookmarkRequest())


@router.delete("/bookmarks/{bookmark_id}", response_model=schemas.MessageResponse)
async def remove_bookmark(
    bookmark_id: int,
    db: Database = Depends(get_db),
) -> schemas.MessageResponse:
    return await service.remove_bookmark(db, bookmark_id)
