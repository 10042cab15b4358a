"""
Bookmark API schemas (request/response models).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class Bookmark(BaseModel):
    id: int
    user_id: int
    article_id: int
    created_at: datetime | None = None


class CreateBookmarkRequest(BaseModel):
    # Both optional at the schema level so a missing article_id is a 400
    # from the service rather than a validation error.
    user_id: int | None = None
    article_id: int | None = None


class CreateBookmarkResponse(BaseModel):
    message: str
    id: int


class MessageResponse(BaseModel):
    message: str
