"""
Bookmark persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core.db import Database


async def list_bookmarks(db: Database, *, user_id: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, user_id, article_id, created_at
        FROM bookmarks
        WHERE user_id = $1
        ORDER BY created_at DESC, id DESC
        """,
        user_id,
    )


async def create_bookmark(db: Database, *, user_id: int, article_id: int) -> int | None:
    """
    Insert a bookmark and return its id, or None if the pair already exists.

    Relies on the `uq_bookmarks_user_article` constraint so two concurrent
    requests cannot both insert the same pair.
    """
    result = await db.insert(
        """
        INSERT INTO bookmarks (user_id, article_id, created_at)
        VALUES ($1, $2, now())
        ON CONFLICT (user_id, article_id) DO NOTHING
        RETURNING id
        """,
        user_id,
        article_id,
    )
    return result.inserted_id


async def delete_bookmark(db: Database, bookmark_id: int) -> bool:
    result = await db.execute(
        """
        DELETE FROM bookmarks
        WHERE id = $1
        """,
        bookmark_id,
    )
    return result.affected_rows > 0
