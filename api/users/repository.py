"""
User persistence (raw SQL).
"""

from __future__ import annotations

from core.db import Database


async def create_user(db: Database, *, username: str, email: str, password_hash: str) -> int | None:
    """
    Insert a user and return its id, or None when the username or email is taken.
    """
    result = await db.insert(
        """
        INSERT INTO users (username, email, password, created_at)
        VALUES ($1, $2, $3, now())
        ON CONFLICT DO NOTHING
        RETURNING id
        """,
        username,
        email,
        password_hash,
    )
    return result.inserted_id


async def get_user_by_username(db: Database, username: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, username, email, password
        FROM users
        WHERE username = $1
        """,
        username,
    )
