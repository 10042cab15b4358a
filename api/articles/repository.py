"""
Article persistence (raw SQL).

Articles are read-only here; rows are loaded into the table externally.
"""

from __future__ import annotations

from typing import Any

from core.db import Database

ARTICLE_COLUMNS = "id, title, content, category, date"


def like_pattern(term: str) -> str:
    """
    Wrap `term` for a literal substring match with LIKE ... ESCAPE '\\'.
    """
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def build_list_query(*, category: str | None = None, search: str | None = None) -> tuple[str, list[Any]]:
    """
    Compose the article listing query and its bound values.

    `category` is an equality filter; `search` is a case-sensitive substring
    match on title OR content. Both combine with AND.
    """
    clauses: list[str] = []
    params: list[Any] = []

    if category:
        params.append(category)
        clauses.append(f"category = ${len(params)}")

    if search:
        params.append(like_pattern(search))
        n = len(params)
        clauses.append(f"(title LIKE ${n} ESCAPE '\\' OR content LIKE ${n} ESCAPE '\\')")

    sql = f"SELECT {ARTICLE_COLUMNS} FROM articles"
    if clauses:
        sql += " WHERE " + " AND ".join(clauses)
    sql += " ORDER BY date DESC, id DESC"
    return sql, params


async def list_articles(
    db: Database,
    *,
    category: str | None = None,
    search: str | None = None,
) -> list[dict[str, Any]]:
    sql, params = build_list_query(category=category, search=search)
    return await db.fetch_all(sql, *params)


async def count_articles(db: Database) -> int:
    count = await db.fetch_value("SELECT count(*) FROM articles")
    return int(count or 0)
