"""
Article API endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query

from core.db import Database
from core.dependencies import get_db
from core.errors import database_failure

from . import repository, schemas

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/articles", response_model=list[schemas.Article])
async def list_articles(
    category: str | None = Query(default=None),
    search: str | None = Query(default=None),
    db: Database = Depends(get_db),
) -> list[dict]:
    with database_failure("Failed to fetch articles", log=logger, event="articles_fetch_failed"):
        return await repository.list_articles(db, category=category, search=search)
