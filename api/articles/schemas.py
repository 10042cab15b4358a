"""
Article response schemas.
"""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel


class Article(BaseModel):
    id: int
    title: str
    content: str
    category: str | None = None
    date: dt.datetime | dt.date | None = None
