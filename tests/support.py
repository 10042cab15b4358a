"""
Test doubles shared by the API tests.
"""

from __future__ import annotations

from collections import defaultdict, deque
from contextlib import contextmanager
from typing import Any, Iterator

from fastapi.testclient import TestClient

from core.db import WriteResult
from core.settings import Settings
from main import create_app


def normalize_sql(sql: str) -> str:
    return " ".join(sql.split())


class FakeDatabase:
    """
    Scripted stand-in for `core.db.Database`.

    Each method pops the next queued result for its name; an exception
    instance in the queue is raised instead. Calls are recorded as
    `(method, sql, args)` with whitespace-normalized SQL.
    """

    _defaults: dict[str, Any] = {
        "fetch_all": [],
        "fetch_one": None,
        "fetch_value": 0,
        "execute": WriteResult(affected_rows=0),
        "insert": WriteResult(affected_rows=0),
    }

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, tuple[Any, ...]]] = []
        self._queued: dict[str, deque[Any]] = defaultdict(deque)

    def queue(self, method: str, *results: Any) -> FakeDatabase:
        self._queued[method].extend(results)
        return self

    def _next(self, method: str, sql: str, args: tuple[Any, ...]) -> Any:
        self.calls.append((method, normalize_sql(sql), args))
        queued = self._queued[method]
        result = queued.popleft() if queued else self._defaults[method]
        if isinstance(result, BaseException):
            raise result
        return result

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        return self._next("fetch_all", sql, args)

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        return self._next("fetch_one", sql, args)

    async def fetch_value(self, sql: str, *args: Any) -> Any:
        return self._next("fetch_value", sql, args)

    async def execute(self, sql: str, *args: Any) -> WriteResult:
        return self._next("execute", sql, args)

    async def insert(self, sql: str, *args: Any) -> WriteResult:
        return self._next("insert", sql, args)

    async def close(self) -> None:
        return None


@contextmanager
def api_test_client(db: FakeDatabase, *, settings: Settings | None = None) -> Iterator[TestClient]:
    app = create_app(database=db, settings=settings or Settings())
    with TestClient(app) as client:
        yield client
