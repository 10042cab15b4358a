"""
Async database access helpers (raw SQL) using asyncpg.

`Database` owns the connection pool. FastAPI opens it in the lifespan and
stores it on `app.state.db` (see `api/main.py`); handlers receive it through
`core.dependencies.get_db`.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...

Transport is always TLS with server certificate and hostname verification.
"""

from __future__ import annotations

import asyncio
import logging
import ssl
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator

import asyncpg

from .settings import Settings

logger = logging.getLogger(__name__)


BIGINT_MIN = -(2**63)
BIGINT_MAX = 2**63 - 1


class DatabaseError(RuntimeError):
    pass


@dataclass(frozen=True)
class WriteResult:
    affected_rows: int
    inserted_id: int | None = None


def ssl_context(ca_file: str | None = None) -> ssl.SSLContext:
    context = ssl.create_default_context(cafile=ca_file)
    context.check_hostname = True
    context.verify_mode = ssl.CERT_REQUIRED
    return context


def fits_bigint(value: int) -> bool:
    """
    Whether `value` can be bound to a BIGINT parameter.
    """
    return BIGINT_MIN <= value <= BIGINT_MAX


def affected_rows(status: str) -> int:
    """
    Parse the row count out of a command status tag.

    "DELETE 3" -> 3, "INSERT 0 1" -> 1, "CREATE TABLE" -> 0
    """
    parts = (status or "").split()
    if not parts or not parts[-1].isdigit():
        return 0
    return int(parts[-1])


@contextmanager
def _driver_errors(sql: str) -> Iterator[None]:
    try:
        yield
    except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, asyncio.TimeoutError) as exc:
        statement = " ".join(sql.split())[:120]
        raise DatabaseError(f"{type(exc).__name__}: {exc} [{statement}]") from exc


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


class Database:
    def __init__(self, pool: asyncpg.Pool) -> None:
        self._pool = pool

    @classmethod
    async def connect(cls, settings: Settings) -> Database:
        """
        Create the pool without opening any connection.

        Connections are made on first use, so an unreachable database shows up
        as a `DatabaseError` on the request that needs it, not at startup.
        """
        with _driver_errors("CONNECT"):
            pool = await asyncpg.create_pool(
                host=settings.db_host,
                port=settings.db_port,
                user=settings.db_user,
                password=settings.db_password,
                database=settings.db_name,
                ssl=ssl_context(settings.db_ssl_ca),
                min_size=0,
                max_size=settings.db_pool_size,
            )
        logger.info(
            "db_pool_open host=%s port=%s database=%s max_size=%s",
            settings.db_host,
            settings.db_port,
            settings.db_name,
            settings.db_pool_size,
        )
        return cls(pool)

    async def close(self) -> None:
        await self._pool.close()
        logger.info("db_pool_closed")

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        with _driver_errors(sql):
            rows = await self._pool.fetch(sql, *args)
        return [_record_to_dict(r) for r in rows]

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        with _driver_errors(sql):
            row = await self._pool.fetchrow(sql, *args)
        return _record_to_dict(row) if row is not None else None

    async def fetch_value(self, sql: str, *args: Any) -> Any:
        with _driver_errors(sql):
            return await self._pool.fetchval(sql, *args)

    async def execute(self, sql: str, *args: Any) -> WriteResult:
        """
        Run a statement (UPDATE/DELETE/DDL) and report how many rows it touched.
        """
        with _driver_errors(sql):
            status = await self._pool.execute(sql, *args)
        return WriteResult(affected_rows=affected_rows(status))

    async def insert(self, sql: str, *args: Any) -> WriteResult:
        """
        Run an `INSERT ... RETURNING id`.

        When an ON CONFLICT clause suppresses the row nothing is returned and
        the result has no id.
        """
        with _driver_errors(sql):
            inserted_id = await self._pool.fetchval(sql, *args)
        if inserted_id is None:
            return WriteResult(affected_rows=0)
        return WriteResult(affected_rows=1, inserted_id=int(inserted_id))
