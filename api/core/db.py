"""
Async access to the hosted Postgres store (raw SQL) using asyncpg.

`Database` owns the connection pool. One instance is built per process in
`create_app()`; the lifespan hook opens the pool on startup and closes it on
shutdown (see `api/main.py`).

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...

Every driver failure is re-raised as `StoreError` so callers only have to
handle one collaborator error type.
"""

from __future__ import annotations

import asyncio
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg


class StoreError(RuntimeError):
    pass


_DRIVER_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, asyncio.TimeoutError)


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


class Database:
    def __init__(self, url: str = "", *, password: str = "") -> None:
        self._url = (url or "").strip()
        self._password = password or None
        self._pool: asyncpg.Pool | None = None

    @property
    def configured(self) -> bool:
        return bool(self._url)

    async def init_pool(self) -> None:
        if self._pool is not None or not self.configured:
            return None
        try:
            self._pool = await asyncpg.create_pool(
                dsn=_sanitize_database_url(self._url),
                password=self._password,
                min_size=1,
                max_size=5,
                command_timeout=30,
            )
        except _DRIVER_ERRORS as exc:
            raise StoreError(f"Failed to connect to database: {exc}") from exc

    async def close_pool(self) -> None:
        if self._pool is None:
            return None
        await self._pool.close()
        self._pool = None

    def pool(self) -> asyncpg.Pool:
        if not self.configured:
            raise StoreError("Database is not configured.")
        if self._pool is None:
            raise StoreError("DB pool is not initialized. Call init_pool() on startup.")
        return self._pool

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        try:
            row = await self.pool().fetchrow(sql, *args)
        except _DRIVER_ERRORS as exc:
            raise StoreError(str(exc)) from exc
        return _record_to_dict(row) if row is not None else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        try:
            rows = await self.pool().fetch(sql, *args)
        except _DRIVER_ERRORS as exc:
            raise StoreError(str(exc)) from exc
        return [_record_to_dict(r) for r in rows]

    async def fetch_val(self, sql: str, *args: Any) -> Any:
        try:
            return await self.pool().fetchval(sql, *args)
        except _DRIVER_ERRORS as exc:
            raise StoreError(str(exc)) from exc
