"""
Async database access helpers (raw SQL) using asyncpg.

The connection pool is created once by the app lifespan (see `api/main.py`),
kept on `app.state.pool` and handed to request handlers through the
`get_pool` dependency. Helpers take the pool explicitly.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg
from fastapi import Request

from .settings import Settings


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def connect_kwargs(settings: Settings) -> dict[str, Any]:
    """
    Connection arguments for asyncpg, from DATABASE_URL or the DB_* parts.
    """
    if settings.database_url:
        return {"dsn": _sanitize_database_url(settings.database_url)}
    return {
        "host": settings.db_host,
        "port": settings.db_port,
        "database": settings.db_database,
        "user": settings.db_user,
        "password": settings.db_password or None,
    }


async def create_pool(settings: Settings) -> asyncpg.Pool:
    return await asyncpg.create_pool(
        **connect_kwargs(settings),
        # No connection until the first query; an unreachable store fails requests, not startup.
        min_size=0,
        max_size=5,
        command_timeout=30,
    )


async def close_pool(pool: asyncpg.Pool | None) -> None:
    if pool is None:
        return None
    await pool.close()


def get_pool(request: Request) -> asyncpg.Pool:
    pool = getattr(request.app.state, "pool", None)
    if pool is None:
        raise RuntimeError("DB pool is not initialized. It is created by the app lifespan.")
    return pool


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_one(pool: asyncpg.Pool, sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    row = await pool.fetchrow(sql, *args)
    return _record_to_dict(row) if row is not None else None


async def fetch_all(pool: asyncpg.Pool, sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    rows = await pool.fetch(sql, *args)
    return [_record_to_dict(r) for r in rows]
