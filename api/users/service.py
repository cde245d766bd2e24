"""
User business logic.

Each operation performs exactly one repository call inside a failure boundary
and reports the outcome as a `StoreResult` instead of raising:

- success with a row      -> `StoreResult(value=...)`
- no matching row         -> `StoreResult()` (absent, not an error)
- any failure on the way  -> `StoreResult(error=exc)`

The HTTP layer maps these to status codes (see `users/router.py`).
"""

from __future__ import annotations

import re
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

import asyncpg

from . import repository, schemas

T = TypeVar("T")

_USER_ID = re.compile(r"\s*[+-]?\d+\s*", re.ASCII)


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    value: T | None = None
    error: Exception | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    @property
    def found(self) -> bool:
        return self.error is None and self.value is not None


def has_required_fields(payload: schemas.UserPayload | None) -> bool:
    if payload is None:
        return False
    return bool(payload.name) and bool(payload.email)


def parse_user_id(raw: str) -> int:
    # A bad id fails inside the boundary like a store error.
    if not _USER_ID.fullmatch(raw):
        raise ValueError(f"Invalid user id: {raw!r}")
    return int(raw)


def _to_user(row: dict) -> schemas.User:
    return schemas.User(
        id=int(row["id"]),
        name=str(row["name"]),
        email=str(row["email"]),
    )


async def _guarded(call: Callable[[], Awaitable[T | None]]) -> StoreResult[T]:
    try:
        value = await call()
    except Exception as exc:
        return StoreResult(error=exc)
    return StoreResult(value=value)


async def list_users(pool: asyncpg.Pool) -> StoreResult[list[schemas.User]]:
    async def call() -> list[schemas.User]:
        rows = await repository.list_users(pool)
        return [_to_user(row) for row in rows]

    return await _guarded(call)


async def get_user(pool: asyncpg.Pool, raw_id: str) -> StoreResult[schemas.User]:
    async def call() -> schemas.User | None:
        row = await repository.get_user_by_id(pool, parse_user_id(raw_id))
        return _to_user(row) if row is not None else None

    return await _guarded(call)


async def create_user(pool: asyncpg.Pool, *, name: str, email: str) -> StoreResult[schemas.User]:
    async def call() -> schemas.User:
        row = await repository.create_user(pool, name=name, email=email)
        return _to_user(row)

    return await _guarded(call)


async def update_user(
    pool: asyncpg.Pool,
    raw_id: str,
    *,
    name: str,
    email: str,
) -> StoreResult[schemas.User]:
    async def call() -> schemas.User | None:
        row = await repository.update_user(pool, parse_user_id(raw_id), name=name, email=email)
        return _to_user(row) if row is not None else None

    return await _guarded(call)


async def delete_user(pool: asyncpg.Pool, raw_id: str) -> StoreResult[schemas.User]:
    async def call() -> schemas.User | None:
        row = await repository.delete_user(pool, parse_user_id(raw_id))
        return _to_user(row) if row is not None else None

    return await _guarded(call)
