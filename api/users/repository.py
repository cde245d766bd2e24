"""
User persistence (raw SQL).

Every caller-supplied value goes through a bound parameter.
"""

from __future__ import annotations

import asyncpg

from core import db


async def list_users(pool: asyncpg.Pool) -> list[dict]:
    return await db.fetch_all(
        pool,
        """
        SELECT id, name, email
        FROM users
        """,
    )


async def get_user_by_id(pool: asyncpg.Pool, user_id: int) -> dict | None:
    return await db.fetch_one(
        pool,
        """
        SELECT id, name, email
        FROM users
        WHERE id = $1
        """,
        user_id,
    )


async def create_user(pool: asyncpg.Pool, *, name: str, email: str) -> dict:
    row = await db.fetch_one(
        pool,
        """
        INSERT INTO users (name, email)
        VALUES ($1, $2)
        RETURNING id, name, email
        """,
        name,
        email,
    )
    if row is None:
        raise RuntimeError("Failed to create user.")
    return row


async def update_user(pool: asyncpg.Pool, user_id: int, *, name: str, email: str) -> dict | None:
    return await db.fetch_one(
        pool,
        """
        UPDATE users
        SET name = $1,
            email = $2
        WHERE id = $3
        RETURNING id, name, email
        """,
        name,
        email,
        user_id,
    )


async def delete_user(pool: asyncpg.Pool, user_id: int) -> dict | None:
    return await db.fetch_one(
        pool,
        """
        DELETE FROM users
        WHERE id = $1
        RETURNING id, name, email
        """,
        user_id,
    )
