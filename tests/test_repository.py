# =============================================================================
# tests/test_repository.py - Raw SQL adapter tests
# =============================================================================
# Checks row mapping, absent results and that every caller value is passed
# as a bound parameter rather than written into the statement text.
# =============================================================================

import pytest

from users import repository


@pytest.mark.asyncio
async def test_create_then_get_returns_same_row(fake_pool):
    created = await repository.create_user(fake_pool, name="Ana", email="ana@x.com")

    fetched = await repository.get_user_by_id(fake_pool, created["id"])

    assert fetched == created
    assert created == {"id": 1, "name": "Ana", "email": "ana@x.com"}


@pytest.mark.asyncio
async def test_values_are_bound_parameters(fake_pool):
    hostile = "x'); DROP TABLE users; --"

    await repository.create_user(fake_pool, name=hostile, email="e@x.com")
    await repository.update_user(fake_pool, 1, name=hostile, email="f@x.com")

    for sql, args in fake_pool.calls:
        assert hostile not in sql
        assert hostile in args
    insert_sql, insert_args = fake_pool.calls[0]
    assert "$1" in insert_sql and "$2" in insert_sql
    assert insert_args == (hostile, "e@x.com")
    _, update_args = fake_pool.calls[1]
    assert update_args == (hostile, "f@x.com", 1)


@pytest.mark.asyncio
async def test_get_missing_returns_none(fake_pool):
    assert await repository.get_user_by_id(fake_pool, 999) is None


@pytest.mark.asyncio
async def test_update_missing_returns_none_and_inserts_nothing(fake_pool):
    result = await repository.update_user(fake_pool, 42, name="N", email="e@x.com")

    assert result is None
    assert fake_pool.rows == {}


@pytest.mark.asyncio
async def test_delete_returns_prior_values(fake_pool):
    fake_pool.seed("Ana", "ana@x.com")

    removed = await repository.delete_user(fake_pool, 1)

    assert removed == {"id": 1, "name": "Ana", "email": "ana@x.com"}
    assert await repository.get_user_by_id(fake_pool, 1) is None


@pytest.mark.asyncio
async def test_delete_missing_leaves_table_unchanged(fake_pool):
    fake_pool.seed("Ana", "ana@x.com")

    assert await repository.delete_user(fake_pool, 7) is None
    assert list(fake_pool.rows) == [1]


@pytest.mark.asyncio
async def test_list_after_inserts_and_deletes(fake_pool):
    for i in range(5):
        await repository.create_user(fake_pool, name=f"user{i}", email=f"user{i}@x.com")
    await repository.delete_user(fake_pool, 2)
    await repository.delete_user(fake_pool, 4)

    rows = await repository.list_users(fake_pool)

    assert sorted(row["id"] for row in rows) == [1, 3, 5]
    for row in rows:
        index = row["id"] - 1
        assert row["name"] == f"user{index}"
        assert row["email"] == f"user{index}@x.com"


@pytest.mark.asyncio
async def test_store_errors_propagate_unchanged(fake_pool):
    boom = ConnectionRefusedError("db down")
    fake_pool.error = boom

    with pytest.raises(ConnectionRefusedError) as excinfo:
        await repository.list_users(fake_pool)

    assert excinfo.value is boom


@pytest.mark.asyncio
async def test_create_without_returned_row_raises(fake_pool):
    async def no_row(sql, *args):
        return None

    fake_pool.fetchrow = no_row

    with pytest.raises(RuntimeError, match="Failed to create user"):
        await repository.create_user(fake_pool, name="Ana", email="ana@x.com")
