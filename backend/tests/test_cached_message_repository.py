from unittest.mock import AsyncMock

import pytest

from src.domain.value_objects import UserId
from src.infrastructure.cache import CachedMessageRepository
from src.infrastructure.persistence import InMemoryDatabase, InMemoryMessageRepository

ALICE, BOB = UserId(1), UserId(2)


@pytest.fixture()
def inner():
    return InMemoryMessageRepository(InMemoryDatabase())


@pytest.fixture()
def redis():
    client = AsyncMock()
    client.get.return_value = None
    return client


@pytest.mark.asyncio
async def test_cache_miss_counts_in_db_and_populates_cache(inner, redis):
    repo = CachedMessageRepository(inner, redis, ttl=60)
    await inner.create(ALICE, BOB, "hi")

    assert await repo.count_unread(BOB) == 1
    redis.set.assert_awaited_once_with("user:2:unread", 1, ex=60)


@pytest.mark.asyncio
async def test_cache_hit_skips_db(inner, redis):
    redis.get.return_value = b"5"
    repo = CachedMessageRepository(inner, redis)

    assert await repo.count_unread(BOB) == 5
    redis.set.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_invalidates_receiver_count(inner, redis):
    repo = CachedMessageRepository(inner, redis)

    await repo.create(ALICE, BOB, "hi")

    redis.delete.assert_awaited_once_with("user:2:unread")


@pytest.mark.asyncio
async def test_mark_as_read_invalidates_receiver_count(inner, redis):
    repo = CachedMessageRepository(inner, redis)
    message = await inner.create(ALICE, BOB, "hi")

    updated = await repo.mark_as_read(message.id)

    assert updated.read is True
    redis.delete.assert_awaited_once_with("user:2:unread")


@pytest.mark.asyncio
async def test_redis_errors_fall_back_to_db(inner, redis):
    redis.get.side_effect = ConnectionError("redis down")
    redis.set.side_effect = ConnectionError("redis down")
    redis.delete.side_effect = ConnectionError("redis down")
    repo = CachedMessageRepository(inner, redis)

    await repo.create(ALICE, BOB, "hi")

    assert await repo.count_unread(BOB) == 1


@pytest.mark.asyncio
async def test_reads_are_delegated(inner, redis):
    repo = CachedMessageRepository(inner, redis)
    await repo.create(ALICE, BOB, "one")
    await repo.create(BOB, ALICE, "two")

    conversation = await repo.get_between_users(ALICE, BOB)

    assert [m.content for m in conversation] == ["two", "one"]
    assert len(await repo.get_recent_by_user(ALICE)) == 2
    redis.get.assert_not_awaited()
