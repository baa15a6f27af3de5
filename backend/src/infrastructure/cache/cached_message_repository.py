"""
Cached Message Repository - Decorator pattern for Redis caching.

Guidelines:
- Implements MessageRepository interface (same as PrismaMessageRepository)
- Wraps underlying repository with Redis caching layer
- Transparent to callers - they don't know caching exists

Architecture:
    CachedMessageRepository (decorator)
        ↓ wraps
    PrismaMessageRepository (concrete implementation)
        ↓ implements
    MessageRepository (abstract interface)

Cache Strategy:
- Only the unread counter is cached: it is polled by every dashboard load,
  while conversations are read once and then mutated (marked read)
- Read-Through: Check cache first, fallback to DB, populate cache
- Write-Through invalidation: write to DB first, then DELETE the receiver's key
- TTL-based expiration as a safety net

Redis Data Structure (STRING):
- Key pattern: "user:{user_id}:unread"
- Value: integer count
- TTL: Config.REDIS_CACHE_TTL

Error Handling:
- Cache failures never fail the operation
- Log warnings and fall back to DB
"""

import logging
from typing import Optional
from redis.asyncio import Redis
from src.domain.entities.message import Message
from src.domain.ports.repositories.message_repository import MessageRepository
from src.domain.value_objects.message_id import MessageId
from src.domain.value_objects.user_id import UserId
from src.config.settings import Config

logger = logging.getLogger(__name__)


class CachedMessageRepository(MessageRepository):
    """
    Decorator: adds Redis caching to MessageRepository.

    Wraps an underlying MessageRepository implementation with a Redis cache layer.
    Implements the same interface, so callers don't know caching exists.
    """

    def __init__(self, repo: MessageRepository, redis: Redis, ttl: int = Config.REDIS_CACHE_TTL):
        """
        Initialize cached repository.

        Args:
            repo: Underlying MessageRepository implementation (e.g., PrismaMessageRepository)
            redis: Async Redis client for caching
            ttl: Seconds a cached count stays valid without invalidation
        """
        self._repo = repo
        self._redis = redis
        self._ttl = ttl

    def _unread_key(self, user_id: UserId) -> str:
        return f"user:{user_id.value}:unread"

    async def _invalidate_unread(self, user_id: UserId) -> None:
        try:
            await self._redis.delete(self._unread_key(user_id))
        except Exception as e:
            logger.warning(f"Redis cache invalidation error for user {user_id}: {str(e)}")

    async def get_by_id(self, message_id: MessageId) -> Optional[Message]:
        return await self._repo.get_by_id(message_id)

    async def create(
        self, sender_id: UserId, receiver_id: UserId, content: str
    ) -> Message:
        # 1. Write to DB first (source of truth)
        message = await self._repo.create(sender_id, receiver_id, content)
        # 2. Receiver has one more unread message
        await self._invalidate_unread(receiver_id)
        return message

    async def mark_as_read(self, message_id: MessageId) -> Optional[Message]:
        message = await self._repo.mark_as_read(message_id)
        if message:
            await self._invalidate_unread(message.receiver_id)
        return message

    async def get_between_users(
        self, user_a: UserId, user_b: UserId, limit: int = 50
    ) -> list[Message]:
        return await self._repo.get_between_users(user_a, user_b, limit)

    async def get_recent_by_user(self, user_id: UserId, limit: int = 10) -> list[Message]:
        return await self._repo.get_recent_by_user(user_id, limit)

    async def count_unread(self, user_id: UserId) -> int:
        """
        Count unread messages with Redis read-through caching.

        Flow:
        1. Try cache (fast path)
        2. Cache miss → count in DB (slow path)
        3. Populate cache with TTL (best effort)
        """
        cache_key = self._unread_key(user_id)

        try:
            cached = await self._redis.get(cache_key)
            if cached is not None:
                logger.debug(f"Cache HIT for {cache_key}")
                return int(cached)
        except Exception as e:
            logger.warning(f"Redis cache read error for {cache_key}: {str(e)}")

        logger.debug(f"Cache MISS for {cache_key}")
        count = await self._repo.count_unread(user_id)

        try:
            await self._redis.set(cache_key, count, ex=self._ttl)
        except Exception as e:
            logger.warning(f"Redis cache write error for {cache_key}: {str(e)}")

        return count
