"""
Async Redis Client Factory.

Creates Redis client with connection pooling for DI container.
Uses redis.asyncio for pure async operations - no event loop issues.
"""

import logging
import redis.asyncio as redis
from redis.asyncio import Redis
from src.config.settings import Config

logger = logging.getLogger(__name__)


async def create_redis_client(url: str = Config.REDIS_URL) -> Redis:
    """
    Create async Redis client with connection pool.

    An unreachable server is logged, not raised: the pool reconnects on
    later commands and the cached repositories fall back to the database
    while Redis is down.

    Returns:
        Redis: Async Redis client
    """
    client = redis.from_url(
        url,
        encoding="utf-8",
        decode_responses=True,
        socket_timeout=5.0,
        socket_connect_timeout=5.0,
    )

    try:
        await client.ping()
        logger.info(f"[Redis] Connected to {url}")
    except redis.RedisError as e:
        logger.warning(f"[Redis] {url} unreachable, continuing without cache: {e}")

    return client


async def close_redis_client(client: Redis) -> None:
    """Close Redis client connection on application shutdown."""
    if client:
        await client.aclose()
        logger.info("[Redis] Connection closed")
