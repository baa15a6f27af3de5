"""
Cache Layer - Redis caching implementations.

Contains async Redis client factory and cached repository decorators.
"""

from src.infrastructure.cache.redis_client import create_redis_client, close_redis_client
from src.infrastructure.cache.cached_message_repository import CachedMessageRepository

__all__ = [
    "create_redis_client",
    "close_redis_client",
    "CachedMessageRepository",
]
