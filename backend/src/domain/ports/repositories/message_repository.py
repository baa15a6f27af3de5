"""
Message Repository Port - Interface for message persistence.
Implementations:
    src/infrastructure/persistence/prisma_message_repository.py
    src/infrastructure/persistence/in_memory_repositories.py
    src/infrastructure/cache/cached_message_repository.py (decorator)
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities.message import Message
from src.domain.value_objects.message_id import MessageId
from src.domain.value_objects.user_id import UserId


class MessageRepository(ABC):
    @abstractmethod
    async def get_by_id(self, message_id: MessageId) -> Optional[Message]: ...

    @abstractmethod
    async def create(
        self, sender_id: UserId, receiver_id: UserId, content: str
    ) -> Message:
        """Insert a new unread message; storage assigns id and created_at."""
        ...

    @abstractmethod
    async def mark_as_read(self, message_id: MessageId) -> Optional[Message]: ...

    @abstractmethod
    async def get_between_users(
        self, user_a: UserId, user_b: UserId, limit: int = 50
    ) -> list[Message]:
        """Messages exchanged in either direction, newest first."""
        ...

    @abstractmethod
    async def get_recent_by_user(self, user_id: UserId, limit: int = 10) -> list[Message]: ...

    @abstractmethod
    async def count_unread(self, user_id: UserId) -> int: ...
