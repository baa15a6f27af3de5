"""
Prisma Message Repository Implementation.

Guidelines:
- Implements MessageRepository port from domain layer
- Uses Prisma client for database operations
- Maps between Prisma models and domain entities
- All methods are async

Prisma Message Model (from backend/prisma/schema.prisma):
    model Message {
        id          Int      @id @default(autoincrement())
        sender_id   Int
        receiver_id Int
        content     String
        read        Boolean  @default(false)
        created_at  DateTime @default(now())
    }

Mapping:
- Prisma: id (int) ←→ Domain: id (MessageId)
- Prisma: sender_id / receiver_id (int) ←→ Domain: UserId
- Other fields map directly

Notes:
- create() lets the database assign id and created_at, then returns the row
  as written, so what the relay pushes is exactly what a later fetch returns
- mark_as_read() only ever writes read=True
"""

import logging
from typing import Optional
from prisma import Prisma
from prisma.models import Message as PrismaMessage
from src.domain.entities.message import Message
from src.domain.ports.repositories.message_repository import MessageRepository
from src.domain.value_objects.message_id import MessageId
from src.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


class PrismaMessageRepository(MessageRepository):
    """
    Prisma implementation of MessageRepository.

    Handles persistence of Message entities to PostgreSQL via Prisma.
    """

    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        """
        Initialize repository with Prisma client.

        Args:
            prisma: Connected Prisma client (injected by DI container)
        """
        self._prisma = prisma

    def _to_entity(self, record: PrismaMessage) -> Message:
        """Map Prisma record to domain entity."""
        return Message(
            id=MessageId(record.id),
            sender_id=UserId(record.sender_id),
            receiver_id=UserId(record.receiver_id),
            content=record.content,
            read=record.read,
            created_at=record.created_at,
        )

    async def get_by_id(self, message_id: MessageId) -> Optional[Message]:
        record = await self._prisma.message.find_unique(where={"id": message_id.value})
        return self._to_entity(record) if record else None

    async def create(
        self, sender_id: UserId, receiver_id: UserId, content: str
    ) -> Message:
        """
        Insert a new message.

        Args:
            sender_id: Author of the message
            receiver_id: Addressee
            content: Message body

        Returns:
            The persisted Message (id and created_at assigned by PostgreSQL)
        """
        record = await self._prisma.message.create(
            data={
                "sender_id": sender_id.value,
                "receiver_id": receiver_id.value,
                "content": content,
            }
        )
        return self._to_entity(record)

    async def mark_as_read(self, message_id: MessageId) -> Optional[Message]:
        """
        Flag a message as read.

        Returns:
            The updated Message, or None if it does not exist
        """
        record = await self._prisma.message.update(
            where={"id": message_id.value},
            data={"read": True},
        )
        return self._to_entity(record) if record else None

    async def get_between_users(
        self, user_a: UserId, user_b: UserId, limit: int = 50
    ) -> list[Message]:
        """
        Get the conversation between two users, newest first.

        Args:
            user_a: One participant
            user_b: The other participant
            limit: Maximum number of messages to return
        """
        records = await self._prisma.message.find_many(
            where={
                "OR": [
                    {"sender_id": user_a.value, "receiver_id": user_b.value},
                    {"sender_id": user_b.value, "receiver_id": user_a.value},
                ]
            },
            order=[{"created_at": "desc"}, {"id": "desc"}],
            take=limit,
        )
        return [self._to_entity(record) for record in records]

    async def get_recent_by_user(self, user_id: UserId, limit: int = 10) -> list[Message]:
        records = await self._prisma.message.find_many(
            where={
                "OR": [
                    {"sender_id": user_id.value},
                    {"receiver_id": user_id.value},
                ]
            },
            order=[{"created_at": "desc"}, {"id": "desc"}],
            take=limit,
        )
        return [self._to_entity(record) for record in records]

    async def count_unread(self, user_id: UserId) -> int:
        return await self._prisma.message.count(
            where={"receiver_id": user_id.value, "read": False}
        )
