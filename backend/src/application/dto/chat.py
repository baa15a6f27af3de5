"""Chat DTOs for API responses and socket frames.

Field names go over the wire in camelCase (senderId, createdAt, ...) so the
same serialized Message is sent live over the socket and returned by the
conversation endpoints.
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.domain.entities.message import Message


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageDTO(CamelModel):
    """DTO for a persisted message."""

    id: int
    sender_id: int
    receiver_id: int
    content: str
    read: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, message: Message) -> "MessageDTO":
        return cls(
            id=message.id.value,
            sender_id=message.sender_id.value,
            receiver_id=message.receiver_id.value,
            content=message.content,
            read=message.read,
            created_at=message.created_at,
        )


class UnreadCountDTO(BaseModel):
    count: int
