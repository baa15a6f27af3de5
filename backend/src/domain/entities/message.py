"""
Message Entity - A direct chat message between two users.
"""

from dataclasses import dataclass
from datetime import datetime

from src.domain.value_objects.message_id import MessageId
from src.domain.value_objects.user_id import UserId


@dataclass
class Message:
    id: MessageId
    sender_id: UserId
    receiver_id: UserId
    content: str
    created_at: datetime
    read: bool = False

    def mark_as_read(self) -> None:
        """Read state only moves forward; there is no way back to unread."""
        self.read = True

    def is_between(self, user_a: UserId, user_b: UserId) -> bool:
        return (self.sender_id, self.receiver_id) in ((user_a, user_b), (user_b, user_a))

    def involves(self, user_id: UserId) -> bool:
        return user_id in (self.sender_id, self.receiver_id)
