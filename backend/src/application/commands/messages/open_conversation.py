"""
Open Conversation Command - the HTTP read-path for a chat thread.

Loads the messages exchanged between the caller and another user (newest
first), then marks the ones the other user sent as read. The messages are
returned as they were loaded, so a message the caller had not seen yet comes
back with read=False exactly as it was pushed live.
"""

import logging
from dataclasses import dataclass

from src.application.common.interfaces import Command, CommandHandler
from src.config.settings import Config
from src.domain.entities.message import Message
from src.domain.ports.repositories import MessageRepository
from src.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OpenConversationCommand(Command[list[Message]]):
    user_id: UserId
    other_user_id: UserId
    limit: int = Config.CONVERSATION_MESSAGE_LIMIT


class OpenConversationHandler(CommandHandler[list[Message]]):
    def __init__(self, msg_repo: MessageRepository):
        self._msg_repo = msg_repo

    async def execute(self, command: OpenConversationCommand) -> list[Message]:
        messages = await self._msg_repo.get_between_users(
            command.user_id, command.other_user_id, limit=command.limit
        )

        unread = [
            m for m in messages if m.sender_id == command.other_user_id and not m.read
        ]
        for message in unread:
            await self._msg_repo.mark_as_read(message.id)

        if unread:
            logger.debug(
                f"Marked {len(unread)} message(s) from {command.other_user_id} "
                f"to {command.user_id} as read"
            )
        return messages
