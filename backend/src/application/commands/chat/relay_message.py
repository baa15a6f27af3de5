"""
Relay Message Command - persist a chat message, then push it.

Flow (order matters):
  1. Persist via MessageRepository.create       ← must succeed first
  2. Snapshot the recipient's live sockets
  3. Push {"type": "message", "message": ...} to each recipient socket
  4. Push {"type": "message_sent", "messageId": ...} to the sender's sockets

Guarantees:
- Exactly one stored Message per relay (assuming the insert is atomic)
- At-least-once push to each recipient socket live at step 2
- The sender is confirmed whether or not the recipient is online
- A recipient socket closing mid-relay does not undo persistence; its push
  failure is swallowed by the dispatcher
"""

import logging
import time
from dataclasses import dataclass

from src.application.common.interfaces import Command, CommandHandler
from src.application.dto.chat import MessageDTO
from src.application.dto.events import MessageEvent, MessageSentEvent
from src.domain.entities.message import Message
from src.domain.exceptions import StorageFailureError
from src.domain.ports.repositories import MessageRepository
from src.domain.value_objects.user_id import UserId
from src.infrastructure.realtime.notification_dispatcher import NotificationDispatcher
from src.observability import increment_messages_relayed, observe_relay_latency

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RelayMessageCommand(Command[Message]):
    sender_id: UserId
    receiver_id: UserId
    content: str


class RelayMessageHandler(CommandHandler[Message]):
    def __init__(
        self,
        msg_repo: MessageRepository,
        dispatcher: NotificationDispatcher,
    ):
        self._msg_repo = msg_repo
        self._dispatcher = dispatcher

    async def execute(self, command: RelayMessageCommand) -> Message:
        """
        Relay one chat message.

        Returns:
            The persisted Message

        Raises:
            StorageFailureError: persistence failed; nothing was pushed
        """
        started = time.perf_counter()

        try:
            message = await self._msg_repo.create(
                sender_id=command.sender_id,
                receiver_id=command.receiver_id,
                content=command.content,
            )
        except Exception as e:
            logger.error(
                f"[Relay] Persisting message {command.sender_id} -> {command.receiver_id} failed: {e}"
            )
            raise StorageFailureError("Failed to persist message") from e

        recipient_online = await self._dispatcher.notify(
            command.receiver_id,
            MessageEvent(message=MessageDTO.from_entity(message)),
        )
        await self._dispatcher.notify(
            command.sender_id,
            MessageSentEvent(message_id=message.id.value),
        )

        increment_messages_relayed(recipient_online)
        observe_relay_latency(time.perf_counter() - started)
        logger.info(
            f"[Relay] Message {message.id} {command.sender_id} -> {command.receiver_id} "
            f"({'delivered live' if recipient_online else 'persisted only'})"
        )
        return message
