"""
Notification Dispatcher - push server events to every live socket of a user.

Guidelines:
- Reads the registry through sockets(user_id) snapshots only
- A push failure on one socket (closed between lookup and send) is logged
  and skipped; it never fails the caller
- Returns an explicit outcome: True if at least one socket received the frame

Used by:
- RelayMessageHandler (message + message_sent)
- NotifyInvitationHandler (new_invitation)
"""

import asyncio
import logging
from typing import Any

from starlette.websockets import WebSocketState

from src.application.dto.events import ServerEvent, serialize_event
from src.domain.value_objects.user_id import UserId
from src.infrastructure.realtime.connection_registry import ConnectionRegistry
from src.observability import MetricsErrorType, increment_error

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    def __init__(self, registry: ConnectionRegistry):
        self._registry = registry

    async def notify(self, target_user_id: UserId, event: ServerEvent) -> bool:
        """
        Push one event to all of the user's live sockets.

        Returns:
            True if at least one socket accepted the frame, False if the user
            is offline or every push failed
        """
        sockets = self._registry.sockets(target_user_id)
        if not sockets:
            logger.debug(f"[Dispatcher] User {target_user_id} offline, {event.type} not pushed")
            return False

        frame = serialize_event(event)
        results = await asyncio.gather(
            *(self._push(socket, frame, target_user_id) for socket in sockets)
        )
        return any(results)

    async def _push(self, socket: Any, frame: str, user_id: UserId) -> bool:
        # The registry may still hold a socket whose close event is queued
        if getattr(socket, "application_state", WebSocketState.CONNECTED) != WebSocketState.CONNECTED:
            return False
        try:
            await socket.send_text(frame)
            return True
        except Exception as e:
            increment_error(MetricsErrorType.PUSH_FAILED)
            logger.warning(f"[Dispatcher] Push to user {user_id} failed: {e}")
            return False
