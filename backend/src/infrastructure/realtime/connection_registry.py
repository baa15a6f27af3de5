"""
Connection Registry - in-memory table of user id → live sockets.

Guidelines:
- One instance per process, created by the DI container (Scope.APP)
- Only the socket connection handler mutates it (register on successful
  authentication, unregister on close/error); everyone else reads snapshots
- Runs on a single event loop, so no locking is needed

Data structure:
    {UserId(1): [<WebSocket tab A>, <WebSocket tab B>], UserId(2): [...]}

Starlette's WebSocket is a Mapping and therefore unhashable, so sockets are
kept in lists and matched by identity rather than equality.
"""

import logging
from typing import Any

from src.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


class ConnectionRegistry:
    def __init__(self):
        self._sessions: dict[UserId, list[Any]] = {}

    def register(self, user_id: UserId, socket: Any) -> None:
        sockets = self._sessions.setdefault(user_id, [])
        if any(existing is socket for existing in sockets):
            return
        sockets.append(socket)
        logger.info(
            f"[Registry] User {user_id} connected ({len(sockets)} session(s))"
        )

    def unregister(self, user_id: UserId, socket: Any) -> bool:
        """
        Remove exactly this (user, socket) pair.

        Returns:
            True if an entry was removed, False if it was not registered
        """
        sockets = self._sessions.get(user_id)
        if not sockets:
            return False

        remaining = [existing for existing in sockets if existing is not socket]
        if len(remaining) == len(sockets):
            return False

        if remaining:
            self._sessions[user_id] = remaining
        else:
            del self._sessions[user_id]
        logger.info(
            f"[Registry] User {user_id} disconnected ({len(remaining)} session(s) left)"
        )
        return True

    def sockets(self, user_id: UserId) -> list[Any]:
        """Snapshot of the user's live sockets; safe to iterate across awaits."""
        return list(self._sessions.get(user_id, ()))

    def is_connected(self, user_id: UserId) -> bool:
        return bool(self._sessions.get(user_id))

    def connection_count(self) -> int:
        return sum(len(sockets) for sockets in self._sessions.values())
