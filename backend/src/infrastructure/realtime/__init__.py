"""Realtime - live socket bookkeeping and push."""

from src.infrastructure.realtime.connection_registry import ConnectionRegistry
from src.infrastructure.realtime.notification_dispatcher import NotificationDispatcher

__all__ = ["ConnectionRegistry", "NotificationDispatcher"]
