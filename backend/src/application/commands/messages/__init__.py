"""Message commands."""

from .open_conversation import OpenConversationCommand, OpenConversationHandler

__all__ = [
    "OpenConversationCommand",
    "OpenConversationHandler",
]
