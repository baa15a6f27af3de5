"""Chat commands."""

from .relay_message import RelayMessageCommand, RelayMessageHandler

__all__ = [
    "RelayMessageCommand",
    "RelayMessageHandler",
]
