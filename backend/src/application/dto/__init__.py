"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- chat.py       → MessageDTO, UnreadCountDTO
- invitation.py → InvitationDTO, InvitationDetailDTO
- events.py     → socket frames (ChatMessageFrame in, ServerEvent out)

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
"""

from src.application.dto.chat import MessageDTO, UnreadCountDTO
from src.application.dto.invitation import InvitationDTO, InvitationDetailDTO
from src.application.dto.events import (
    ChatMessageFrame,
    MessageEvent,
    MessageSentEvent,
    ErrorEvent,
    NewInvitationEvent,
    ServerEvent,
    parse_client_frame,
    parse_server_event,
    serialize_event,
)

__all__ = [
    "MessageDTO",
    "UnreadCountDTO",
    "InvitationDTO",
    "InvitationDetailDTO",
    "ChatMessageFrame",
    "MessageEvent",
    "MessageSentEvent",
    "ErrorEvent",
    "NewInvitationEvent",
    "ServerEvent",
    "parse_client_frame",
    "parse_server_event",
    "serialize_event",
]
