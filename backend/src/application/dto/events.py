"""
Socket event DTOs - the JSON frames exchanged over /ws.

Client → Server:
    {"type": "message", "receiverId": 2, "content": "hi"}

Server → Client (closed set, discriminated on "type"):
    {"type": "message", "message": {...Message}}
    {"type": "message_sent", "messageId": 7}
    {"type": "error", "message": "..."}
    {"type": "new_invitation", "invitation": {...Invitation, "job": {..., "company": {...}}}}
"""

import json
from typing import Annotated, Literal, Union

from pydantic import Field, StrictInt, TypeAdapter, ValidationError

from src.application.dto.chat import CamelModel, MessageDTO
from src.application.dto.invitation import InvitationDetailDTO
from src.config.settings import Config
from src.domain.exceptions import MalformedPayloadError


# ==================== CLIENT → SERVER ====================


class ChatMessageFrame(CamelModel):
    type: Literal["message"]
    receiver_id: StrictInt = Field(gt=0)
    content: str = Field(min_length=1, max_length=Config.MAX_MESSAGE_LENGTH)


CLIENT_FRAME_TYPES = {"message": ChatMessageFrame}


def parse_client_frame(raw: str | bytes) -> ChatMessageFrame:
    """
    Parse one inbound frame. Binary frames must carry UTF-8 encoded JSON.

    Raises:
        MalformedPayloadError: not UTF-8, not JSON, not an object, unknown type,
            or missing/invalid receiverId/content
    """
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedPayloadError("Frame is not valid UTF-8") from e

    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise MalformedPayloadError("Frame is not valid JSON") from e

    if not isinstance(data, dict):
        raise MalformedPayloadError("Frame must be a JSON object")

    frame_type = data.get("type")
    model = CLIENT_FRAME_TYPES.get(frame_type) if isinstance(frame_type, str) else None
    if model is None:
        raise MalformedPayloadError(f"Unsupported event type: {frame_type!r}")

    try:
        return model.model_validate(data)
    except ValidationError as e:
        fields = ", ".join(
            ".".join(str(part) for part in err["loc"]) or "frame" for err in e.errors()
        )
        raise MalformedPayloadError(f"Invalid or missing fields: {fields}") from e


# ==================== SERVER → CLIENT ====================


class MessageEvent(CamelModel):
    type: Literal["message"] = "message"
    message: MessageDTO


class MessageSentEvent(CamelModel):
    type: Literal["message_sent"] = "message_sent"
    message_id: int


class ErrorEvent(CamelModel):
    type: Literal["error"] = "error"
    message: str


class NewInvitationEvent(CamelModel):
    type: Literal["new_invitation"] = "new_invitation"
    invitation: InvitationDetailDTO


ServerEvent = Annotated[
    Union[MessageEvent, MessageSentEvent, ErrorEvent, NewInvitationEvent],
    Field(discriminator="type"),
]

server_event_adapter: TypeAdapter[ServerEvent] = TypeAdapter(ServerEvent)


def serialize_event(event: ServerEvent) -> str:
    return server_event_adapter.dump_json(event, by_alias=True).decode("utf-8")


def parse_server_event(raw: str) -> ServerEvent:
    """Decode a server frame (used by clients and tests)."""
    return server_event_adapter.validate_json(raw)
