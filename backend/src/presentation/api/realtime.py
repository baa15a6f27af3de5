"""
Realtime API Router - the authenticated chat socket.

Connection lifecycle:
  1. Client opens  GET {WS_PATH}?token=<socket token>
  2. Token is verified; on failure the socket is closed with 1008 and never registered
  3. (user, socket) is added to the ConnectionRegistry
  4. Frames are read one at a time; each {"type": "message"} frame runs
     RelayMessageCommand in its own DI request scope
  5. On disconnect or error the pair is removed from the registry

Frames from one connection are handled sequentially, so messages a socket
sends are persisted and pushed in the order they were sent.
"""

import logging

from dishka import AsyncContainer
from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Query, WebSocket, WebSocketDisconnect, status
from starlette.websockets import WebSocketState

from src.application.commands.chat import RelayMessageCommand, RelayMessageHandler
from src.application.dto.events import ErrorEvent, parse_client_frame, serialize_event
from src.config.logging_config import correlation_id_var
from src.config.settings import Config
from src.domain.exceptions import (
    MalformedPayloadError,
    StorageFailureError,
    UnauthenticatedError,
)
from src.domain.ports import TokenService
from src.domain.value_objects import AuthIdentity, UserId
from src.infrastructure.realtime import ConnectionRegistry
from src.observability import (
    MetricsErrorType,
    decrement_active_connections,
    increment_active_connections,
    increment_auth_failure,
    increment_error,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["realtime"])


@router.websocket(Config.WS_PATH)
@inject
async def chat_socket(
    websocket: WebSocket,
    token_service: FromDishka[TokenService],
    registry: FromDishka[ConnectionRegistry],
    container: FromDishka[AsyncContainer],
    token: str | None = Query(default=None),
):
    await websocket.accept()

    try:
        identity = token_service.verify(token or "")
    except UnauthenticatedError as e:
        increment_auth_failure()
        logger.warning(f"[WS] Rejected connection: {e.message}")
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION, reason=e.message)
        return

    correlation_id_var.set(
        websocket.headers.get("X-Correlation-ID") or f"ws-user-{identity.id}"
    )
    registry.register(identity.id, websocket)
    increment_active_connections()

    try:
        while True:
            raw = await _receive_frame(websocket)
            await _handle_frame(websocket, container, identity, raw)
    except WebSocketDisconnect as e:
        logger.info(f"[WS] User {identity.id} disconnected (code {e.code})")
    except Exception as e:
        increment_error(MetricsErrorType.CONNECTION_ERROR)
        logger.exception(f"[WS] Connection error for user {identity.id}: {e}")
        await _close_quietly(websocket, status.WS_1011_INTERNAL_ERROR)
    finally:
        registry.unregister(identity.id, websocket)
        decrement_active_connections()


async def _receive_frame(websocket: WebSocket) -> str | bytes:
    message = await websocket.receive()
    if message["type"] == "websocket.disconnect":
        raise WebSocketDisconnect(message.get("code", status.WS_1000_NORMAL_CLOSURE))
    if message.get("text") is not None:
        return message["text"]
    return message.get("bytes") or b""


async def _handle_frame(
    websocket: WebSocket,
    container: AsyncContainer,
    identity: AuthIdentity,
    raw: str | bytes,
) -> None:
    try:
        frame = parse_client_frame(raw)
    except MalformedPayloadError as e:
        increment_error(MetricsErrorType.MALFORMED_PAYLOAD)
        logger.warning(f"[WS] Malformed frame from user {identity.id}: {e.message}")
        await _send_error(websocket, f"Invalid message payload: {e.message}")
        return

    async with container() as request_container:
        try:
            handler = await _relay_handler(request_container)
            await handler.execute(
                RelayMessageCommand(
                    sender_id=identity.id,
                    receiver_id=UserId(frame.receiver_id),
                    content=frame.content,
                )
            )
        except StorageFailureError:
            increment_error(MetricsErrorType.STORAGE_FAILED)
            await _send_error(websocket, "Failed to deliver message")


async def _relay_handler(request_container: AsyncContainer) -> RelayMessageHandler:
    # App-scoped storage clients (Prisma, Redis) are created on first use here
    try:
        return await request_container.get(RelayMessageHandler)
    except Exception as e:
        logger.error(f"[WS] Storage unavailable: {e}")
        raise StorageFailureError("Storage unavailable") from e


async def _send_error(websocket: WebSocket, message: str) -> None:
    await websocket.send_text(serialize_event(ErrorEvent(message=message)))


async def _close_quietly(websocket: WebSocket, code: int) -> None:
    if (
        websocket.application_state != WebSocketState.CONNECTED
        or websocket.client_state != WebSocketState.CONNECTED
    ):
        return
    try:
        await websocket.close(code=code)
    except RuntimeError as e:
        logger.debug(f"[WS] Close after error failed: {e}")
