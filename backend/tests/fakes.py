"""Test doubles shared by the unit tests."""

from starlette.websockets import WebSocketState

from src.application.dto.events import parse_server_event


class FakeSocket:
    """Stands in for a Starlette WebSocket: records frames sent to it."""

    def __init__(self, fail: bool = False):
        self.application_state = WebSocketState.CONNECTED
        self.frames: list[str] = []
        self._fail = fail

    async def send_text(self, data: str) -> None:
        if self._fail:
            raise RuntimeError("Cannot call send once a close message has been sent.")
        self.frames.append(data)

    @property
    def events(self):
        return [parse_server_event(frame) for frame in self.frames]


class FailingMessageRepository:
    """MessageRepository whose writes always fail."""

    async def create(self, sender_id, receiver_id, content):
        raise ConnectionError("database is unavailable")
