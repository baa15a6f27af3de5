"""End-to-end socket scenarios through the FastAPI app (in-memory storage)."""

from contextlib import contextmanager

import pytest
from dishka import Provider, Scope, provide
from fastapi import WebSocketDisconnect
from fastapi.testclient import TestClient

from src.config.settings import TestingConfig
from src.domain.ports.repositories import MessageRepository
from src.domain.value_objects import UserId
from src.fastapi_app import create_fastapi_app
from src.infrastructure.realtime import ConnectionRegistry
from src.setup.ioc.container import create_container
from fakes import FailingMessageRepository


def _chat(receiver_id, content):
    return {"type": "message", "receiverId": receiver_id, "content": content}


@pytest.mark.parametrize("token_kind", ["missing", "garbage", "expired", "tampered", "wrong_key"])
def test_bad_credentials_close_with_1008(client, registry, ws_url, make_token, tamper_token, token_kind):
    token = {
        "missing": None,
        "garbage": "not-a-token",
        "expired": make_token(2, ttl=-10),
        "tampered": tamper_token(make_token(2)),
        "wrong_key": make_token(2, secret="another-secret"),
    }[token_kind]

    with pytest.raises(WebSocketDisconnect) as exc_info:
        with client.websocket_connect(ws_url(token)) as ws:
            ws.receive_text()

    assert exc_info.value.code == 1008
    assert registry.connection_count() == 0


def test_socket_is_registered_while_open(client, registry, ws_url, make_token):
    with client.websocket_connect(ws_url(make_token(2))) as ws:
        # Round trip a frame so the server has certainly finished the handshake
        ws.send_text("ping")
        ws.receive_json()
        assert registry.is_connected(UserId(2))


def test_message_to_online_recipient(client, ws_url, make_token):
    with client.websocket_connect(ws_url(make_token(1))) as alice, client.websocket_connect(
        ws_url(make_token(2))
    ) as bob:
        alice.send_json(_chat(2, "Hello Bob"))

        pushed = bob.receive_json()
        ack = alice.receive_json()

    assert pushed["type"] == "message"
    message = pushed["message"]
    assert message["senderId"] == 1
    assert message["receiverId"] == 2
    assert message["content"] == "Hello Bob"
    assert message["read"] is False
    assert message["createdAt"]
    assert ack == {"type": "message_sent", "messageId": message["id"]}


def test_offline_recipient_reads_message_later(client, ws_url, make_token, auth_headers):
    with client.websocket_connect(ws_url(make_token(1))) as alice:
        alice.send_json(_chat(2, "Call me"))
        ack = alice.receive_json()

    assert ack["type"] == "message_sent"

    response = client.get("/messages/1", headers=auth_headers(2))
    assert response.status_code == 200
    [message] = response.json()
    assert message["id"] == ack["messageId"]
    assert message["content"] == "Call me"
    assert message["read"] is False

    # Fetching marked it read
    again = client.get("/messages/1", headers=auth_headers(2)).json()
    assert again[0]["read"] is True


def test_live_push_matches_later_fetch(client, ws_url, make_token, auth_headers):
    with client.websocket_connect(ws_url(make_token(1))) as alice, client.websocket_connect(
        ws_url(make_token(2))
    ) as bob:
        alice.send_json(_chat(2, "Same message"))
        pushed = bob.receive_json()["message"]
        alice.receive_json()

    [fetched] = client.get("/messages/1", headers=auth_headers(2)).json()
    assert fetched == pushed


def test_every_recipient_socket_gets_the_message(client, ws_url, make_token):
    with client.websocket_connect(ws_url(make_token(1))) as alice, client.websocket_connect(
        ws_url(make_token(2))
    ) as bob_tab_a, client.websocket_connect(ws_url(make_token(2))) as bob_tab_b:
        alice.send_json(_chat(2, "Both tabs"))

        frame_a = bob_tab_a.receive_json()
        frame_b = bob_tab_b.receive_json()
        alice.receive_json()

    assert frame_a == frame_b
    assert frame_a["message"]["content"] == "Both tabs"


def test_malformed_frame_keeps_connection_open(client, database, ws_url, make_token):
    with client.websocket_connect(ws_url(make_token(1))) as alice:
        alice.send_text("{not json")
        error = alice.receive_json()

        alice.send_json({"type": "message", "content": "no receiver"})
        missing = alice.receive_json()
        assert database.messages == {}

        alice.send_json(_chat(2, "still here"))
        ack = alice.receive_json()

    assert error["type"] == "error"
    assert error["message"].startswith("Invalid message payload")
    assert missing["type"] == "error"
    assert "receiverId" in missing["message"]
    assert ack["type"] == "message_sent"
    assert len(database.messages) == 1


def test_unknown_event_type_gets_error_frame(client, ws_url, make_token):
    with client.websocket_connect(ws_url(make_token(1))) as alice:
        alice.send_json({"type": "typing", "receiverId": 2})
        error = alice.receive_json()

    assert error == {
        "type": "error",
        "message": "Invalid message payload: Unsupported event type: 'typing'",
    }


def test_closing_one_tab_leaves_the_other(client, registry, ws_url, make_token):
    with client.websocket_connect(ws_url(make_token(1))) as alice:
        with client.websocket_connect(ws_url(make_token(2))) as bob_tab_b:
            with client.websocket_connect(ws_url(make_token(2))) as bob_tab_a:
                bob_tab_a.send_text("ping")
                bob_tab_a.receive_json()

            alice.send_json(_chat(2, "after close"))
            pushed = bob_tab_b.receive_json()
            alice.receive_json()

    assert pushed["message"]["content"] == "after close"


def test_disconnect_unregisters(client, registry, ws_url, make_token):
    with client.websocket_connect(ws_url(make_token(1))) as alice:
        with client.websocket_connect(ws_url(make_token(2))) as bob:
            bob.send_text("ping")
            bob.receive_json()

        # Alice's next relay is processed after Bob's disconnect was handled
        alice.send_json(_chat(2, "anyone?"))
        alice.receive_json()

        assert not registry.is_connected(UserId(2))
        assert registry.is_connected(UserId(1))


def test_binary_frame_that_is_not_utf8_gets_error_frame(client, database, ws_url, make_token):
    with client.websocket_connect(ws_url(make_token(1))) as alice:
        alice.send_bytes(b'{"type":"message","receiverId":2,"content":"caf\xe9"}')
        error = alice.receive_json()

        alice.send_bytes('{"type":"message","receiverId":2,"content":"café"}'.encode())
        ack = alice.receive_json()

    assert error == {
        "type": "error",
        "message": "Invalid message payload: Frame is not valid UTF-8",
    }
    assert ack["type"] == "message_sent"
    [stored] = database.messages.values()
    assert stored.content == "café"


class FailingWritesProvider(Provider):
    @provide(scope=Scope.REQUEST)
    def get_message_repository(self) -> MessageRepository:
        return FailingMessageRepository()


class StorageDownProvider(Provider):
    @provide(scope=Scope.REQUEST)
    def get_message_repository(self) -> MessageRepository:
        raise ConnectionError("could not connect to the database")


class RedisDownConfig(TestingConfig):
    REDIS_ENABLED = True
    REDIS_URL = "redis://127.0.0.1:1/0"


@contextmanager
def _client_for(container):
    with TestClient(create_fastapi_app(container)) as test_client:
        yield test_client


@pytest.mark.parametrize("provider", [FailingWritesProvider, StorageDownProvider])
def test_storage_failure_sends_error_frame_and_keeps_connection(
    database, ws_url, make_token, provider
):
    container = create_container(database, overrides=[provider()])

    with _client_for(container) as client, client.websocket_connect(
        ws_url(make_token(1))
    ) as alice, client.websocket_connect(ws_url(make_token(2))) as bob:
        alice.send_json(_chat(2, "lost"))
        error = alice.receive_json()

        # Same connection still answers the next frame
        alice.send_text("{not json")
        follow_up = alice.receive_json()

        alice.send_json(_chat(2, "lost again"))
        second_error = alice.receive_json()

        registry = client.portal.call(container.get, ConnectionRegistry)
        assert registry.is_connected(UserId(1))
        assert registry.is_connected(UserId(2))

    assert error == {"type": "error", "message": "Failed to deliver message"}
    assert follow_up["message"].startswith("Invalid message payload")
    assert second_error == error
    assert database.messages == {}


def test_unreachable_redis_still_relays(database, ws_url, make_token):
    container = create_container(database, config=RedisDownConfig)

    with _client_for(container) as client, client.websocket_connect(
        ws_url(make_token(1))
    ) as alice, client.websocket_connect(ws_url(make_token(2))) as bob:
        alice.send_json(_chat(2, "no cache today"))
        pushed = bob.receive_json()
        ack = alice.receive_json()

    assert pushed["type"] == "message"
    assert ack == {"type": "message_sent", "messageId": pushed["message"]["id"]}
    assert len(database.messages) == 1
