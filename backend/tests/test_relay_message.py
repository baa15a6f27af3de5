import pytest

from src.application.commands.chat import RelayMessageCommand, RelayMessageHandler
from src.application.dto.events import MessageEvent, MessageSentEvent
from src.domain.exceptions import StorageFailureError
from src.domain.value_objects import MessageId, UserId
from src.infrastructure.persistence import InMemoryDatabase, InMemoryMessageRepository
from src.infrastructure.realtime import ConnectionRegistry, NotificationDispatcher
from fakes import FailingMessageRepository, FakeSocket

ALICE, BOB = UserId(1), UserId(2)


@pytest.fixture()
def registry():
    return ConnectionRegistry()


@pytest.fixture()
def repo():
    return InMemoryMessageRepository(InMemoryDatabase())


@pytest.fixture()
def handler(repo, registry):
    return RelayMessageHandler(msg_repo=repo, dispatcher=NotificationDispatcher(registry))


@pytest.mark.asyncio
async def test_message_is_persisted_unread_before_push(handler, repo, registry):
    bob_socket = FakeSocket()
    registry.register(BOB, bob_socket)

    message = await handler.execute(
        RelayMessageCommand(sender_id=ALICE, receiver_id=BOB, content="Hello")
    )

    stored = await repo.get_by_id(message.id)
    assert stored is not None
    assert stored.read is False
    assert stored.created_at is not None
    [event] = bob_socket.events
    assert isinstance(event, MessageEvent)
    assert event.message.id == message.id.value
    assert event.message.content == "Hello"
    assert event.message.read is False


@pytest.mark.asyncio
async def test_sender_is_confirmed_when_recipient_offline(handler, registry):
    alice_socket = FakeSocket()
    registry.register(ALICE, alice_socket)

    message = await handler.execute(
        RelayMessageCommand(sender_id=ALICE, receiver_id=BOB, content="Are you there?")
    )

    assert alice_socket.events == [MessageSentEvent(message_id=message.id.value)]


@pytest.mark.asyncio
async def test_all_recipient_sockets_receive_the_message(handler, registry):
    tabs = [FakeSocket(), FakeSocket()]
    for tab in tabs:
        registry.register(BOB, tab)

    await handler.execute(RelayMessageCommand(sender_id=ALICE, receiver_id=BOB, content="Hi"))

    assert tabs[0].frames == tabs[1].frames
    assert len(tabs[0].frames) == 1


@pytest.mark.asyncio
async def test_closed_recipient_socket_does_not_undo_persistence(handler, repo, registry):
    registry.register(BOB, FakeSocket(fail=True))
    alice_socket = FakeSocket()
    registry.register(ALICE, alice_socket)

    message = await handler.execute(
        RelayMessageCommand(sender_id=ALICE, receiver_id=BOB, content="Hi")
    )

    assert await repo.get_by_id(message.id) is not None
    assert alice_socket.events == [MessageSentEvent(message_id=message.id.value)]


@pytest.mark.asyncio
async def test_storage_failure_pushes_nothing(registry):
    bob_socket, alice_socket = FakeSocket(), FakeSocket()
    registry.register(BOB, bob_socket)
    registry.register(ALICE, alice_socket)
    handler = RelayMessageHandler(
        msg_repo=FailingMessageRepository(), dispatcher=NotificationDispatcher(registry)
    )

    with pytest.raises(StorageFailureError):
        await handler.execute(RelayMessageCommand(sender_id=ALICE, receiver_id=BOB, content="Hi"))

    assert bob_socket.frames == []
    assert alice_socket.frames == []


@pytest.mark.asyncio
async def test_ids_increase_per_relay(handler):
    first = await handler.execute(RelayMessageCommand(sender_id=ALICE, receiver_id=BOB, content="1"))
    second = await handler.execute(RelayMessageCommand(sender_id=ALICE, receiver_id=BOB, content="2"))

    assert second.id.value > first.id.value
    assert first.id == MessageId(1)
