"""
Base interfaces for CQRS pattern.

Usage:
    @dataclass(frozen=True)
    class RelayMessageCommand(Command[Message]):
        sender_id: UserId
        receiver_id: UserId
        content: str

    class RelayMessageHandler(CommandHandler[Message]):
        def __init__(self, msg_repo: MessageRepository, dispatcher: NotificationDispatcher):
            ...

        async def execute(self, cmd: RelayMessageCommand) -> Message:
            message = await self._msg_repo.create(...)
            await self._dispatcher.notify(...)
            return message
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

T = TypeVar("T")
class Command(ABC, Generic[T]):
    """Base class for write operations"""
    pass

class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T]) -> T:
        """Execute the command and return a result of type T"""
        ...

class Query(ABC, Generic[T]):
    """Base class for read operations"""
    pass

class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> T:
        """Execute the query and return a result of type T"""
        ...
