"""
ListRecentMessages Query - the latest messages a user sent or received.

Feeds the dashboard's message preview list.
"""

from dataclasses import dataclass

from src.application.common.interfaces import Query, QueryHandler
from src.config.settings import Config
from src.domain.entities.message import Message
from src.domain.ports.repositories import MessageRepository
from src.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class ListRecentMessagesQuery(Query[list[Message]]):
    user_id: UserId
    limit: int = Config.RECENT_MESSAGE_LIMIT


class ListRecentMessagesHandler(QueryHandler[list[Message]]):
    def __init__(self, msg_repo: MessageRepository):
        self._msg_repo = msg_repo

    async def execute(self, query: ListRecentMessagesQuery) -> list[Message]:
        return await self._msg_repo.get_recent_by_user(query.user_id, limit=query.limit)
