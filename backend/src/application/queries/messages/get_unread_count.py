"""
GetUnreadCount Query - how many messages addressed to a user are still unread.
"""

from dataclasses import dataclass

from src.application.common.interfaces import Query, QueryHandler
from src.domain.ports.repositories import MessageRepository
from src.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class GetUnreadCountQuery(Query[int]):
    user_id: UserId


class GetUnreadCountHandler(QueryHandler[int]):
    def __init__(self, msg_repo: MessageRepository):
        self._msg_repo = msg_repo

    async def execute(self, query: GetUnreadCountQuery) -> int:
        return await self._msg_repo.count_unread(query.user_id)
