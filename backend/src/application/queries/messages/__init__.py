"""Message queries."""

from .list_recent_messages import ListRecentMessagesQuery, ListRecentMessagesHandler
from .get_unread_count import GetUnreadCountQuery, GetUnreadCountHandler

__all__ = [
    "ListRecentMessagesQuery",
    "ListRecentMessagesHandler",
    "GetUnreadCountQuery",
    "GetUnreadCountHandler",
]
