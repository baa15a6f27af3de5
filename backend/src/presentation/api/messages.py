"""
Messages API Router - HTTP read-path for chat history.

Flow:
  HTTP Request → Router → Command/Query → Handler → MessageRepository
                                       ↓
  HTTP Response ← Router ← list[Message] → MessageDTO (camelCase, same shape as the socket push)
"""

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, Path

from src.application.commands.messages import (
    OpenConversationCommand,
    OpenConversationHandler,
)
from src.application.dto.chat import MessageDTO, UnreadCountDTO
from src.application.queries.messages import (
    GetUnreadCountHandler,
    GetUnreadCountQuery,
    ListRecentMessagesHandler,
    ListRecentMessagesQuery,
)
from src.config.settings import Config
from src.domain.value_objects import AuthIdentity, UserId
from src.presentation.dependencies.auth import get_current_user

# ==================== ROUTER ====================

router = APIRouter(prefix="/messages", tags=["messages"])


# ==================== ENDPOINTS ====================


@router.get("", response_model=list[MessageDTO])
@inject
async def list_recent_messages(
    handler: FromDishka[ListRecentMessagesHandler],
    current_user: AuthIdentity = Depends(get_current_user),
):
    """Latest messages the caller sent or received, newest first."""
    messages = await handler.execute(
        ListRecentMessagesQuery(
            user_id=current_user.id, limit=Config.RECENT_MESSAGE_LIMIT
        )
    )
    return [MessageDTO.from_entity(m) for m in messages]


@router.get("/unread/count", response_model=UnreadCountDTO)
@inject
async def get_unread_count(
    handler: FromDishka[GetUnreadCountHandler],
    current_user: AuthIdentity = Depends(get_current_user),
):
    count = await handler.execute(GetUnreadCountQuery(user_id=current_user.id))
    return UnreadCountDTO(count=count)


@router.get("/{other_user_id}", response_model=list[MessageDTO])
@inject
async def get_conversation(
    handler: FromDishka[OpenConversationHandler],
    other_user_id: int = Path(gt=0),
    current_user: AuthIdentity = Depends(get_current_user),
):
    """
    Conversation between the caller and another user, newest first.

    Messages the other user sent are marked read after loading; the response
    still shows them as loaded.
    """
    messages = await handler.execute(
        OpenConversationCommand(
            user_id=current_user.id,
            other_user_id=UserId(other_user_id),
            limit=Config.CONVERSATION_MESSAGE_LIMIT,
        )
    )
    return [MessageDTO.from_entity(m) for m in messages]
