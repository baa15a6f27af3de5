"""Auth API Router - short-lived socket tokens for the /ws upgrade."""

import logging

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from src.config.settings import Config
from src.domain.ports import TokenService
from src.domain.value_objects import AuthIdentity
from src.presentation.api.rate_limit import limiter
from src.presentation.dependencies.auth import get_current_user

logger = logging.getLogger(__name__)


# ==================== RESPONSE MODELS ====================
class WsTokenResponse(BaseModel):
    token: str


# ==================== ROUTERS ====================
router = APIRouter(prefix="/auth", tags=["auth"])


# ==================== ENDPOINTS ====================
@router.get("/ws-token", response_model=WsTokenResponse)
@limiter.limit(Config.WS_TOKEN_RATE_LIMIT)
@inject
async def get_ws_token(
    request: Request,
    token_service: FromDishka[TokenService],
    current_user: AuthIdentity = Depends(get_current_user),
):
    """
    Exchange the caller's access token for a socket token.

    The socket token carries the same claims but expires after
    WS_TOKEN_TTL_SECONDS; clients fetch one right before connecting.
    """
    logger.debug(f"Issuing socket token for user {current_user.id}")
    return WsTokenResponse(token=token_service.mint_socket_token(current_user))
