"""
API Routers - FastAPI endpoint definitions.
"""

from src.presentation.api.auth import router as auth_router
from src.presentation.api.invitations import router as invitations_router
from src.presentation.api.messages import router as messages_router
from src.presentation.api.metrics import router as metrics_router
from src.presentation.api.realtime import router as realtime_router

__all__ = [
    "auth_router",
    "invitations_router",
    "messages_router",
    "metrics_router",
    "realtime_router",
]
