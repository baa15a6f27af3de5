"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.

Endpoints:
- /ws (chat socket), /auth/ws-token, /messages, /invitations, /metrics, /health
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from src.config.logging_config import NO_CORRELATION_ID, correlation_id_var, setup_logging
from src.config.settings import Config, get_config
from src.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
)
from src.presentation.api import (
    auth_router,
    invitations_router,
    messages_router,
    metrics_router,
    realtime_router,
)
from src.presentation.api.rate_limit import limiter
from src.setup.ioc.container import create_container

# Setup logging
settings = get_config()
setup_logging(settings.LOG_LEVEL, settings.LOG_PATH)

logger = logging.getLogger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        # Get correlation ID from header or use default
        correlation_id = request.headers.get("X-Correlation-ID", NO_CORRELATION_ID)

        # Set in contextvars (propagates to async tasks and logging)
        correlation_id_var.set(correlation_id)

        response = await call_next(request)
        response.headers["X-Correlation-ID"] = correlation_id
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager.

    - Startup: container and Dishka already set up by the factory
    - Shutdown: close DI container (disconnects Prisma and Redis)
    """
    logger.info("FastAPI application started. DI container initialized.")
    yield
    await app.state.dishka_container.close()
    logger.info("FastAPI application shutdown. DI container closed.")


def create_fastapi_app(
    container: Optional[AsyncContainer] = None, config: Optional[type[Config]] = None
) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: Pre-built Dishka container (tests pass one over a seeded
            in-memory database); defaults to create_container(config)
        config: Config class; defaults to get_config() for APP_ENV

    Returns:
        FastAPI application instance
    """
    config = config or get_config()

    app = FastAPI(
        debug=config.DEBUG,
        title="Job Board Messaging API",
        description="Real-time messaging and notifications for the job board",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Setup Dishka BEFORE app starts (must add middleware before startup)
    setup_dishka(container or create_container(config=config), app)

    # Correlation ID middleware (must be added before CORS)
    app.add_middleware(CorrelationIdMiddleware)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Rate limiting (slowapi reads the limiter from app.state)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Validation error handler - shows detailed Pydantic errors
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        logger.warning(f"[VALIDATION ERROR] {errors}")
        return JSONResponse(
            status_code=400,
            content={"error": "Validation error", "details": jsonable_errors(errors)},
        )

    # HTTP exception handler - catch all HTTPException including 400s
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.info(f"[HTTP ERROR {exc.status_code}] {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    # Domain errors that escaped a router
    @app.exception_handler(EntityNotFoundError)
    async def not_found_handler(request: Request, exc: EntityNotFoundError):
        return JSONResponse(status_code=404, content={"error": str(exc)})

    @app.exception_handler(AccessDeniedError)
    async def access_denied_handler(request: Request, exc: AccessDeniedError):
        return JSONResponse(status_code=403, content={"error": str(exc)})

    @app.exception_handler(DomainValidationError)
    async def domain_validation_handler(request: Request, exc: DomainValidationError):
        return JSONResponse(status_code=422, content={"error": str(exc)})

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"[GLOBAL ERROR] {type(exc).__name__}: {exc}")
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
        )

    # Health check routes
    @app.get("/", tags=["health"])
    async def root():
        return {"message": "FastAPI server is running."}

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    # Register routers
    app.include_router(realtime_router)  # WS {WS_PATH}
    app.include_router(auth_router)  # GET /auth/ws-token
    app.include_router(messages_router)  # GET /messages, /messages/unread/count, /messages/{id}
    app.include_router(invitations_router)  # POST /invitations
    app.include_router(metrics_router)  # GET /metrics

    return app


def jsonable_errors(errors) -> list[dict]:
    """Pydantic error dicts may carry exception objects in ctx; keep them JSON-safe."""
    return [
        {key: value for key, value in error.items() if key in ("loc", "msg", "type")}
        for error in errors
    ]


# Create the app instance
app = create_fastapi_app()
