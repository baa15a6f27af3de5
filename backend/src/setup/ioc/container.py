"""
Dishka DI Container Setup.

Guidelines:
- Registers all dependencies (repositories, handlers, services)
- Maps abstract interfaces to concrete implementations
- Manages lifecycle (singleton, per-connection, per-request)

Dishka concepts:
- Provider: Class that defines how to create dependencies
- @provide: Decorator to mark factory methods
- @decorate: Wrap an already-provided dependency (used for Redis caching)
- Scope: Lifecycle of dependency
    APP     = singleton (registry, dispatcher, token service, DB clients)
    SESSION = one WebSocket connection
    REQUEST = one HTTP request, or one inbound socket frame
- make_async_container: Creates the container

Flow:
  Container → provides → InMemory/Prisma MessageRepository → to → RelayMessageHandler
                                    ↓
                            uses MessageRepository interface
"""

from typing import AsyncIterable, Optional, Sequence

from dishka import (
    AsyncContainer,
    Provider,
    Scope,
    decorate,
    make_async_container,
    provide,
)
from dishka.integrations.fastapi import FastapiProvider
from redis.asyncio import Redis

from src.application.commands.chat import RelayMessageHandler
from src.application.commands.invitations import CreateInvitationHandler
from src.application.commands.messages import OpenConversationHandler
from src.application.commands.notifications import NotifyInvitationHandler
from src.application.queries.messages import (
    GetUnreadCountHandler,
    ListRecentMessagesHandler,
)
from src.config.settings import Config, get_config
from src.domain.ports import TokenService
from src.domain.ports.repositories import (
    CandidateProfileRepository,
    CompanyRepository,
    InvitationRepository,
    JobRepository,
    MessageRepository,
)
from src.infrastructure.cache import (
    CachedMessageRepository,
    close_redis_client,
    create_redis_client,
)
from src.infrastructure.persistence import (
    InMemoryCandidateProfileRepository,
    InMemoryCompanyRepository,
    InMemoryDatabase,
    InMemoryInvitationRepository,
    InMemoryJobRepository,
    InMemoryMessageRepository,
)
from src.infrastructure.realtime import ConnectionRegistry, NotificationDispatcher
from src.infrastructure.security import JwtTokenService


class AppProvider(Provider):
    """
    Application dependency provider.

    Storage-independent dependencies: credentials, the socket registry and
    push, and every command/query handler.
    """

    def __init__(self, config: type[Config] = Config):
        super().__init__()
        self._config = config

    # ==================== SECURITY ====================
    @provide(scope=Scope.APP)
    def get_token_service(self) -> TokenService:
        return JwtTokenService(
            secret=self._config.SERVICE_AUTH_SECRET,
            issuer=self._config.SERVICE_AUTH_ISSUER,
            audience=self._config.SERVICE_AUTH_AUDIENCE,
            access_ttl_seconds=self._config.ACCESS_TOKEN_TTL_SECONDS,
            socket_ttl_seconds=self._config.WS_TOKEN_TTL_SECONDS,
        )

    # ==================== REALTIME ====================
    @provide(scope=Scope.APP)
    def get_connection_registry(self) -> ConnectionRegistry:
        """
        One registry per process.

        - Scope.APP = created ONCE, shared by every socket and every HTTP route
        - Only the /ws connection handler mutates it
        """
        return ConnectionRegistry()

    @provide(scope=Scope.APP)
    def get_notification_dispatcher(
        self, registry: ConnectionRegistry
    ) -> NotificationDispatcher:
        return NotificationDispatcher(registry)

    # ==================== HANDLERS ====================
    @provide(scope=Scope.REQUEST)
    def get_relay_message_handler(
        self,
        message_repository: MessageRepository,
        dispatcher: NotificationDispatcher,
    ) -> RelayMessageHandler:
        return RelayMessageHandler(msg_repo=message_repository, dispatcher=dispatcher)

    @provide(scope=Scope.REQUEST)
    def get_notify_invitation_handler(
        self,
        invitation_repository: InvitationRepository,
        job_repository: JobRepository,
        company_repository: CompanyRepository,
        candidate_repository: CandidateProfileRepository,
        dispatcher: NotificationDispatcher,
    ) -> NotifyInvitationHandler:
        return NotifyInvitationHandler(
            invitation_repo=invitation_repository,
            job_repo=job_repository,
            company_repo=company_repository,
            candidate_repo=candidate_repository,
            dispatcher=dispatcher,
        )

    @provide(scope=Scope.REQUEST)
    def get_create_invitation_handler(
        self,
        invitation_repository: InvitationRepository,
        job_repository: JobRepository,
        company_repository: CompanyRepository,
        candidate_repository: CandidateProfileRepository,
    ) -> CreateInvitationHandler:
        return CreateInvitationHandler(
            invitation_repo=invitation_repository,
            job_repo=job_repository,
            company_repo=company_repository,
            candidate_repo=candidate_repository,
        )

    @provide(scope=Scope.REQUEST)
    def get_open_conversation_handler(
        self, message_repository: MessageRepository
    ) -> OpenConversationHandler:
        return OpenConversationHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_recent_messages_handler(
        self, message_repository: MessageRepository
    ) -> ListRecentMessagesHandler:
        return ListRecentMessagesHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_unread_count_handler(
        self, message_repository: MessageRepository
    ) -> GetUnreadCountHandler:
        return GetUnreadCountHandler(message_repository)


class InMemoryStorageProvider(Provider):
    """
    Repositories over a process-local InMemoryDatabase.

    Pass a pre-seeded database to share it with the caller (tests, demos).
    """

    def __init__(self, database: Optional[InMemoryDatabase] = None):
        super().__init__()
        self._database = database if database is not None else InMemoryDatabase()

    @provide(scope=Scope.APP)
    def get_database(self) -> InMemoryDatabase:
        return self._database

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, db: InMemoryDatabase) -> MessageRepository:
        """
        - Return type is ABSTRACT (MessageRepository)
        - Implementation is CONCRETE (InMemoryMessageRepository)
        """
        return InMemoryMessageRepository(db)

    @provide(scope=Scope.REQUEST)
    def get_invitation_repository(self, db: InMemoryDatabase) -> InvitationRepository:
        return InMemoryInvitationRepository(db)

    @provide(scope=Scope.REQUEST)
    def get_job_repository(self, db: InMemoryDatabase) -> JobRepository:
        return InMemoryJobRepository(db)

    @provide(scope=Scope.REQUEST)
    def get_company_repository(self, db: InMemoryDatabase) -> CompanyRepository:
        return InMemoryCompanyRepository(db)

    @provide(scope=Scope.REQUEST)
    def get_candidate_profile_repository(
        self, db: InMemoryDatabase
    ) -> CandidateProfileRepository:
        return InMemoryCandidateProfileRepository(db)


class CacheProvider(Provider):
    """
    Redis client and the caching decorator around MessageRepository.

    The client is created without a reachability check: an unavailable Redis
    degrades to uncached reads and writes instead of failing them.
    """

    def __init__(self, config: type[Config] = Config):
        super().__init__()
        self._config = config

    @provide(scope=Scope.APP)
    async def get_redis(self) -> AsyncIterable[Redis]:
        client = await create_redis_client(self._config.REDIS_URL)
        yield client
        await close_redis_client(client)

    @decorate
    def cache_message_repository(
        self, repo: MessageRepository, redis: Redis
    ) -> MessageRepository:
        return CachedMessageRepository(repo, redis, ttl=self._config.REDIS_CACHE_TTL)


def create_container(
    database: Optional[InMemoryDatabase] = None,
    config: Optional[type[Config]] = None,
    overrides: Sequence[Provider] = (),
) -> AsyncContainer:
    """
    Create and configure the DI container.

    Args:
        database: Pre-seeded in-memory database; forces the in-memory backend
        config: Config class to build from; defaults to get_config() (APP_ENV)
        overrides: Extra providers registered last, replacing earlier bindings

    - STORAGE_BACKEND=memory (or an explicit database) → in-memory repositories
    - STORAGE_BACKEND=prisma → Prisma repositories against DATABASE_URL
    - REDIS_ENABLED → unread counts cached in Redis
    """
    config = config or get_config()
    providers: list[Provider] = [AppProvider(config), FastapiProvider()]

    if database is not None or config.STORAGE_BACKEND == "memory":
        providers.append(InMemoryStorageProvider(database))
    elif config.STORAGE_BACKEND == "prisma":
        # Importing prisma requires a generated client, so only do it when selected
        from src.setup.ioc.prisma_provider import PrismaStorageProvider

        providers.append(PrismaStorageProvider(config))
    else:
        raise ValueError(f"Unknown STORAGE_BACKEND: {config.STORAGE_BACKEND!r}")

    if config.REDIS_ENABLED:
        providers.append(CacheProvider(config))

    providers.extend(overrides)
    return make_async_container(*providers)
