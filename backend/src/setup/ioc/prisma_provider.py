"""
Prisma storage provider - repositories backed by PostgreSQL.

Requires the generated client:
    prisma generate --schema backend/prisma/schema.prisma
"""

from typing import AsyncIterable

from dishka import Provider, Scope, provide
from prisma import Prisma

from src.config.settings import Config
from src.domain.ports.repositories import (
    CandidateProfileRepository,
    CompanyRepository,
    InvitationRepository,
    JobRepository,
    MessageRepository,
)
from src.infrastructure.persistence.prisma_invitation_repository import (
    PrismaInvitationRepository,
)
from src.infrastructure.persistence.prisma_lookup_repositories import (
    PrismaCandidateProfileRepository,
    PrismaCompanyRepository,
    PrismaJobRepository,
)
from src.infrastructure.persistence.prisma_message_repository import (
    PrismaMessageRepository,
)


class PrismaStorageProvider(Provider):
    def __init__(self, config: type[Config] = Config):
        super().__init__()
        self._config = config

    # ==================== DATABASE ====================
    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        - Scope.APP = connected ONCE, shared across all requests and sockets
        - Uses DATABASE_URL when set, otherwise the datasource in schema.prisma
        - Disconnected when the container is closed on shutdown
        """
        url = self._config.DATABASE_URL
        prisma = Prisma(datasource={"url": url}) if url else Prisma()
        await prisma.connect()
        yield prisma
        await prisma.disconnect()

    # ==================== REPOSITORIES ====================
    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, prisma: Prisma) -> MessageRepository:
        return PrismaMessageRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_invitation_repository(self, prisma: Prisma) -> InvitationRepository:
        return PrismaInvitationRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_job_repository(self, prisma: Prisma) -> JobRepository:
        return PrismaJobRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_company_repository(self, prisma: Prisma) -> CompanyRepository:
        return PrismaCompanyRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_candidate_profile_repository(
        self, prisma: Prisma
    ) -> CandidateProfileRepository:
        return PrismaCandidateProfileRepository(prisma)
