"""
Prisma Invitation Repository Implementation.

Mapping:
- Prisma model fields: id, job_id, candidate_id, message, status, created_at
- Domain entity: Invitation (same field names)
"""

from typing import Optional
from prisma import Prisma
from prisma.models import Invitation as PrismaInvitation
from src.domain.entities.invitation import Invitation
from src.domain.ports.repositories import InvitationRepository


class PrismaInvitationRepository(InvitationRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaInvitation) -> Invitation:
        """Map Prisma record to domain entity."""
        return Invitation(
            id=record.id,
            job_id=record.job_id,
            candidate_id=record.candidate_id,
            message=record.message,
            status=record.status,
            created_at=record.created_at,
        )

    async def get_by_id(self, invitation_id: int) -> Optional[Invitation]:
        """Get invitation by ID."""
        record = await self._prisma.invitation.find_unique(where={"id": invitation_id})
        return self._to_entity(record) if record else None

    async def create(
        self, job_id: int, candidate_id: int, message: Optional[str] = None
    ) -> Invitation:
        """Insert a pending invitation."""
        record = await self._prisma.invitation.create(
            data={
                "job_id": job_id,
                "candidate_id": candidate_id,
                "message": message,
            }
        )
        return self._to_entity(record)
