"""
Prisma read-only lookups for the records the notification payload is built from.

Jobs, companies and candidate profiles are owned by the job board's CRUD
routes; the messaging core only reads them.
"""

from typing import Optional
from prisma import Prisma
from prisma.models import (
    CandidateProfile as PrismaCandidateProfile,
    Company as PrismaCompany,
    Job as PrismaJob,
)
from src.domain.entities.candidate_profile import CandidateProfile
from src.domain.entities.company import Company
from src.domain.entities.job import Job
from src.domain.ports.repositories import (
    CandidateProfileRepository,
    CompanyRepository,
    JobRepository,
)
from src.domain.value_objects.user_id import UserId


class PrismaJobRepository(JobRepository):
    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaJob) -> Job:
        return Job(
            id=record.id,
            company_id=record.company_id,
            title=record.title,
            description=record.description,
            type=record.type,
            location=record.location,
            requirements=list(record.requirements or []),
            is_remote=record.is_remote,
            created_at=record.created_at,
            expires_at=record.expires_at,
        )

    async def get_by_id(self, job_id: int) -> Optional[Job]:
        record = await self._prisma.job.find_unique(where={"id": job_id})
        return self._to_entity(record) if record else None


class PrismaCompanyRepository(CompanyRepository):
    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaCompany) -> Company:
        return Company(
            id=record.id,
            owner_id=UserId(record.owner_id),
            name=record.name,
            description=record.description,
            industry=record.industry,
            location=record.location,
            logo_url=record.logo_url,
            website=record.website,
        )

    async def get_by_id(self, company_id: int) -> Optional[Company]:
        record = await self._prisma.company.find_unique(where={"id": company_id})
        return self._to_entity(record) if record else None


class PrismaCandidateProfileRepository(CandidateProfileRepository):
    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaCandidateProfile) -> CandidateProfile:
        return CandidateProfile(
            id=record.id,
            user_id=UserId(record.user_id),
            first_name=record.first_name,
            last_name=record.last_name,
            headline=record.headline,
            bio=record.bio,
            location=record.location,
            resume_url=record.resume_url,
            profile_complete=record.profile_complete,
            education=list(record.education or []),
            experience=list(record.experience or []),
            skills=list(record.skills or []),
        )

    async def get_by_id(self, profile_id: int) -> Optional[CandidateProfile]:
        record = await self._prisma.candidateprofile.find_unique(where={"id": profile_id})
        return self._to_entity(record) if record else None
