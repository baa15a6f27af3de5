"""Invitation DTOs - the aggregate pushed with a new_invitation event."""

from datetime import datetime
from typing import Any, Optional

from src.application.dto.chat import CamelModel
from src.domain.entities.company import Company
from src.domain.entities.invitation import Invitation
from src.domain.entities.job import Job


class CompanyDTO(CamelModel):
    id: int
    owner_id: int
    name: str
    description: Optional[str] = None
    industry: Optional[str] = None
    location: Optional[str] = None
    logo_url: Optional[str] = None
    website: Optional[str] = None

    @classmethod
    def from_entity(cls, company: Company) -> "CompanyDTO":
        return cls(
            id=company.id,
            owner_id=company.owner_id.value,
            name=company.name,
            description=company.description,
            industry=company.industry,
            location=company.location,
            logo_url=company.logo_url,
            website=company.website,
        )


class JobDTO(CamelModel):
    id: int
    company_id: int
    title: str
    description: str
    type: str
    location: Optional[str] = None
    requirements: list[Any] = []
    is_remote: bool = False
    created_at: datetime
    expires_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, job: Job) -> "JobDTO":
        return cls(
            id=job.id,
            company_id=job.company_id,
            title=job.title,
            description=job.description,
            type=job.type,
            location=job.location,
            requirements=list(job.requirements),
            is_remote=job.is_remote,
            created_at=job.created_at,
            expires_at=job.expires_at,
        )


class JobWithCompanyDTO(JobDTO):
    company: CompanyDTO


class InvitationDTO(CamelModel):
    id: int
    job_id: int
    candidate_id: int
    message: Optional[str] = None
    status: str
    created_at: datetime

    @classmethod
    def from_entity(cls, invitation: Invitation) -> "InvitationDTO":
        return cls(
            id=invitation.id,
            job_id=invitation.job_id,
            candidate_id=invitation.candidate_id,
            message=invitation.message,
            status=invitation.status,
            created_at=invitation.created_at,
        )


class InvitationDetailDTO(InvitationDTO):
    """Invitation & { job: Job & { company: Company } }"""

    job: JobWithCompanyDTO

    @classmethod
    def from_aggregate(
        cls,
        invitation: Invitation,
        job: Job,
        company: Company,
    ) -> "InvitationDetailDTO":
        return cls(
            **InvitationDTO.from_entity(invitation).model_dump(),
            job=JobWithCompanyDTO(
                **JobDTO.from_entity(job).model_dump(),
                company=CompanyDTO.from_entity(company),
            ),
        )
