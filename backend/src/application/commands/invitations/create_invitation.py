"""
Create Invitation Command.

An employer invites a candidate to one of their company's jobs. The route
that runs this command schedules NotifyInvitationCommand afterwards; the
invitation exists whether or not the candidate is notified live.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from src.application.common.interfaces import Command, CommandHandler
from src.domain.entities.invitation import Invitation
from src.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
)
from src.domain.ports.repositories import (
    CandidateProfileRepository,
    CompanyRepository,
    InvitationRepository,
    JobRepository,
)
from src.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class CreateInvitationCommand(Command[Invitation]):
    employer_id: UserId
    job_id: int
    candidate_id: int
    message: Optional[str] = None


class CreateInvitationHandler(CommandHandler[Invitation]):
    def __init__(
        self,
        invitation_repo: InvitationRepository,
        job_repo: JobRepository,
        company_repo: CompanyRepository,
        candidate_repo: CandidateProfileRepository,
    ):
        self._invitation_repo = invitation_repo
        self._job_repo = job_repo
        self._company_repo = company_repo
        self._candidate_repo = candidate_repo

    async def execute(self, command: CreateInvitationCommand) -> Invitation:
        """
        Raises:
            EntityNotFoundError: job or candidate profile does not exist
            AccessDeniedError: the job belongs to another employer's company
            DomainValidationError: the job posting has expired
        """
        job = await self._job_repo.get_by_id(command.job_id)
        if not job:
            raise EntityNotFoundError(f"Job {command.job_id} not found")

        company = await self._company_repo.get_by_id(job.company_id)
        if not company or not company.is_owned_by(command.employer_id):
            raise AccessDeniedError(
                "You do not have permission to create invitations for this job"
            )

        if job.expires_at and job.expires_at <= datetime.now(timezone.utc):
            raise DomainValidationError(f"Job {job.id} is no longer accepting candidates")

        candidate = await self._candidate_repo.get_by_id(command.candidate_id)
        if not candidate:
            raise EntityNotFoundError(f"Candidate {command.candidate_id} not found")

        return await self._invitation_repo.create(
            job_id=job.id,
            candidate_id=candidate.id,
            message=command.message,
        )
