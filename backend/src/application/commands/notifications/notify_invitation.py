"""
Notify Invitation Command - push a new_invitation event to the invited candidate.

Fire-and-forget relative to the HTTP route that created the invitation:
- Reads invitation → job → company → candidate profile
- Any missing record aborts silently (returns False)
- Storage errors are logged and return False; nothing is raised
- Returns True only if at least one of the candidate's sockets got the event

Offline candidates see the invitation the next time they load their
invitations over HTTP.
"""

import logging
from dataclasses import dataclass

from src.application.common.interfaces import Command, CommandHandler
from src.application.dto.events import NewInvitationEvent
from src.application.dto.invitation import InvitationDetailDTO
from src.domain.ports.repositories import (
    CandidateProfileRepository,
    CompanyRepository,
    InvitationRepository,
    JobRepository,
)
from src.infrastructure.realtime.notification_dispatcher import NotificationDispatcher
from src.observability import NotificationOutcome, increment_notification

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NotifyInvitationCommand(Command[bool]):
    invitation_id: int


class NotifyInvitationHandler(CommandHandler[bool]):
    def __init__(
        self,
        invitation_repo: InvitationRepository,
        job_repo: JobRepository,
        company_repo: CompanyRepository,
        candidate_repo: CandidateProfileRepository,
        dispatcher: NotificationDispatcher,
    ):
        self._invitation_repo = invitation_repo
        self._job_repo = job_repo
        self._company_repo = company_repo
        self._candidate_repo = candidate_repo
        self._dispatcher = dispatcher

    async def execute(self, command: NotifyInvitationCommand) -> bool:
        try:
            invitation = await self._invitation_repo.get_by_id(command.invitation_id)
            if not invitation:
                return self._missing("invitation", command.invitation_id, command)

            job = await self._job_repo.get_by_id(invitation.job_id)
            if not job:
                return self._missing("job", invitation.job_id, command)

            company = await self._company_repo.get_by_id(job.company_id)
            if not company:
                return self._missing("company", job.company_id, command)

            candidate = await self._candidate_repo.get_by_id(invitation.candidate_id)
            if not candidate:
                return self._missing("candidate profile", invitation.candidate_id, command)
        except Exception as e:
            increment_notification(NotificationOutcome.STORAGE_FAILURE)
            logger.error(
                f"[Notify] Loading invitation {command.invitation_id} failed: {e}"
            )
            return False

        event = NewInvitationEvent(
            invitation=InvitationDetailDTO.from_aggregate(invitation, job, company)
        )
        delivered = await self._dispatcher.notify(candidate.user_id, event)

        increment_notification(
            NotificationOutcome.DELIVERED if delivered else NotificationOutcome.OFFLINE
        )
        logger.info(
            f"[Notify] Invitation {invitation.id} for user {candidate.user_id}: "
            f"{'delivered' if delivered else 'recipient offline'}"
        )
        return delivered

    @staticmethod
    def _missing(what: str, record_id: int, command: NotifyInvitationCommand) -> bool:
        increment_notification(NotificationOutcome.MISSING_REFERENCE)
        logger.warning(
            f"[Notify] Invitation {command.invitation_id} skipped: {what} {record_id} not found"
        )
        return False
