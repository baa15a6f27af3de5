"""
In-Memory Repository Implementations.

Used when STORAGE_BACKEND=memory (local development and tests). They honour
the same contracts as the Prisma repositories:
- ids are assigned on insert from a per-table counter, like a serial column
- created_at is set on insert
- entities are copied in and out, so callers never share state with the store
"""

import itertools
from dataclasses import replace
from datetime import datetime, timezone
from typing import Optional

from src.domain.entities.candidate_profile import CandidateProfile
from src.domain.entities.company import Company
from src.domain.entities.invitation import Invitation
from src.domain.entities.job import Job
from src.domain.entities.message import Message
from src.domain.ports.repositories import (
    CandidateProfileRepository,
    CompanyRepository,
    InvitationRepository,
    JobRepository,
    MessageRepository,
)
from src.domain.value_objects.message_id import MessageId
from src.domain.value_objects.user_id import UserId


class InMemoryDatabase:
    """Process-local tables shared by all in-memory repositories (Scope.APP)."""

    def __init__(self):
        self.messages: dict[int, Message] = {}
        self.invitations: dict[int, Invitation] = {}
        self.jobs: dict[int, Job] = {}
        self.companies: dict[int, Company] = {}
        self.candidate_profiles: dict[int, CandidateProfile] = {}
        self._message_ids = itertools.count(1)
        self._invitation_ids = itertools.count(1)

    def next_message_id(self) -> int:
        return next(self._message_ids)

    def next_invitation_id(self) -> int:
        return next(self._invitation_ids)

    # Seeding helpers for records owned by other parts of the job board
    def add_company(self, company: Company) -> Company:
        self.companies[company.id] = replace(company)
        return company

    def add_job(self, job: Job) -> Job:
        self.jobs[job.id] = replace(job)
        return job

    def add_candidate_profile(self, profile: CandidateProfile) -> CandidateProfile:
        self.candidate_profiles[profile.id] = replace(profile)
        return profile

    def add_invitation(self, invitation: Invitation) -> Invitation:
        self.invitations[invitation.id] = replace(invitation)
        return invitation


class InMemoryMessageRepository(MessageRepository):
    def __init__(self, db: InMemoryDatabase):
        self._db = db

    async def get_by_id(self, message_id: MessageId) -> Optional[Message]:
        message = self._db.messages.get(message_id.value)
        return replace(message) if message else None

    async def create(
        self, sender_id: UserId, receiver_id: UserId, content: str
    ) -> Message:
        message = Message(
            id=MessageId(self._db.next_message_id()),
            sender_id=sender_id,
            receiver_id=receiver_id,
            content=content,
            created_at=datetime.now(timezone.utc),
            read=False,
        )
        self._db.messages[message.id.value] = message
        return replace(message)

    async def mark_as_read(self, message_id: MessageId) -> Optional[Message]:
        message = self._db.messages.get(message_id.value)
        if message is None:
            return None
        message.mark_as_read()
        return replace(message)

    async def get_between_users(
        self, user_a: UserId, user_b: UserId, limit: int = 50
    ) -> list[Message]:
        matches = [m for m in self._db.messages.values() if m.is_between(user_a, user_b)]
        return [replace(m) for m in self._newest_first(matches)[:limit]]

    async def get_recent_by_user(self, user_id: UserId, limit: int = 10) -> list[Message]:
        matches = [m for m in self._db.messages.values() if m.involves(user_id)]
        return [replace(m) for m in self._newest_first(matches)[:limit]]

    async def count_unread(self, user_id: UserId) -> int:
        return sum(
            1
            for m in self._db.messages.values()
            if m.receiver_id == user_id and not m.read
        )

    @staticmethod
    def _newest_first(messages: list[Message]) -> list[Message]:
        # id breaks ties between messages created within the same clock tick
        return sorted(messages, key=lambda m: (m.created_at, m.id.value), reverse=True)


class InMemoryInvitationRepository(InvitationRepository):
    def __init__(self, db: InMemoryDatabase):
        self._db = db

    async def get_by_id(self, invitation_id: int) -> Optional[Invitation]:
        invitation = self._db.invitations.get(invitation_id)
        return replace(invitation) if invitation else None

    async def create(
        self, job_id: int, candidate_id: int, message: Optional[str] = None
    ) -> Invitation:
        invitation = Invitation(
            id=self._db.next_invitation_id(),
            job_id=job_id,
            candidate_id=candidate_id,
            message=message,
            created_at=datetime.now(timezone.utc),
        )
        self._db.invitations[invitation.id] = invitation
        return replace(invitation)


class InMemoryJobRepository(JobRepository):
    def __init__(self, db: InMemoryDatabase):
        self._db = db

    async def get_by_id(self, job_id: int) -> Optional[Job]:
        job = self._db.jobs.get(job_id)
        return replace(job) if job else None


class InMemoryCompanyRepository(CompanyRepository):
    def __init__(self, db: InMemoryDatabase):
        self._db = db

    async def get_by_id(self, company_id: int) -> Optional[Company]:
        company = self._db.companies.get(company_id)
        return replace(company) if company else None


class InMemoryCandidateProfileRepository(CandidateProfileRepository):
    def __init__(self, db: InMemoryDatabase):
        self._db = db

    async def get_by_id(self, profile_id: int) -> Optional[CandidateProfile]:
        profile = self._db.candidate_profiles.get(profile_id)
        return replace(profile) if profile else None
