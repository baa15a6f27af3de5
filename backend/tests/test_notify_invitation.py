from datetime import datetime, timezone

import pytest

from src.application.commands.notifications import (
    NotifyInvitationCommand,
    NotifyInvitationHandler,
)
from src.application.dto.events import NewInvitationEvent
from src.domain.entities import Invitation
from src.domain.value_objects import UserId
from src.infrastructure.persistence import (
    InMemoryCandidateProfileRepository,
    InMemoryCompanyRepository,
    InMemoryInvitationRepository,
    InMemoryJobRepository,
)
from src.infrastructure.realtime import ConnectionRegistry, NotificationDispatcher
from fakes import FakeSocket


class BrokenInvitationRepository:
    async def get_by_id(self, invitation_id):
        raise ConnectionError("database is unavailable")


@pytest.fixture()
def registry():
    return ConnectionRegistry()


def _handler(database, registry, invitation_repo=None):
    return NotifyInvitationHandler(
        invitation_repo=invitation_repo or InMemoryInvitationRepository(database),
        job_repo=InMemoryJobRepository(database),
        company_repo=InMemoryCompanyRepository(database),
        candidate_repo=InMemoryCandidateProfileRepository(database),
        dispatcher=NotificationDispatcher(registry),
    )


def _invite(database, seed, job_id=None, candidate_id=None, invitation_id=10):
    return database.add_invitation(
        Invitation(
            id=invitation_id,
            job_id=job_id or seed.job_id,
            candidate_id=candidate_id or seed.candidate_profile_id,
            created_at=datetime.now(timezone.utc),
            message="We'd love to talk",
        )
    )


@pytest.mark.asyncio
async def test_candidate_receives_invitation_with_job_and_company(database, seed, registry):
    invitation = _invite(database, seed)
    candidate_socket = FakeSocket()
    registry.register(UserId(seed.candidate_id), candidate_socket)

    delivered = await _handler(database, registry).execute(
        NotifyInvitationCommand(invitation_id=invitation.id)
    )

    assert delivered is True
    [event] = candidate_socket.events
    assert isinstance(event, NewInvitationEvent)
    assert event.invitation.id == invitation.id
    assert event.invitation.message == "We'd love to talk"
    assert event.invitation.job.id == seed.job_id
    assert event.invitation.job.company.name == "Acme"


@pytest.mark.asyncio
async def test_push_targets_the_profile_owner_not_the_profile_id(database, seed, registry):
    invitation = _invite(database, seed)
    # A user whose id happens to equal the profile id must not get the push
    bystander = FakeSocket()
    registry.register(UserId(seed.candidate_profile_id), bystander)

    delivered = await _handler(database, registry).execute(
        NotifyInvitationCommand(invitation_id=invitation.id)
    )

    assert delivered is False
    assert bystander.frames == []


@pytest.mark.asyncio
async def test_offline_candidate_returns_false(database, seed, registry):
    invitation = _invite(database, seed)

    assert (
        await _handler(database, registry).execute(
            NotifyInvitationCommand(invitation_id=invitation.id)
        )
        is False
    )


@pytest.mark.asyncio
async def test_unknown_invitation_returns_false(database, registry):
    assert (
        await _handler(database, registry).execute(NotifyInvitationCommand(invitation_id=999))
        is False
    )


@pytest.mark.asyncio
@pytest.mark.parametrize("missing", ["job", "company", "candidate"])
async def test_missing_link_returns_false_without_pushing(database, seed, registry, missing):
    invitation = _invite(database, seed)
    if missing == "job":
        del database.jobs[seed.job_id]
    elif missing == "company":
        del database.companies[seed.company_id]
    else:
        del database.candidate_profiles[seed.candidate_profile_id]
    candidate_socket = FakeSocket()
    registry.register(UserId(seed.candidate_id), candidate_socket)

    delivered = await _handler(database, registry).execute(
        NotifyInvitationCommand(invitation_id=invitation.id)
    )

    assert delivered is False
    assert candidate_socket.frames == []


@pytest.mark.asyncio
async def test_storage_failure_is_swallowed(database, registry):
    handler = _handler(database, registry, invitation_repo=BrokenInvitationRepository())

    assert await handler.execute(NotifyInvitationCommand(invitation_id=1)) is False
