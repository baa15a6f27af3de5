"""
Invitations API Router - employers invite candidates to a job.

After the invitation is stored, the live new_invitation push runs as a
background task so the HTTP response never waits on (or fails because of)
socket delivery.
"""

import logging
from typing import Optional

from dishka import AsyncContainer
from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Request, status
from pydantic import Field

from src.application.commands.invitations import (
    CreateInvitationCommand,
    CreateInvitationHandler,
)
from src.application.commands.notifications import (
    NotifyInvitationCommand,
    NotifyInvitationHandler,
)
from src.application.dto.chat import CamelModel
from src.application.dto.invitation import InvitationDTO
from src.domain.exceptions import AccessDeniedError, EntityNotFoundError
from src.domain.value_objects import AuthIdentity
from src.presentation.dependencies.auth import require_employer

logger = logging.getLogger(__name__)


# ==================== REQUEST MODELS ====================


class CreateInvitationRequest(CamelModel):
    """Request body: {"jobId": 1, "candidateId": 3, "message": "..."}"""

    job_id: int = Field(gt=0)
    candidate_id: int = Field(gt=0)
    message: Optional[str] = None


# ==================== ROUTER ====================

router = APIRouter(prefix="/invitations", tags=["invitations"])


# ==================== BACKGROUND TASKS ====================


async def notify_invitation(container: AsyncContainer, invitation_id: int) -> None:
    """Run NotifyInvitationCommand in its own request scope."""
    async with container() as request_container:
        handler = await request_container.get(NotifyInvitationHandler)
        await handler.execute(NotifyInvitationCommand(invitation_id=invitation_id))


# ==================== ENDPOINTS ====================


@router.post(
    "",
    response_model=InvitationDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_invitation(
    request: Request,
    body: CreateInvitationRequest,
    background_tasks: BackgroundTasks,
    handler: FromDishka[CreateInvitationHandler],
    current_user: AuthIdentity = Depends(require_employer),
):
    """
    Create an invitation for a job owned by the caller's company.

    Errors:
        404 - job or candidate not found
        403 - job belongs to another company
    """
    try:
        invitation = await handler.execute(
            CreateInvitationCommand(
                employer_id=current_user.id,
                job_id=body.job_id,
                candidate_id=body.candidate_id,
                message=body.message,
            )
        )
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))

    # The app-scoped container outlives this request
    background_tasks.add_task(
        notify_invitation, request.app.state.dishka_container, invitation.id
    )
    logger.info(
        f"Employer {current_user.id} invited candidate {invitation.candidate_id} "
        f"to job {invitation.job_id} (invitation {invitation.id})"
    )
    return InvitationDTO.from_entity(invitation)
