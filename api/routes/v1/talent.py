"""
Talent endpoints.

Applying, the personalised job feed, and invitation handling. All routes
require a TALENT token.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_db, require_talent
from api.schemas.applications import ApplicationResponse, ApplyRequest
from api.schemas.invitations import (
    InvitationRespondRequest,
    InvitationResponse,
    TalentInvitation,
)
from api.schemas.jobs import JobFeedItem
from api.services import talent as talent_service
from core.security import AuthenticatedUser
from database.models.invitations import InvitationStatus

router = APIRouter(dependencies=[Depends(require_talent)])


@router.post(
    "/jobs/{job_id}/apply",
    response_model=ApplicationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Apply to Job",
)
async def apply_to_job(
    request: ApplyRequest,
    job_id: UUID = Path(..., description="Job ID"),
    current_user: AuthenticatedUser = Depends(require_talent),
    db: AsyncSession = Depends(get_db),
):
    """Apply to an open job."""
    return await talent_service.apply_to_job(
        db, current_user, job_id=str(job_id), source=request.source
    )


@router.get(
    "/job-feed",
    response_model=List[JobFeedItem],
    summary="Job Feed",
    description="Open jobs you have not applied to, highest score first.",
)
async def job_feed(
    current_user: AuthenticatedUser = Depends(require_talent),
    db: AsyncSession = Depends(get_db),
):
    return await talent_service.job_feed(db, current_user)


@router.get(
    "/invitations",
    response_model=List[TalentInvitation],
    summary="List Invitations",
)
async def list_invitations(
    current_user: AuthenticatedUser = Depends(require_talent),
    db: AsyncSession = Depends(get_db),
):
    """Retrieve invitations addressed to the caller, newest first."""
    return await talent_service.list_invitations(db, current_user)


@router.post(
    "/invitations/{invitation_id}/respond",
    response_model=InvitationResponse,
    summary="Respond to Invitation",
    description="Accept or decline a pending invitation. Accepting also applies you to the job.",
)
async def respond_to_invitation(
    request: InvitationRespondRequest,
    invitation_id: UUID = Path(..., description="Invitation ID"),
    current_user: AuthenticatedUser = Depends(require_talent),
    db: AsyncSession = Depends(get_db),
):
    return await talent_service.respond_to_invitation(
        db,
        current_user,
        invitation_id=str(invitation_id),
        status=InvitationStatus(request.status),
    )
