"""
Employer endpoints.

Job creation, applicant and match listings, and talent invitations. All
routes require an EMPLOYER token.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_db, get_description_generator, require_employer
from api.schemas.applications import JobApplicant
from api.schemas.invitations import InvitationCreateRequest, InvitationResponse
from api.schemas.jobs import JobCreateRequest, JobResponse, TalentMatch
from api.services import employer as employer_service
from core.integrations.descriptions import DescriptionGenerator
from core.security import AuthenticatedUser

router = APIRouter(dependencies=[Depends(require_employer)])


@router.post(
    "/jobs",
    response_model=JobResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Job",
    description="Post a new job. The description is generated from the title, company and tech stack.",
)
async def create_job(
    request: JobCreateRequest,
    current_user: AuthenticatedUser = Depends(require_employer),
    generator: DescriptionGenerator = Depends(get_description_generator),
    db: AsyncSession = Depends(get_db),
):
    """Create a job owned by the calling employer."""
    return await employer_service.create_job(
        db,
        current_user,
        title=request.title,
        company_name=request.company_name,
        tech_stack=request.tech_stack,
        deadline=request.deadline,
        generator=generator,
    )


@router.get(
    "/jobs/{job_id}/applicants",
    response_model=List[JobApplicant],
    summary="List Applicants",
    description="List talent who applied to one of your jobs, newest first.",
)
async def list_applicants(
    job_id: UUID = Path(..., description="Job ID"),
    current_user: AuthenticatedUser = Depends(require_employer),
    db: AsyncSession = Depends(get_db),
):
    """Retrieve applicants for a job owned by the caller."""
    return await employer_service.list_applicants(db, current_user, str(job_id))


@router.get(
    "/jobs/{job_id}/matches",
    response_model=List[TalentMatch],
    summary="List Talent Matches",
    description="Rank talent who have not applied to one of your jobs.",
)
async def list_matches(
    job_id: UUID = Path(..., description="Job ID"),
    current_user: AuthenticatedUser = Depends(require_employer),
    db: AsyncSession = Depends(get_db),
):
    """Retrieve scored talent matches for a job owned by the caller."""
    return await employer_service.list_matches(db, current_user, str(job_id))


@router.post(
    "/jobs/{job_id}/invite",
    response_model=InvitationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Invite Talent",
    description="Invite a talent to apply to one of your jobs.",
)
async def invite_talent(
    request: InvitationCreateRequest,
    job_id: UUID = Path(..., description="Job ID"),
    current_user: AuthenticatedUser = Depends(require_employer),
    db: AsyncSession = Depends(get_db),
):
    """Send an invitation for a job owned by the caller."""
    return await employer_service.invite_talent(
        db, current_user, job_id=str(job_id), talent_id=str(request.talent_id)
    )
