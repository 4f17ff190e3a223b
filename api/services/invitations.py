"""
Invitation service functions.

Invitations start PENDING and move once to ACCEPTED or DECLINED. Accepting
also applies the talent to the job unless they already applied.
"""

from typing import Any, Dict, List, Optional
import logging

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from api.services.applications import apply_or_skip, find_application
from core.exceptions import (
    ConflictError,
    DeadlinePassedError,
    InvalidStateError,
    NotFoundError,
    WorkflowSystemError,
)
from core.utils.datetime import is_expired
from database.models.invitations import Invitation, InvitationStatus
from database.models.jobs import Job
from database.models.users import User, UserRole

logger = logging.getLogger(__name__)

RESPONSE_STATUSES = (InvitationStatus.ACCEPTED, InvitationStatus.DECLINED)


async def _find_invitation_id(
    session: AsyncSession, job_id: str, talent_id: str, employer_id: str
) -> Optional[str]:
    result = await session.execute(
        select(Invitation.id).where(
            Invitation.job_id == job_id,
            Invitation.talent_id == talent_id,
            Invitation.employer_id == employer_id,
        )
    )
    return result.scalar_one_or_none()


async def create_invitation(
    session: AsyncSession,
    job_id: str,
    talent_id: str,
    employer_id: str,
) -> Invitation:
    """
    Invite a talent to a job on behalf of the job's employer.

    Raises:
        NotFoundError: Job missing or not owned by the employer, or talent missing
        ConflictError: Talent already applied, or an invitation for the same
            (job, talent, employer) already exists in any status
    """
    result = await session.execute(
        select(Job).where(Job.id == job_id, Job.employer_id == employer_id)
    )
    if result.scalar_one_or_none() is None:
        raise NotFoundError("Job not found or access denied")

    result = await session.execute(
        select(User).where(User.id == talent_id, User.role == UserRole.TALENT)
    )
    if result.scalar_one_or_none() is None:
        raise NotFoundError("Talent not found")

    if await find_application(session, job_id, talent_id) is not None:
        raise ConflictError("Talent has already applied to this job")

    # Matches on the triple regardless of status, so a declined invitation
    # cannot be sent again
    if await _find_invitation_id(session, job_id, talent_id, employer_id) is not None:
        raise ConflictError("Invitation already sent to this talent")

    invitation = Invitation(
        job_id=job_id,
        talent_id=talent_id,
        employer_id=employer_id,
        status=InvitationStatus.PENDING,
    )
    session.add(invitation)
    try:
        await session.commit()
    except IntegrityError as e:
        # A concurrent invite for the same triple committed first
        await session.rollback()
        if await _find_invitation_id(session, job_id, talent_id, employer_id) is not None:
            raise ConflictError("Invitation already sent to this talent") from None
        raise WorkflowSystemError("Failed to create invitation") from e

    logger.info(f"Invitation {invitation.id} sent: job={job_id} talent={talent_id}")
    return invitation


async def respond_to_invitation(
    session: AsyncSession,
    invitation_id: str,
    talent_id: str,
    status: InvitationStatus,
) -> Invitation:
    """
    Accept or decline a pending invitation.

    Args:
        session: Database session
        invitation_id: Invitation to answer
        talent_id: Talent answering; must be the invited talent
        status: ACCEPTED or DECLINED

    Returns:
        The updated invitation

    Raises:
        NotFoundError: Invitation missing or addressed to another talent
        InvalidStateError: Invitation already answered
        DeadlinePassedError: Job deadline has passed
        WorkflowSystemError: Acceptance committed but the application could not be created
    """
    if status not in RESPONSE_STATUSES:
        raise ValueError("Status must be ACCEPTED or DECLINED")

    result = await session.execute(
        select(Invitation, Job.deadline)
        .join(Job, Job.id == Invitation.job_id)
        .where(
            Invitation.id == invitation_id,
            Invitation.talent_id == talent_id,
        )
    )
    row = result.one_or_none()
    # Not found and not yours look the same to the caller
    if row is None:
        raise NotFoundError("Invitation not found")

    invitation, deadline = row

    if not invitation.is_pending:
        raise InvalidStateError("Invitation has already been responded to")

    if is_expired(deadline):
        raise DeadlinePassedError("Job deadline has passed")

    # Only a PENDING row transitions; a concurrent response matches nothing
    result = await session.execute(
        update(Invitation)
        .where(
            Invitation.id == invitation_id,
            Invitation.talent_id == talent_id,
            Invitation.status == InvitationStatus.PENDING,
        )
        .values(status=status)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        await session.rollback()
        raise InvalidStateError("Invitation has already been responded to")

    await session.commit()
    logger.info(f"Invitation {invitation_id} {status.value.lower()} by talent {talent_id}")

    if status == InvitationStatus.ACCEPTED:
        await apply_or_skip(session, invitation.job_id, talent_id)

    await session.refresh(invitation)
    return invitation


async def list_invitations_for_talent(
    session: AsyncSession, talent_id: str
) -> List[Dict[str, Any]]:
    """
    List a talent's invitations, newest first, with job summary fields.

    Returns:
        List of dictionaries with id, job_title, company_name, deadline, status
    """
    result = await session.execute(
        select(Invitation, Job.title, Job.company_name, Job.deadline)
        .join(Job, Job.id == Invitation.job_id)
        .where(Invitation.talent_id == talent_id)
        .order_by(Invitation.created_at.desc())
    )

    return [
        {
            "id": invitation.id,
            "job_title": title,
            "company_name": company_name,
            "deadline": deadline,
            "status": invitation.status,
        }
        for invitation, title, company_name, deadline in result.all()
    ]
