"""
Talent use cases.

Every operation acts on the authenticated talent's own records only.
"""

from typing import Any, Dict, List
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from api.services import applications as application_service
from api.services import invitations as invitation_service
from core.scoring import job_feed_score, rank_by_score
from core.security import AuthenticatedUser
from core.utils.datetime import now
from database.models.applications import Application, ApplicationSource
from database.models.invitations import Invitation, InvitationStatus
from database.models.jobs import Job

logger = logging.getLogger(__name__)


async def apply_to_job(
    session: AsyncSession,
    talent: AuthenticatedUser,
    job_id: str,
    source: ApplicationSource,
) -> Application:
    """Apply the talent to a job."""
    return await application_service.apply(
        session, job_id=job_id, talent_id=talent.id, source=source
    )


async def job_feed(session: AsyncSession, talent: AuthenticatedUser) -> List[Dict[str, Any]]:
    """
    Rank open jobs the talent has not applied to.

    Jobs whose deadline is at or before the current time are left out.

    Returns:
        List of dictionaries with job_id, title, company_name, score; highest score first
    """
    applied = select(Application.job_id).where(Application.talent_id == talent.id)
    result = await session.execute(
        select(Job.id, Job.title, Job.company_name)
        .where(
            Job.deadline > now(),
            Job.id.not_in(applied),
        )
        .order_by(Job.created_at.desc())
    )

    feed = [
        {
            "job_id": job_id,
            "title": title,
            "company_name": company_name,
            "score": job_feed_score(job_id),
        }
        for job_id, title, company_name in result.all()
    ]
    return rank_by_score(feed, key=lambda item: item["score"])


async def list_invitations(
    session: AsyncSession, talent: AuthenticatedUser
) -> List[Dict[str, Any]]:
    """List the talent's invitations, newest first."""
    return await invitation_service.list_invitations_for_talent(session, talent.id)


async def respond_to_invitation(
    session: AsyncSession,
    talent: AuthenticatedUser,
    invitation_id: str,
    status: InvitationStatus,
) -> Invitation:
    """Accept or decline one of the talent's invitations."""
    return await invitation_service.respond_to_invitation(
        session, invitation_id=invitation_id, talent_id=talent.id, status=status
    )
