"""
Employer use cases.

Every operation is scoped to the authenticated employer: a job owned by
someone else is reported as not found.
"""

from datetime import datetime
from typing import Any, Dict, List, Sequence
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from api.services import invitations as invitation_service
from core.exceptions import NotFoundError
from core.integrations.descriptions import DescriptionGenerator
from core.scoring import rank_by_score, talent_match_score
from core.security import AuthenticatedUser
from core.utils.datetime import ensure_utc
from database.models.applications import Application
from database.models.invitations import Invitation
from database.models.jobs import Job
from database.models.users import User, UserRole

logger = logging.getLogger(__name__)


async def _get_owned_job(session: AsyncSession, employer: AuthenticatedUser, job_id: str) -> Job:
    result = await session.execute(
        select(Job).where(Job.id == job_id, Job.employer_id == employer.id)
    )
    job = result.scalar_one_or_none()
    if job is None:
        raise NotFoundError("Job not found or access denied")
    return job


async def create_job(
    session: AsyncSession,
    employer: AuthenticatedUser,
    title: str,
    company_name: str,
    tech_stack: Sequence[str],
    deadline: datetime,
    generator: DescriptionGenerator,
) -> Job:
    """
    Create a job posting with a generated description.

    Args:
        session: Database session
        employer: Authenticated employer
        title: Job title
        company_name: Hiring company
        tech_stack: Technologies, at least one
        deadline: Application deadline
        generator: Description collaborator; falls back to a template on failure

    Returns:
        The created job
    """
    description = await generator.generate(title, company_name, list(tech_stack))

    job = Job(
        title=title,
        company_name=company_name,
        tech_stack=list(tech_stack),
        deadline=ensure_utc(deadline),
        description=description,
        employer_id=employer.id,
    )
    session.add(job)
    await session.commit()

    logger.info(f"Job {job.id} created by employer {employer.id}")
    return job


async def list_applicants(
    session: AsyncSession, employer: AuthenticatedUser, job_id: str
) -> List[Dict[str, Any]]:
    """
    List applicants for one of the employer's jobs, newest first.

    Returns:
        List of dictionaries with talent_id, talent_name, source, applied_at
    """
    await _get_owned_job(session, employer, job_id)

    result = await session.execute(
        select(Application, User.name)
        .join(User, User.id == Application.talent_id)
        .where(Application.job_id == job_id)
        .order_by(Application.created_at.desc())
    )

    return [
        {
            "talent_id": application.talent_id,
            "talent_name": name,
            "source": application.source,
            "applied_at": application.created_at,
        }
        for application, name in result.all()
    ]


async def list_matches(
    session: AsyncSession, employer: AuthenticatedUser, job_id: str
) -> List[Dict[str, Any]]:
    """
    Rank talent who have not applied to the job.

    Returns:
        List of dictionaries with talent_id, name, score; highest score first
    """
    await _get_owned_job(session, employer, job_id)

    applied = select(Application.talent_id).where(Application.job_id == job_id)
    result = await session.execute(
        select(User.id, User.name).where(
            User.role == UserRole.TALENT,
            User.id.not_in(applied),
        )
    )

    matches = [
        {"talent_id": talent_id, "name": name, "score": talent_match_score(talent_id)}
        for talent_id, name in result.all()
    ]
    return rank_by_score(matches, key=lambda match: match["score"])


async def invite_talent(
    session: AsyncSession,
    employer: AuthenticatedUser,
    job_id: str,
    talent_id: str,
) -> Invitation:
    """Invite a talent to one of the employer's jobs."""
    return await invitation_service.create_invitation(
        session, job_id=job_id, talent_id=talent_id, employer_id=employer.id
    )
