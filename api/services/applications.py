"""
Application service functions.

A (job, talent) pair moves from "no application" to "applied" exactly once.
The database unique constraint is the final arbiter, so a lost insert race is
reported the same way as an ordinary duplicate.
"""

from typing import Optional
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import (
    AlreadyAppliedError,
    DeadlinePassedError,
    NotFoundError,
    WorkflowSystemError,
)
from core.utils.datetime import is_expired
from database.models.applications import Application, ApplicationSource
from database.models.jobs import Job

logger = logging.getLogger(__name__)


async def find_application(
    session: AsyncSession, job_id: str, talent_id: str
) -> Optional[Application]:
    """Get the application for a (job, talent) pair, if any."""
    result = await session.execute(
        select(Application).where(
            Application.job_id == job_id,
            Application.talent_id == talent_id,
        )
    )
    return result.scalar_one_or_none()


async def _insert_application(
    session: AsyncSession,
    job_id: str,
    talent_id: str,
    source: ApplicationSource,
) -> Application:
    """Insert and commit. Rolls back and re-raises on IntegrityError."""
    application = Application(job_id=job_id, talent_id=talent_id, source=source)
    session.add(application)
    try:
        await session.commit()
    except IntegrityError:
        await session.rollback()
        raise
    return application


async def apply(
    session: AsyncSession,
    job_id: str,
    talent_id: str,
    source: ApplicationSource,
) -> Application:
    """
    Apply a talent to a job.

    Args:
        session: Database session
        job_id: Job to apply to
        talent_id: Applying talent
        source: MANUAL or INVITATION

    Returns:
        The created application

    Raises:
        NotFoundError: Job does not exist
        DeadlinePassedError: Job deadline has passed
        AlreadyAppliedError: An application already exists for the pair
    """
    job = await session.get(Job, job_id)
    if job is None:
        raise NotFoundError("Job not found")

    if is_expired(job.deadline):
        raise DeadlinePassedError("Job application deadline has passed")

    if await find_application(session, job_id, talent_id) is not None:
        raise AlreadyAppliedError("You have already applied to this job")

    try:
        application = await _insert_application(session, job_id, talent_id, source)
    except IntegrityError as e:
        # Lost a race with a concurrent apply, or a dangling foreign key
        if await find_application(session, job_id, talent_id) is not None:
            raise AlreadyAppliedError("You have already applied to this job") from None
        raise WorkflowSystemError("Failed to apply to job") from e

    logger.info(
        f"Application created: job={job_id} talent={talent_id} source={source.value}"
    )
    return application


async def apply_or_skip(
    session: AsyncSession, job_id: str, talent_id: str
) -> Optional[Application]:
    """
    Create an invitation-sourced application unless one already exists.

    Returns:
        The created application, or None when the talent had already applied

    Raises:
        WorkflowSystemError: Any persistence failure other than a duplicate
    """
    try:
        if await find_application(session, job_id, talent_id) is not None:
            logger.info(f"Talent {talent_id} already applied to job {job_id}, skipping")
            return None

        try:
            return await _insert_application(
                session, job_id, talent_id, ApplicationSource.INVITATION
            )
        except IntegrityError as e:
            if await find_application(session, job_id, talent_id) is not None:
                logger.info(f"Concurrent application for job {job_id} by {talent_id}, skipping")
                return None
            raise WorkflowSystemError(
                "Failed to create application for accepted invitation"
            ) from e
    except SQLAlchemyError as e:
        logger.error(
            f"Application side effect failed: job={job_id} talent={talent_id}",
            exc_info=True,
        )
        raise WorkflowSystemError(
            "Failed to create application for accepted invitation"
        ) from e
