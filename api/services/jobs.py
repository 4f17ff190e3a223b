"""
Public job board service functions.

Read-only views over all jobs; no authentication required.
"""

from typing import Any, Dict, List, Optional
import logging

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import NotFoundError
from core.utils.datetime import is_expired
from database.models.applications import Application
from database.models.jobs import Job

logger = logging.getLogger(__name__)


def _applications_count():
    return (
        select(func.count(Application.id))
        .where(Application.job_id == Job.id)
        .correlate(Job)
        .scalar_subquery()
    )


def matches_search(job: Job, search: str) -> bool:
    """
    Check a job against a search term.

    Title and company name match on a case-insensitive substring; the tech
    stack matches only on an exact entry.
    """
    term = search.lower()
    return (
        term in job.title.lower()
        or term in job.company_name.lower()
        or search in (job.tech_stack or [])
    )


async def list_jobs(session: AsyncSession, search: Optional[str] = None) -> List[Dict[str, Any]]:
    """
    List all jobs, newest first, with their application counts.

    Args:
        session: Database session
        search: Optional search term

    Returns:
        List of dictionaries with id, title, company_name, applications_count
    """
    result = await session.execute(
        select(Job, _applications_count().label("applications_count"))
        .order_by(Job.created_at.desc())
    )
    rows = result.all()

    if search:
        rows = [row for row in rows if matches_search(row[0], search)]

    return [
        {
            "id": job.id,
            "title": job.title,
            "company_name": job.company_name,
            "applications_count": count,
        }
        for job, count in rows
    ]


async def get_job_details(session: AsyncSession, job_id: str) -> Dict[str, Any]:
    """
    Get a job with its application count and whether it has expired.

    Raises:
        NotFoundError: Job does not exist
    """
    result = await session.execute(
        select(Job, _applications_count().label("applications_count"))
        .where(Job.id == job_id)
    )
    row = result.one_or_none()
    if row is None:
        raise NotFoundError("Job not found")

    job, count = row
    return {
        "id": job.id,
        "title": job.title,
        "company_name": job.company_name,
        "tech_stack": job.tech_stack,
        "deadline": job.deadline,
        "description": job.description,
        "applications_count": count,
        "is_expired": is_expired(job.deadline),
    }
