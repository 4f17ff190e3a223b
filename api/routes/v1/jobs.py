"""
Public job board endpoints.

Lists jobs and shows job details without authentication.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Path
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_db
from api.schemas.jobs import JobDetails, JobSummary
from api.services import jobs as job_service

router = APIRouter()


@router.get(
    "",
    response_model=List[JobSummary],
    summary="List Jobs",
    description="List all job postings, newest first, with application counts.",
)
async def list_jobs(
    search: Optional[str] = Query(None, description="Match title, company or a tech stack entry"),
    db: AsyncSession = Depends(get_db),
):
    """Retrieve every job posting, optionally filtered by a search term."""
    return await job_service.list_jobs(db, search=search)


@router.get(
    "/{job_id}",
    response_model=JobDetails,
    summary="Get Job Details",
    description="Get a job posting with its description and whether it has expired.",
)
async def get_job(
    job_id: UUID = Path(..., description="Job ID"),
    db: AsyncSession = Depends(get_db),
):
    """Retrieve complete job posting details."""
    return await job_service.get_job_details(db, str(job_id))
