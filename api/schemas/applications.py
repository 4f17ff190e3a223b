"""Application API schemas."""

from pydantic import ConfigDict

from api.schemas.common import CamelModel, IsoDatetime
from database.models.applications import ApplicationSource


class ApplyRequest(CamelModel):
    """Schema for applying to a job."""

    model_config = ConfigDict(extra="forbid")

    source: ApplicationSource


class ApplicationResponse(CamelModel):
    """A created application."""

    id: str
    job_id: str
    talent_id: str
    source: ApplicationSource
    created_at: IsoDatetime


class JobApplicant(CamelModel):
    """An applicant as seen by the job's employer."""

    talent_id: str
    talent_name: str
    source: ApplicationSource
    applied_at: IsoDatetime
