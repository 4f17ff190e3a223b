"""Job API schemas."""

from datetime import datetime
from typing import List
from pydantic import ConfigDict, Field, field_validator

from api.schemas.common import CamelModel, IsoDatetime
from core.utils.datetime import ensure_utc, now


class JobCreateRequest(CamelModel):
    """Schema for creating a job."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=1, max_length=200, description="Job title")
    company_name: str = Field(..., min_length=1, max_length=100, description="Company name")
    tech_stack: List[str] = Field(
        ..., min_length=1, max_length=20, description="Technologies used in the role"
    )
    deadline: datetime = Field(..., description="Application deadline (ISO 8601)")

    @field_validator("tech_stack")
    @classmethod
    def validate_tech_stack(cls, v: List[str]) -> List[str]:
        """Reject empty technology names."""
        if any(not item for item in v):
            raise ValueError("Technology names cannot be empty")
        return v

    @field_validator("deadline")
    @classmethod
    def validate_deadline(cls, v: datetime) -> datetime:
        """Deadline must be in the future."""
        v = ensure_utc(v)
        if v <= now():
            raise ValueError("Deadline must be in the future")
        return v


class JobResponse(CamelModel):
    """A created job."""

    id: str
    title: str
    company_name: str
    tech_stack: List[str]
    deadline: IsoDatetime
    description: str
    employer_id: str
    created_at: IsoDatetime


class JobSummary(CamelModel):
    """Job row on the public board."""

    id: str
    title: str
    company_name: str
    applications_count: int


class JobDetails(JobSummary):
    """Public job details."""

    tech_stack: List[str]
    deadline: IsoDatetime
    description: str
    is_expired: bool


class TalentMatch(CamelModel):
    """A talent ranked for a job."""

    talent_id: str
    name: str
    score: int


class JobFeedItem(CamelModel):
    """A job ranked for a talent."""

    job_id: str
    title: str
    company_name: str
    score: int
