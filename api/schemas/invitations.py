"""Invitation API schemas."""

from typing import Literal
from uuid import UUID
from pydantic import ConfigDict

from api.schemas.common import CamelModel, IsoDatetime
from database.models.invitations import InvitationStatus


class InvitationCreateRequest(CamelModel):
    """Schema for inviting a talent to a job."""

    model_config = ConfigDict(extra="forbid")

    talent_id: UUID


class InvitationRespondRequest(CamelModel):
    """Schema for answering an invitation."""

    model_config = ConfigDict(extra="forbid")

    status: Literal["ACCEPTED", "DECLINED"]


class InvitationResponse(CamelModel):
    """An invitation record."""

    id: str
    job_id: str
    talent_id: str
    employer_id: str
    status: InvitationStatus
    created_at: IsoDatetime


class TalentInvitation(CamelModel):
    """An invitation as listed for the invited talent."""

    id: str
    job_title: str
    company_name: str
    deadline: IsoDatetime
    status: InvitationStatus
