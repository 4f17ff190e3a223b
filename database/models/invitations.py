"""
Invitation Models

Employer outreach to a talent for a job. Starts PENDING and moves exactly
once to ACCEPTED or DECLINED.
"""

from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import (
    String,
    ForeignKey,
    DateTime,
    Enum as SQLEnum,
    UniqueConstraint,
)
from database.engine import Base
from core.utils.datetime import now as utc_now
from datetime import datetime
from enum import Enum as PyEnum
import uuid


class InvitationStatus(str, PyEnum):
    """Invitation lifecycle state."""

    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    DECLINED = "DECLINED"


class Invitation(Base):
    """An employer's invitation for a talent to apply to a job."""

    __tablename__ = "invitations"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    job_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("jobs.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    talent_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    employer_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    status: Mapped[InvitationStatus] = mapped_column(
        SQLEnum(InvitationStatus, native_enum=False, length=20),
        nullable=False,
        default=InvitationStatus.PENDING,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
        nullable=False,
    )

    __table_args__ = (
        UniqueConstraint(
            "job_id", "talent_id", "employer_id", name="uq_invitation_job_talent_employer"
        ),
    )

    @property
    def is_pending(self) -> bool:
        return self.status == InvitationStatus.PENDING

    def __repr__(self) -> str:
        return f"<Invitation(id={self.id}, status={self.status})>"
