"""
Application Models

A talent pursuing a job, either directly or by accepting an invitation.
At most one application exists per (job, talent) pair; the unique constraint
is what keeps concurrent applies from both succeeding.
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


# ==================== Application Enums ===================== #
class ApplicationSource(str, PyEnum):
    """Source of the application."""

    MANUAL = "MANUAL"
    INVITATION = "INVITATION"


# ==================== Application Model ===================== #
class Application(Base):
    """Record of a talent applying to a job. Never updated or deleted."""

    __tablename__ = "applications"

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
    source: Mapped[ApplicationSource] = mapped_column(
        SQLEnum(ApplicationSource, native_enum=False, length=20),
        nullable=False,
        default=ApplicationSource.MANUAL,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, nullable=False
    )

    __table_args__ = (
        UniqueConstraint("job_id", "talent_id", name="uq_application_job_talent"),
    )

    def __repr__(self) -> str:
        return f"<Application(job_id={self.job_id}, talent_id={self.talent_id}, source={self.source})>"
