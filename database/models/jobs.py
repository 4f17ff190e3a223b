"""
Jobs Module

Job postings created by employers. A job is immutable once created; its
deadline gates applications and invitation responses.
"""

from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import (
    String,
    ForeignKey,
    DateTime,
    Text,
    JSON,
    Index,
)
from database.engine import Base
from core.utils.datetime import now as utc_now
from datetime import datetime
from typing import TYPE_CHECKING
import uuid

if TYPE_CHECKING:
    from database.models.users import User


class Job(Base):
    """A job posting owned by an employer."""

    __tablename__ = "jobs"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    company_name: Mapped[str] = mapped_column(String(100), nullable=False)
    tech_stack: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    deadline: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    employer_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, nullable=False
    )

    employer: Mapped["User"] = relationship(back_populates="jobs", lazy="raise")

    __table_args__ = (
        Index("idx_job_deadline", "deadline"),
        Index("idx_job_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Job(id={self.id}, title={self.title!r})>"
