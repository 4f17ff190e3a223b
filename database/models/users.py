"""
User Models

Employers and talent share one identity table; the role is fixed at creation.
"""

from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import (
    String,
    DateTime,
    Enum as SQLEnum,
)
from database.engine import Base
from core.utils.datetime import now as utc_now
from datetime import datetime
from enum import Enum as PyEnum
from typing import TYPE_CHECKING
import uuid

if TYPE_CHECKING:
    from database.models.jobs import Job


# ==================== User Role ===================== #
class UserRole(str, PyEnum):
    EMPLOYER = "EMPLOYER"  # posts jobs and invites talent
    TALENT = "TALENT"  # applies to jobs and answers invitations


class User(Base):
    """Identity of an employer or a talent."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False, index=True
    )
    role: Mapped[UserRole] = mapped_column(
        SQLEnum(UserRole, native_enum=False, length=20),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, nullable=False
    )

    jobs: Mapped[list["Job"]] = relationship(back_populates="employer", lazy="raise")

    def __repr__(self) -> str:
        return f"<User(id={self.id}, role={self.role})>"
