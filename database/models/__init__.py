"""Database models. Importing this package registers every table on ``Base.metadata``."""

from database.models.users import User, UserRole
from database.models.jobs import Job
from database.models.applications import Application, ApplicationSource
from database.models.invitations import Invitation, InvitationStatus

__all__ = [
    "User",
    "UserRole",
    "Job",
    "Application",
    "ApplicationSource",
    "Invitation",
    "InvitationStatus",
]
