"""
API Services Layer.

Workflow operations for the API endpoints. Every function takes the
request's database session explicitly.
"""

from api.services.applications import (
    apply,
    apply_or_skip,
    find_application,
)

from api.services.invitations import (
    create_invitation,
    respond_to_invitation,
    list_invitations_for_talent,
)

from api.services.jobs import (
    list_jobs,
    get_job_details,
)

from api.services import employer, talent

__all__ = [
    # Applications
    "apply",
    "apply_or_skip",
    "find_application",
    # Invitations
    "create_invitation",
    "respond_to_invitation",
    "list_invitations_for_talent",
    # Jobs
    "list_jobs",
    "get_job_details",
    # Use cases
    "employer",
    "talent",
]
