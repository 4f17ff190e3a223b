"""
Workflow error taxonomy.

Raised by the service layer and converted into structured HTTP responses
by ``core.middleware.error_handling``.
"""


class WorkflowError(Exception):
    """Base exception for job-board workflow failures."""

    code = "WORKFLOW_ERROR"
    status_code = 400
    default_message = "The request could not be completed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(WorkflowError):
    """Entity is absent, or exists but is not owned by the caller."""

    code = "NOT_FOUND"
    status_code = 404
    default_message = "Resource not found"


class ConflictError(WorkflowError):
    """Duplicate application or invitation."""

    code = "CONFLICT"
    status_code = 409
    default_message = "Resource already exists"


class AlreadyAppliedError(ConflictError):
    """An application already exists for the (job, talent) pair."""

    code = "ALREADY_APPLIED"
    default_message = "You have already applied to this job"


class InvalidStateError(WorkflowError):
    """Transition attempted from a terminal state."""

    code = "INVALID_STATE"
    status_code = 409
    default_message = "Invitation has already been responded to"


class DeadlinePassedError(WorkflowError):
    """Time-gated operation attempted after the job deadline."""

    code = "DEADLINE_PASSED"
    status_code = 400
    default_message = "Job application deadline has passed"


class WorkflowSystemError(WorkflowError):
    """Unexpected persistence or collaborator failure."""

    code = "SYSTEM_ERROR"
    status_code = 500
    default_message = "An unexpected error occurred"
