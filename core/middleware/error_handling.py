"""
Error handling for the API boundary.

Workflow errors become structured JSON responses; anything unexpected is
logged and returned as a sanitized 5xx so no failure crashes the process.
"""

import logging
import re
import traceback
from typing import Any, Callable, Optional
from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlalchemy.exc import SQLAlchemyError, OperationalError

from core.exceptions import WorkflowError, WorkflowSystemError

logger = logging.getLogger(__name__)

# Patterns for sensitive data that should never be returned or logged
SENSITIVE_PATTERNS = [
    re.compile(r'password["\s:=]+[^"\s,}]+', re.IGNORECASE),
    re.compile(r'token["\s:=]+[^"\s,}]+', re.IGNORECASE),
    re.compile(r'api[_-]?key["\s:=]+[^"\s,}]+', re.IGNORECASE),
    re.compile(r'secret["\s:=]+[^"\s,}]+', re.IGNORECASE),
    re.compile(r'authorization["\s:]+[^"\s,}]+', re.IGNORECASE),
    re.compile(r'bearer\s+[A-Za-z0-9\-_.]+', re.IGNORECASE),
]


def sanitize_error_message(message: str) -> str:
    """
    Remove sensitive information from error messages.

    Args:
        message: Original error message

    Returns:
        Sanitized error message
    """
    sanitized = message
    for pattern in SENSITIVE_PATTERNS:
        sanitized = pattern.sub('[REDACTED]', sanitized)
    return sanitized


def error_body(
    code: str,
    message: str,
    path: str,
    method: str,
    details: Optional[Any] = None,
) -> dict[str, Any]:
    """Build the JSON error envelope used by every error response."""
    body: dict[str, Any] = {
        "error": {
            "code": code,
            "message": message,
            "path": path,
            "method": method,
        }
    }
    if details is not None:
        body["error"]["details"] = details
    return body


class ErrorHandlingMiddleware:
    """
    Outermost catch-all for exceptions that escape the route handlers.

    Database failures map to 500/503, anything else to a generic 500. Stack
    traces are included only in debug mode.
    """

    def __init__(self, app: Callable, debug: bool = False):
        self.app = app
        self.debug = debug

    async def __call__(self, scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        try:
            await self.app(scope, receive, send)
        except Exception as exc:
            response = self._handle_exception(exc, scope)
            await response(scope, receive, send)

    def _handle_exception(self, exc: Exception, scope: dict) -> Response:
        request_path = scope.get("path", "unknown")
        request_method = scope.get("method", "unknown")
        details = None

        if isinstance(exc, WorkflowError):
            status_code = exc.status_code
            error_code = exc.code
            message = sanitize_error_message(exc.message)
            logger.warning(f"Workflow error: {request_method} {request_path} - {error_code}")

        elif isinstance(exc, OperationalError):
            status_code = status.HTTP_503_SERVICE_UNAVAILABLE
            error_code = "DATABASE_ERROR"
            message = "Database service temporarily unavailable"
            logger.error(
                f"Database operational error: {request_method} {request_path}",
                exc_info=True,
            )

        elif isinstance(exc, SQLAlchemyError):
            status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
            error_code = "DATABASE_ERROR"
            message = "A database error occurred"
            logger.error(f"SQLAlchemy error: {request_method} {request_path}", exc_info=True)

        else:
            status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
            error_code = "INTERNAL_SERVER_ERROR"
            message = "An unexpected error occurred"
            logger.error(
                f"Unhandled exception: {request_method} {request_path} - "
                f"{type(exc).__name__}: {sanitize_error_message(str(exc))}",
                exc_info=True,
            )

        if self.debug:
            details = {
                "type": type(exc).__name__,
                "message": sanitize_error_message(str(exc)),
                "traceback": traceback.format_exc(),
            }

        return JSONResponse(
            status_code=status_code,
            content=error_body(error_code, message, request_path, request_method, details),
        )


def setup_error_handlers(app):
    """
    Set up exception handlers for FastAPI application.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(WorkflowError)
    async def workflow_exception_handler(request: Request, exc: WorkflowError):
        """Handle typed workflow failures."""
        if isinstance(exc, WorkflowSystemError):
            logger.error(
                f"Workflow system error: {request.method} {request.url.path} - {exc.message}",
                exc_info=exc,
            )
        else:
            logger.info(
                f"Workflow error: {request.method} {request.url.path} - {exc.code}: {exc.message}"
            )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(
                exc.code,
                sanitize_error_message(exc.message),
                str(request.url.path),
                request.method,
            ),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions."""
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(
                "HTTP_EXCEPTION",
                sanitize_error_message(str(exc.detail)),
                str(request.url.path),
                request.method,
            ),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle validation errors."""
        errors = [
            {
                "field": ".".join(str(loc) for loc in error["loc"]),
                "message": sanitize_error_message(error["msg"]),
                "type": error["type"],
            }
            for error in exc.errors()
        ]
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=error_body(
                "VALIDATION_ERROR",
                "Request validation failed",
                str(request.url.path),
                request.method,
                errors,
            ),
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        """Handle invalid input that slipped past schema validation."""
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(
                "INVALID_INPUT",
                sanitize_error_message(str(exc)) or "Invalid input provided",
                str(request.url.path),
                request.method,
            ),
        )
