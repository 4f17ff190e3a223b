"""
Token verification and the authenticated identity passed to services.

Tokens are issued by an upstream identity provider; this service only checks
the signature and reads the ``sub`` and ``role`` claims.
"""

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

import jwt

from core.utils.datetime import now
from database.models.users import UserRole

logger = logging.getLogger(__name__)


class AuthenticationError(Exception):
    """Base exception for authentication errors."""
    pass


class TokenExpiredError(AuthenticationError):
    """Raised when JWT token has expired."""
    pass


class TokenInvalidError(AuthenticationError):
    """Raised when JWT token is invalid or carries an unusable payload."""
    pass


@dataclass(frozen=True)
class AuthenticatedUser:
    """Resolved caller identity. Required by every workflow operation."""

    id: str
    role: UserRole

    @property
    def is_employer(self) -> bool:
        return self.role == UserRole.EMPLOYER

    @property
    def is_talent(self) -> bool:
        return self.role == UserRole.TALENT


def create_access_token(
    user_id: str,
    role: UserRole,
    secret: str,
    algorithm: str = "HS256",
    expires_in: Optional[timedelta] = timedelta(hours=24),
) -> str:
    """
    Sign a token for a user. Used by the seed script and tests.

    Args:
        user_id: Subject claim
        role: User role claim
        secret: Signing secret
        algorithm: JWT algorithm
        expires_in: Lifetime, or None for a token without ``exp``

    Returns:
        Encoded JWT
    """
    issued_at = now()
    payload: dict = {"sub": user_id, "role": role.value, "iat": issued_at}
    if expires_in is not None:
        payload["exp"] = issued_at + expires_in
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_access_token(token: str, secret: str, algorithm: str = "HS256") -> AuthenticatedUser:
    """
    Verify a token and resolve the caller identity.

    Raises:
        TokenExpiredError: The token's ``exp`` is in the past
        TokenInvalidError: Bad signature, malformed token, or missing/unknown claims
    """
    try:
        payload = jwt.decode(token, secret, algorithms=[algorithm])
    except jwt.ExpiredSignatureError as e:
        raise TokenExpiredError("Token expired") from e
    except jwt.InvalidTokenError as e:
        raise TokenInvalidError("Invalid token") from e

    subject = payload.get("sub")
    role = payload.get("role")
    if not subject or not role:
        raise TokenInvalidError("Invalid token payload")

    try:
        user_role = UserRole(role)
    except ValueError as e:
        raise TokenInvalidError("Invalid user role") from e

    return AuthenticatedUser(id=str(subject), role=user_role)
