"""FastAPI dependencies for dependency injection."""

from typing import AsyncGenerator, Optional
from fastapi import Depends, HTTPException, status, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import settings
from core.integrations.descriptions import DescriptionGenerator
from core.security import (
    AuthenticatedUser,
    TokenExpiredError,
    TokenInvalidError,
    decode_access_token,
)
from database.models.users import UserRole


security = HTTPBearer(auto_error=False)


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield a session from the process-scoped database handle."""
    async with request.app.state.db.session() as session:
        yield session


def get_description_generator(request: Request) -> DescriptionGenerator:
    """Description generator created at startup."""
    return request.app.state.description_generator


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthenticatedUser:
    """Resolve the caller from a Bearer token."""
    if credentials is None or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization token required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return decode_access_token(
            credentials.credentials,
            settings.jwt_secret_key,
            settings.jwt_algorithm,
        )
    except TokenExpiredError:
        detail = "Token expired"
    except TokenInvalidError as e:
        detail = str(e)

    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def require_role(role: UserRole):
    """Build a dependency that only admits callers with the given role."""

    async def dependency(
        current_user: AuthenticatedUser = Depends(get_current_user),
    ) -> AuthenticatedUser:
        if current_user.role != role:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"{role.value.capitalize()} access required",
            )
        return current_user

    return dependency


require_employer = require_role(UserRole.EMPLOYER)
require_talent = require_role(UserRole.TALENT)
