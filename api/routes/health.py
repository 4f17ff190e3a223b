"""Health check endpoints."""

from fastapi import APIRouter
from pydantic import BaseModel

from api.schemas.common import IsoDatetime
from core.config import settings
from core.utils.datetime import now

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    environment: str
    timestamp: IsoDatetime


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(
        status="OK",
        version="0.1.0",
        environment=settings.app_env,
        timestamp=now(),
    )
