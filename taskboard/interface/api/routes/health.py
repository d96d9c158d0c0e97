"""Health check route."""

from datetime import datetime
from typing import Literal

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from taskboard.config import Settings
from taskboard.domain.model.common import utcnow
from taskboard.util.observability import SERVICE_VERSION

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Liveness report with build details."""

    status: Literal["healthy"] = "healthy"
    timestamp: datetime
    version: str
    git_sha: str
    environment: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report liveness. Does not touch the database."""
    return HealthResponse(
        timestamp=utcnow(),
        version=SERVICE_VERSION,
        git_sha=settings.git_sha,
        environment=settings.environment,
    )
