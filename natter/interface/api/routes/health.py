"""Liveness probe."""

from datetime import datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from natter.config import Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)

STARTED_AT = datetime.now(timezone.utc)


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    uptime_seconds: float
    environment: str
    git_sha: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the process is serving, and which build it runs.

    Does not touch the database; load balancers poll it often.
    """
    now = datetime.now(timezone.utc)
    return HealthResponse(
        status="healthy",
        timestamp=now,
        uptime_seconds=(now - STARTED_AT).total_seconds(),
        environment=settings.environment,
        git_sha=settings.git_sha,
    )
