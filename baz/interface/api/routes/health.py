"""Liveness probe."""

from datetime import datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from baz import __version__
from baz.config import Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    status: str
    environment: str
    version: str
    git_sha: str
    checked_at: datetime


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the process is up.

    The database is not touched, so this stays green while the store is
    unreachable.
    """
    return HealthResponse(
        status="healthy",
        environment=settings.environment,
        version=__version__,
        git_sha=settings.git_sha,
        checked_at=datetime.now(timezone.utc),
    )
