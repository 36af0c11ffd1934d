"""Health check endpoint; used for liveness probes. Does not touch the entity store."""

from fastapi import APIRouter

from portal.core.config import get_settings
from portal.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return ok plus the running version."""
    return HealthResponse(version=get_settings().app_version)
