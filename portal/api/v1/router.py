"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from portal.api.v1.dependencies (no manual store/use case
construction). Error envelopes are documented once here for every
paginated resource.
"""

from fastapi import APIRouter

from portal.api.v1.endpoints import content, departments, health, search, tags, users
from portal.schemas.common import ErrorResponse

_PAGINATED_ERRORS = {
    400: {"model": ErrorResponse, "description": "INVALID_PAGE, INVALID_LIMIT or VALIDATION_ERROR"},
    500: {"model": ErrorResponse, "description": "INTERNAL_ERROR"},
}

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(
    search.router, prefix="/content/search", tags=["search"], responses=_PAGINATED_ERRORS
)
api_router.include_router(
    content.router, prefix="/content", tags=["content"], responses=_PAGINATED_ERRORS
)
api_router.include_router(
    users.router, prefix="/users", tags=["users"], responses=_PAGINATED_ERRORS
)
api_router.include_router(departments.router, prefix="/departments", tags=["departments"])
api_router.include_router(tags.router, prefix="/tags", tags=["tags"])
