"""Department and tag aggregate schemas (unpaginated)."""

from pydantic import Field

from portal.schemas.common import CamelModel
from portal.shared.enums import TagCategory


class DepartmentInfoResponse(CamelModel):
    name: str
    user_count: int = Field(..., ge=0)
    content_count: int = Field(..., ge=0)


class DepartmentListResponse(CamelModel):
    success: bool = True
    data: list[DepartmentInfoResponse]


class TagInfoResponse(CamelModel):
    name: str
    count: int = Field(..., gt=0)
    category: TagCategory


class TagListResponse(CamelModel):
    success: bool = True
    data: list[TagInfoResponse]
