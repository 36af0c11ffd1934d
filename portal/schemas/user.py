"""User API schemas."""

from portal.application.dtos.results import Page
from portal.domain.entities import UserEntity
from portal.schemas.common import CamelModel, PaginationMetaResponse


class UserResponse(CamelModel):
    """User as exposed by the API; absent department/avatar are omitted."""

    id: str
    name: str
    email: str
    department: str | None = None
    avatar: str | None = None


class UserListResponse(CamelModel):
    """Paginated user directory."""

    success: bool = True
    data: list[UserResponse]
    meta: PaginationMetaResponse

    @classmethod
    def from_page(cls, page: Page[UserEntity]) -> "UserListResponse":
        return cls(
            data=[UserResponse.model_validate(user) for user in page.items],
            meta=PaginationMetaResponse.from_meta(page.meta),
        )
