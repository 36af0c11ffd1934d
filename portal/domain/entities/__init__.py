"""Domain entities: users and content items."""

from portal.domain.entities.content import ContentItemEntity
from portal.domain.entities.user import UserEntity

__all__ = ["ContentItemEntity", "UserEntity"]
