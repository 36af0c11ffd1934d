"""Domain layer: entities and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from portal.domain.entities import ContentItemEntity, UserEntity
from portal.domain.exceptions import (
    InvalidLimitException,
    InvalidPageException,
    PortalException,
    SeedDataException,
    ValidationException,
)

__all__ = [
    "ContentItemEntity",
    "UserEntity",
    "InvalidLimitException",
    "InvalidPageException",
    "PortalException",
    "SeedDataException",
    "ValidationException",
]
