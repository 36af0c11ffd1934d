"""Content item domain entity.

Represents an announcement, news post, policy or event published on the
intranet. Created once when the entity store loads and never mutated.
"""

from dataclasses import dataclass
from datetime import datetime

from portal.domain.entities.user import UserEntity
from portal.domain.exceptions import ValidationException
from portal.shared.enums import ContentType


@dataclass(frozen=True)
class ContentItemEntity:
    """Immutable content item.

    updated_at >= created_at is expected but not enforced. Tags keep their
    original order; duplicates are allowed.
    """

    id: str
    title: str
    content: str
    author: UserEntity
    created_at: datetime
    updated_at: datetime
    tags: tuple[str, ...]
    type: ContentType

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationException("Content ID is required", field="id")
        if self.created_at.tzinfo is None or self.updated_at.tzinfo is None:
            raise ValidationException(
                "Content timestamps must be timezone-aware", field="created_at"
            )
