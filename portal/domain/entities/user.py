"""User domain entity.

A portal user (content author or directory entry), independent of how
the entity store was loaded.
"""

from dataclasses import dataclass

from portal.domain.exceptions import ValidationException


@dataclass(frozen=True)
class UserEntity:
    """Immutable user. Shared by reference from every content item it authored."""

    id: str
    name: str
    email: str
    department: str | None = None
    avatar: str | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationException("User ID is required", field="id")
        if not self.name:
            raise ValidationException("User name is required", field="name")

    @property
    def has_department(self) -> bool:
        """Return whether the user belongs to a (non-empty) department."""
        return bool(self.department)
