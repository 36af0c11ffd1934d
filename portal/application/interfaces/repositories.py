"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference domain entities only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from portal.domain.entities import ContentItemEntity, UserEntity


class IEntityStore(Protocol):
    """Read-only access to the resident collections.

    Each call returns an immutable snapshot in the store's original order;
    that order is the tie-break for every stable sort.
    """

    def list_users(self) -> tuple[UserEntity, ...]:
        """Return all users in load order."""

    def list_content(self) -> tuple[ContentItemEntity, ...]:
        """Return all content items in load order."""
