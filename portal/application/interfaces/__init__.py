"""Application ports (protocols implemented by infrastructure)."""

from portal.application.interfaces.repositories import IEntityStore

__all__ = ["IEntityStore"]
