"""Aggregate use cases: department and tag summaries."""

from __future__ import annotations

from typing import TYPE_CHECKING

from portal.application.dtos.results import DepartmentInfo, TagInfo
from portal.application.services.aggregators import summarize_departments, summarize_tags

if TYPE_CHECKING:
    from portal.application.interfaces.repositories import IEntityStore


class GetDepartmentSummaryUseCase:
    """Departments with member and content counts."""

    def __init__(self, store: "IEntityStore") -> None:
        self.store = store

    def execute(self) -> list[DepartmentInfo]:
        return summarize_departments(self.store.list_users(), self.store.list_content())


class GetTagSummaryUseCase:
    """Tags with usage counts and inferred categories."""

    def __init__(self, store: "IEntityStore") -> None:
        self.store = store

    def execute(self) -> list[TagInfo]:
        return summarize_tags(self.store.list_content())
