"""Use cases: one class per query endpoint, built over an IEntityStore."""

from portal.application.use_cases.aggregates import (
    GetDepartmentSummaryUseCase,
    GetTagSummaryUseCase,
)
from portal.application.use_cases.content import ListContentUseCase
from portal.application.use_cases.search import SearchContentUseCase
from portal.application.use_cases.users import ListUsersUseCase

__all__ = [
    "GetDepartmentSummaryUseCase",
    "GetTagSummaryUseCase",
    "ListContentUseCase",
    "ListUsersUseCase",
    "SearchContentUseCase",
]
