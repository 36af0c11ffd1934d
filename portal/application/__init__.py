"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (entity store).
"""

from portal.application.interfaces import IEntityStore
from portal.application.use_cases import (
    GetDepartmentSummaryUseCase,
    GetTagSummaryUseCase,
    ListContentUseCase,
    ListUsersUseCase,
    SearchContentUseCase,
)

__all__ = [
    "IEntityStore",
    "GetDepartmentSummaryUseCase",
    "GetTagSummaryUseCase",
    "ListContentUseCase",
    "ListUsersUseCase",
    "SearchContentUseCase",
]
