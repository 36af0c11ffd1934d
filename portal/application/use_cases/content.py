"""Content listing use case: filter, sort, paginate."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from portal.application.dtos.query import ContentQuery
from portal.application.dtos.results import Page
from portal.application.services.filters import apply_predicates, build_content_predicates
from portal.application.services.pagination import paginate
from portal.application.services.sorting import sort_content
from portal.domain.entities import ContentItemEntity

if TYPE_CHECKING:
    from portal.application.interfaces.repositories import IEntityStore

logger = logging.getLogger(__name__)


class ListContentUseCase:
    """List content items matching the query filters, newest first by default."""

    def __init__(self, store: "IEntityStore") -> None:
        self.store = store

    def execute(self, query: ContentQuery) -> Page[ContentItemEntity]:
        predicates = build_content_predicates(query)
        candidates = apply_predicates(self.store.list_content(), predicates)
        ordered = sort_content(candidates, query.sort_by, query.sort_order)
        page = paginate(ordered, query.page_request)
        logger.debug(
            "Listed content: filters=%d matched=%d page=%d",
            len(predicates),
            page.meta.total,
            page.meta.page,
        )
        return page
