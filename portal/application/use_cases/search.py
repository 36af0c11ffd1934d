"""Content search use case: filter, score, sort by relevance, paginate."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from portal.application.dtos.query import SearchQuery
from portal.application.dtos.results import SearchPage
from portal.application.services.filters import apply_predicates, build_content_predicates
from portal.application.services.pagination import paginate
from portal.application.services.relevance import score_items
from portal.application.services.sorting import sort_search_results

if TYPE_CHECKING:
    from portal.application.interfaces.repositories import IEntityStore

logger = logging.getLogger(__name__)


class SearchContentUseCase:
    """Free-text search over content with the same filters as the content listing.

    With a text query only matching items are returned; without one every
    filtered item is returned with a neutral score.
    """

    def __init__(self, store: "IEntityStore") -> None:
        self.store = store

    def execute(self, query: SearchQuery, started_at: float | None = None) -> SearchPage:
        """Run the search.

        Args:
            query: Parsed search query (pagination already validated).
            started_at: time.perf_counter() value at request start; defaults to now.

        Returns:
            SearchPage with results, the query and elapsed milliseconds.
        """
        start = time.perf_counter() if started_at is None else started_at
        candidates = apply_predicates(
            self.store.list_content(), build_content_predicates(query)
        )
        results = score_items(candidates, query.q)
        ordered = sort_search_results(results, query.sort_by, query.sort_order)
        page = paginate(ordered, query.page_request)
        elapsed_ms = max(0.0, (time.perf_counter() - start) * 1000)
        logger.debug(
            "Search q=%r: candidates=%d matched=%d took=%.2fms",
            query.q,
            len(candidates),
            page.meta.total,
            elapsed_ms,
        )
        return SearchPage(page=page, query=query, execution_time_ms=round(elapsed_ms, 2))
