"""Paginator: slice an ordered sequence and compute pagination metadata."""

import math
from collections.abc import Sequence
from typing import TypeVar

from portal.application.dtos.query import PageRequest
from portal.application.dtos.results import Page, PaginationMeta

T = TypeVar("T")


def paginate(items: Sequence[T], page_request: PageRequest) -> Page[T]:
    """Return the requested page of items.

    A start index past the end yields an empty page, not an error.
    """
    total = len(items)
    total_pages = math.ceil(total / page_request.limit)
    start = page_request.offset
    meta = PaginationMeta(
        page=page_request.page,
        limit=page_request.limit,
        total=total,
        total_pages=total_pages,
        has_next=page_request.page < total_pages,
        has_prev=page_request.page > 1,
    )
    return Page(items=list(items[start : start + page_request.limit]), meta=meta)
