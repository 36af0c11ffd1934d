"""Relevance scoring and highlight extraction for content search.

Scoring is plain case-insensitive substring matching with fixed field
weights (see portal.core.constants). A title match always outranks a
content-only match, which outranks a single tag-only match.
"""

from collections.abc import Iterable

from portal.application.dtos.results import Highlights, SearchResult
from portal.core.constants import (
    SCORE_AUTHOR,
    SCORE_CONTENT,
    SCORE_NEUTRAL,
    SCORE_TAG,
    SCORE_TITLE,
    SNIPPET_RADIUS,
)
from portal.domain.entities import ContentItemEntity
from portal.shared.utils import contains_ci, find_ci


def matching_tags(item: ContentItemEntity, query: str) -> tuple[str, ...]:
    """Tags containing query, in original order."""
    return tuple(tag for tag in item.tags if contains_ci(tag, query))


def score(item: ContentItemEntity, query: str | None) -> int:
    """Return the relevance of item for query.

    An empty query scores every item SCORE_NEUTRAL so unscored listings
    still have a positive score. Otherwise the score is the sum of the
    weights of every matched field (tags count once per matching tag).
    """
    if not query:
        return SCORE_NEUTRAL
    total = 0
    if contains_ci(item.title, query):
        total += SCORE_TITLE
    if contains_ci(item.content, query):
        total += SCORE_CONTENT
    total += SCORE_TAG * len(matching_tags(item, query))
    if contains_ci(item.author.name, query):
        total += SCORE_AUTHOR
    return total


def content_snippet(content: str, query: str) -> str | None:
    """Window of content around the first match of query, or None if absent."""
    index = find_ci(content, query)
    if index < 0:
        return None
    start = max(0, index - SNIPPET_RADIUS)
    end = min(len(content), index + len(query) + SNIPPET_RADIUS)
    return content[start:end]


def highlights(item: ContentItemEntity, query: str | None) -> Highlights | None:
    """Return matched snippets per field; None when query is empty or nothing matched.

    Author-name matches score but are not highlighted.
    """
    if not query:
        return None
    title = (item.title,) if contains_ci(item.title, query) else None
    snippet = content_snippet(item.content, query)
    content = (snippet,) if snippet is not None else None
    tags = matching_tags(item, query) or None
    if title is None and content is None and tags is None:
        return None
    return Highlights(title=title, content=content, tags=tags)


def score_items(items: Iterable[ContentItemEntity], query: str | None) -> list[SearchResult]:
    """Score every item, dropping zero-score items when a text query was given."""
    results = [
        SearchResult(item=item, score=score(item, query), highlights=highlights(item, query))
        for item in items
    ]
    if query:
        results = [r for r in results if r.score > 0]
    return results
