"""Tests for GET /api/v1/content (filtering, sorting, pagination)."""

import pytest
from httpx import AsyncClient

from portal.infrastructure.store import InMemoryEntityStore
from portal.shared.enums import ContentType
from tests.conftest import assert_error, assert_paginated, make_content, make_user

URL = "/api/v1/content"


def _ids(body: dict) -> list[str]:
    return [item["id"] for item in body["data"]]


async def test_defaults_newest_first(client: AsyncClient) -> None:
    response = await client.get(URL)
    assert response.status_code == 200
    body = response.json()
    assert_paginated(body)
    assert _ids(body) == ["12", "11", "10", "9", "8", "7", "6", "5", "4", "3"]
    assert body["meta"] == {
        "page": 1,
        "limit": 10,
        "total": 12,
        "totalPages": 2,
        "hasNext": True,
        "hasPrev": False,
    }


async def test_first_page_of_ten_items(client: AsyncClient, use_store) -> None:
    author = make_user()
    items = [make_content(id=str(n), author=author, day=n) for n in range(10)]
    use_store(InMemoryEntityStore([author], items))

    response = await client.get(URL, params={"page": 1, "limit": 3})
    body = response.json()
    assert _ids(body) == ["9", "8", "7"]
    assert body["meta"]["hasNext"] is True
    assert body["meta"]["hasPrev"] is False
    assert body["meta"]["totalPages"] == 4


async def test_middle_page(client: AsyncClient) -> None:
    body = (await client.get(URL, params={"page": 2, "limit": 5})).json()
    assert _ids(body) == ["7", "6", "5", "4", "3"]
    assert body["meta"]["hasNext"] is True
    assert body["meta"]["hasPrev"] is True


async def test_page_past_end_is_empty(client: AsyncClient) -> None:
    response = await client.get(URL, params={"page": 99})
    assert response.status_code == 200
    body = response.json()
    assert body["data"] == []
    assert body["meta"]["total"] == 12
    assert body["meta"]["hasNext"] is False


@pytest.mark.parametrize("page", ["0", "-1", "abc"])
async def test_invalid_page(client: AsyncClient, page: str) -> None:
    response = await client.get(URL, params={"page": page})
    assert response.status_code == 400
    assert_error(response.json(), "INVALID_PAGE")


@pytest.mark.parametrize("limit", ["0", "101", "ten"])
async def test_invalid_limit(client: AsyncClient, limit: str) -> None:
    response = await client.get(URL, params={"limit": limit})
    assert response.status_code == 400
    assert_error(response.json(), "INVALID_LIMIT")


async def test_limit_bounds_accepted(client: AsyncClient) -> None:
    assert (await client.get(URL, params={"limit": 1})).status_code == 200
    body = (await client.get(URL, params={"limit": 100})).json()
    assert len(body["data"]) == 12
    assert body["meta"]["totalPages"] == 1


async def test_filter_by_type(client: AsyncClient) -> None:
    body = (await client.get(URL, params={"type": "policy"})).json()
    assert _ids(body) == ["9", "6", "3"]
    assert {item["type"] for item in body["data"]} == {"policy"}


async def test_unknown_type_matches_nothing(client: AsyncClient) -> None:
    body = (await client.get(URL, params={"type": "memo"})).json()
    assert body["data"] == []
    assert body["meta"]["total"] == 0
    assert body["meta"]["totalPages"] == 0
    assert body["meta"]["hasNext"] is False


async def test_filter_by_author_name_or_email(client: AsyncClient) -> None:
    assert _ids((await client.get(URL, params={"author": "JANE"})).json()) == ["3", "2"]
    assert _ids((await client.get(URL, params={"author": "alice.johnson@"})).json()) == ["4"]


async def test_filter_by_tags_substring_any(client: AsyncClient) -> None:
    body = (await client.get(URL, params={"tags": "polic"})).json()
    assert _ids(body) == ["9", "6", "3"]
    body = (await client.get(URL, params={"tags": "legal,marketing"})).json()
    assert _ids(body) == ["9", "5"]


async def test_filter_by_date_range_inclusive(client: AsyncClient) -> None:
    params = {"dateFrom": "2024-03-03T13:00:00Z", "dateTo": "2024-03-28T10:00:00Z"}
    body = (await client.get(URL, params=params)).json()
    assert _ids(body) == ["11", "10", "9", "8"]


async def test_unparseable_date_is_ignored(client: AsyncClient) -> None:
    body = (await client.get(URL, params={"dateFrom": "last week"})).json()
    assert body["meta"]["total"] == 12


async def test_filters_combine_with_and(client: AsyncClient) -> None:
    body = (await client.get(URL, params={"type": "news", "tags": "quarterly"})).json()
    assert _ids(body) == ["12", "10"]


async def test_sort_by_title_ascending(client: AsyncClient) -> None:
    body = (
        await client.get(URL, params={"sortBy": "title", "sortOrder": "asc", "limit": 3})
    ).json()
    assert [item["title"] for item in body["data"]] == [
        "Annual Expense Reporting Guidelines",
        "Contract Review Process Changes",
        "Customer Success Quarterly Review",
    ]


async def test_sort_by_created_at_ascending(client: AsyncClient) -> None:
    body = (await client.get(URL, params={"sortOrder": "asc", "limit": 3})).json()
    assert _ids(body) == ["1", "2", "3"]


async def test_unknown_sort_key_uses_default(client: AsyncClient) -> None:
    body = (await client.get(URL, params={"sortBy": "relevance", "limit": 2})).json()
    assert _ids(body) == ["12", "11"]


async def test_equal_keys_keep_collection_order(client: AsyncClient, use_store) -> None:
    author = make_user()
    items = [make_content(id=i, author=author, day=1) for i in ("a", "b", "c")]
    use_store(InMemoryEntityStore([author], items))
    for order in ("asc", "desc"):
        body = (await client.get(URL, params={"sortOrder": order})).json()
        assert _ids(body) == ["a", "b", "c"]


async def test_item_shape(client: AsyncClient, use_store) -> None:
    author = make_user(id="u9", name="No Dept")
    item = make_content(
        id="x", title="T", content="C", author=author, tags=["a"], type=ContentType.EVENT
    )
    use_store(InMemoryEntityStore([author], [item]))

    data = (await client.get(URL)).json()["data"][0]
    assert set(data) == {
        "id",
        "title",
        "content",
        "author",
        "createdAt",
        "updatedAt",
        "tags",
        "type",
    }
    assert data["author"] == {"id": "u9", "name": "No Dept", "email": "u9@example.com"}
    assert data["type"] == "event"
    assert data["createdAt"].startswith("2024-01-01T00:00:00")
