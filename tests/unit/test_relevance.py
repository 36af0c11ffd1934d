"""Tests for relevance scoring and highlight extraction."""

from portal.application.services.relevance import (
    content_snippet,
    highlights,
    score,
    score_items,
)
from tests.conftest import make_content, make_user


def test_empty_query_scores_neutral() -> None:
    item = make_content(title="Anything")
    assert score(item, None) == 1
    assert score(item, "") == 1


def test_field_weights() -> None:
    author = make_user(name="Zed")
    assert score(make_content(title="Budget", author=author), "budget") == 10
    assert score(make_content(content="the budget", author=author), "budget") == 5
    assert score(make_content(tags=["budget"], author=author), "budget") == 2
    assert score(make_content(author=make_user(name="Budget Bob")), "budget") == 3


def test_tag_score_counts_each_matching_tag() -> None:
    item = make_content(tags=["meeting", "meetings", "other"])
    assert score(item, "meet") == 4


def test_title_outranks_content_outranks_tag() -> None:
    author = make_user(name="Zed")
    title_only = make_content(title="meeting", author=author)
    content_only = make_content(content="a meeting", author=author)
    tag_only = make_content(tags=["meeting"], author=author)
    assert score(title_only, "meeting") > score(content_only, "meeting") > score(tag_only, "meeting")


def test_removing_a_matching_field_never_increases_score() -> None:
    author = make_user(name="Zed")
    full = make_content(title="Meeting", content="meeting notes", tags=["meeting"], author=author)
    no_title = make_content(title="Notes", content="meeting notes", tags=["meeting"], author=author)
    assert score(full, "meeting") == 17
    assert score(no_title, "meeting") == 7


def test_non_matching_query_scores_zero() -> None:
    assert score(make_content(title="Hello", author=make_user(name="Zed")), "xyz") == 0


class TestHighlights:
    def test_none_for_empty_query(self) -> None:
        assert highlights(make_content(title="Hello"), "") is None

    def test_none_when_nothing_matched(self) -> None:
        assert highlights(make_content(title="Hello"), "xyz") is None

    def test_author_only_match_has_no_highlights(self) -> None:
        item = make_content(title="Hello", author=make_user(name="Xyz Person"))
        assert score(item, "xyz") == 3
        assert highlights(item, "xyz") is None

    def test_title_is_full_string(self) -> None:
        result = highlights(make_content(title="Q1 Company Meeting"), "meeting")
        assert result.title == ("Q1 Company Meeting",)
        assert result.content is None
        assert result.tags is None

    def test_tags_keep_original_order(self) -> None:
        result = highlights(make_content(tags=["b-meet", "other", "a-meet"]), "MEET")
        assert result.tags == ("b-meet", "a-meet")

    def test_content_window_clamped_at_start(self) -> None:
        text = "meeting" + "x" * 100
        assert content_snippet(text, "meeting") == text[: 7 + 50]

    def test_content_window_both_sides(self) -> None:
        text = "a" * 80 + "Meeting" + "b" * 80
        snippet = content_snippet(text, "meeting")
        assert snippet == "a" * 50 + "Meeting" + "b" * 50

    def test_content_window_clamped_at_end(self) -> None:
        text = "a" * 10 + "meeting"
        assert content_snippet(text, "meeting") == text

    def test_content_window_uses_first_match(self) -> None:
        text = "meeting" + "-" * 200 + "meeting"
        assert content_snippet(text, "meeting") == text[:57]


def test_score_items_drops_zero_scores_only_with_query() -> None:
    author = make_user(name="Zed")
    hit = make_content("1", title="meeting", author=author)
    miss = make_content("2", title="other", author=author)
    assert [r.item.id for r in score_items([hit, miss], "meeting")] == ["1"]
    unscored = score_items([hit, miss], None)
    assert [(r.item.id, r.score, r.highlights) for r in unscored] == [("1", 1, None), ("2", 1, None)]


def test_non_ascii_content_match_is_highlighted() -> None:
    item = make_content(content="Die Straße ist gesperrt", author=make_user(name="Zed"))
    assert score(item, "STRAßE") == 5
    result = highlights(item, "STRAßE")
    assert result is not None
    assert result.content == ("Die Straße ist gesperrt",)


def test_sharp_s_does_not_match_double_s() -> None:
    item = make_content(content="Die Straße ist gesperrt", author=make_user(name="Zed"))
    assert score(item, "strasse") == 0
    assert highlights(item, "strasse") is None
    assert score_items([item], "strasse") == []


def test_scored_content_always_has_snippet() -> None:
    author = make_user(name="Zed")
    for text, query in [("Ärger im Büro", "ÄRGER"), ("Ñandú en el zoo", "ÑANDÚ")]:
        item = make_content(content=text, author=author)
        assert score(item, query) == 5
        assert content_snippet(item.content, query) is not None
