"""Unit tests for sort descriptors and sort-request resolution."""

from __future__ import annotations

import pytest

from es_commons.adapters.elasticsearch import Order, SortableField, Sorts, resolve_sorts, to_es_sort
from es_commons.application.pagination import SortDirection
from es_commons.kernel.errors import InvalidSortFieldError, ValidationError


class ArticleOrderBy(SortableField):
    published = "publishedAt"
    title = "title.keyword"


class TestSorts:
    def test_asc_is_ascending(self) -> None:
        assert Sorts.asc("title").es_sort == {"title": {"order": "asc"}}

    def test_desc_is_descending(self) -> None:
        assert Sorts.desc("title").es_sort == {"title": {"order": "desc"}}

    def test_default_direction_is_ascending(self) -> None:
        assert Sorts("title").direction == SortDirection.ASC

    def test_frozen(self) -> None:
        with pytest.raises((AttributeError, TypeError)):
            Sorts.asc("a").field = "b"  # type: ignore[misc]


class TestSortableField:
    def test_member_precomputes_both_directions(self) -> None:
        member = ArticleOrderBy.published
        assert member.field_name == "publishedAt"
        assert member.asc == Sorts("publishedAt", SortDirection.ASC)
        assert member.desc == Sorts("publishedAt", SortDirection.DESC)

    def test_get_returns_precomputed_instances(self) -> None:
        member = ArticleOrderBy.title
        assert member.get(SortDirection.ASC) is member.asc
        assert member.get(SortDirection.DESC) is member.desc

    def test_orders_use_member_name(self) -> None:
        assert ArticleOrderBy.published.desc_order() == Order("published", SortDirection.DESC)
        assert ArticleOrderBy.published.asc_order() == Order("published", SortDirection.ASC)

    def test_names(self) -> None:
        assert ArticleOrderBy.names() == ["published", "title"]


class TestResolveSorts:
    def test_none_resolves_to_empty_list(self) -> None:
        assert resolve_sorts(ArticleOrderBy, None) == []

    def test_empty_list_resolves_to_empty_list(self) -> None:
        assert resolve_sorts(ArticleOrderBy, []) == []

    def test_preserves_request_order(self) -> None:
        resolved = resolve_sorts(
            ArticleOrderBy,
            [Order("title", SortDirection.ASC), Order("published", SortDirection.DESC)],
        )
        assert resolved == [ArticleOrderBy.title.asc, ArticleOrderBy.published.desc]
        assert to_es_sort(resolved) == [
            {"title.keyword": {"order": "asc"}},
            {"publishedAt": {"order": "desc"}},
        ]

    def test_unknown_name_lists_valid_names(self) -> None:
        with pytest.raises(InvalidSortFieldError) as exc_info:
            resolve_sorts(ArticleOrderBy, [Order("author")])
        err = exc_info.value
        assert isinstance(err, ValidationError)
        assert err.code == "invalid_sort_field"
        assert err.allowed == ["published", "title"]
        assert '"published"' in err.message and '"title"' in err.message
        assert err.detail == {"field": "author", "allowed": ["published", "title"]}

    def test_es_field_name_is_not_a_valid_request_name(self) -> None:
        with pytest.raises(InvalidSortFieldError):
            resolve_sorts(ArticleOrderBy, [Order("publishedAt")])

    def test_to_es_sort_of_none(self) -> None:
        assert to_es_sort(None) == []
