"""Page parameter clamping and page slicing."""
import pytest

from articles_api.pagination import PaginationParameters, paginate, total_pages


@pytest.mark.parametrize("page_number, expected", [(-5, 1), (0, 1), (1, 1), (7, 7)])
def test_page_number_is_at_least_one(page_number, expected):
    assert PaginationParameters(page_number, 10).page_number == expected


@pytest.mark.parametrize("page_size, expected", [(-1, 10), (0, 10), (1, 1), (50, 50), (51, 50), (1000, 50)])
def test_page_size_is_clamped(page_size, expected):
    assert PaginationParameters(1, page_size).page_size == expected


def test_custom_default_and_ceiling():
    params = PaginationParameters(1, 0, default_page_size=5, max_page_size=20)
    assert params.page_size == 5
    assert PaginationParameters(1, 99, max_page_size=20).page_size == 20


def test_offset():
    assert PaginationParameters(1, 10).offset == 0
    assert PaginationParameters(3, 10).offset == 20


@pytest.mark.parametrize(
    "total_count, page_size, expected",
    [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (3, 2, 2), (100, 50, 2)],
)
def test_total_pages(total_count, page_size, expected):
    assert total_pages(total_count, page_size) == expected


def test_paginate_three_items_two_per_page():
    items = ["a", "b", "c"]

    first = paginate(items, len(items), PaginationParameters(1, 2))
    assert first.items == ["a", "b"]
    assert first.total_pages == 2
    assert first.total_count == 3

    second = paginate(items, len(items), PaginationParameters(2, 2))
    assert second.items == ["c"]
    assert second.page_number == 2
    assert second.page_size == 2


def test_paginate_past_the_end_is_empty():
    result = paginate([1, 2, 3], 3, PaginationParameters(5, 2))
    assert result.items == []
    assert result.total_pages == 2


def test_paginate_empty():
    result = paginate([], 0, PaginationParameters())
    assert result.items == []
    assert result.total_count == 0
    assert result.total_pages == 0
