"""Pagination — page normalization, page counts and offsets.

Tests:
    - Unparseable and non-positive pages become 1
    - total_pages is 1 up to one full page, ceil(total / 10) beyond
    - Offsets are never clamped to the last page
"""

import pytest

from bookshelf.core.pagination import (
    PAGE_SIZE, count_pages, normalize_page, paginate,
)


@pytest.mark.parametrize("raw", [None, "", "abc", "0", "-1", "2.5", 0, -7])
def test_normalize_page_falls_back_to_one(raw):
    assert normalize_page(raw) == 1


@pytest.mark.parametrize("raw, expected", [("1", 1), ("2", 2), (" 3 ", 3), (12, 12)])
def test_normalize_page_keeps_positive_integers(raw, expected):
    assert normalize_page(raw) == expected


def test_page_size_is_ten():
    assert PAGE_SIZE == 10


@pytest.mark.parametrize("total, pages", [
    (0, 1), (1, 1), (10, 1), (11, 2), (20, 2), (21, 3), (105, 11),
])
def test_count_pages(total, pages):
    assert count_pages(total) == pages


def test_first_page_has_zero_offset():
    window = paginate(total=57, page=1)
    assert window.offset == 0
    assert window.limit == 10
    assert window.total_pages == 6


def test_later_page_offset():
    assert paginate(total=57, page=4).offset == 30


def test_page_beyond_total_is_not_clamped():
    window = paginate(total=5, page=7)
    assert window.page == 7
    assert window.total_pages == 1
    assert window.offset == 60
