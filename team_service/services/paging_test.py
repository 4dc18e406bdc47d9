import pytest

from team_service.services.paging import (
    MAX_ITEMS_PER_PAGE,
    MIN_ITEMS_PER_PAGE,
    Page,
    clamp_items_per_page,
    clamp_page,
    page_offset,
)


@pytest.mark.parametrize("page,expected", [(-5, 1), (0, 1), (None, 1), (1, 1), (7, 7)])
def test_clamp_page(page, expected):
    assert clamp_page(page) == expected


@pytest.mark.parametrize(
    "size,expected",
    [(0, 10), (5, 10), (9, 10), (10, 10), (55, 55), (100, 100), (101, 100), (5000, 100), (None, 10)],
)
def test_clamp_items_per_page(size, expected):
    assert clamp_items_per_page(size) == expected


def test_bounds():
    assert MIN_ITEMS_PER_PAGE == 10
    assert MAX_ITEMS_PER_PAGE == 100


def test_page_offset():
    assert page_offset(1, 10) == 0
    assert page_offset(3, 25) == 50


def test_page_clamped_offset_and_limit():
    p = Page.clamped(0, 3)
    assert p == Page(page=1, items_per_page=10)
    assert p.offset == 0
    assert p.limit == 10

    p = Page.clamped(4, 250)
    assert p.items_per_page == 100
    assert p.offset == 300
