# team_service/services/paging.py
from __future__ import annotations

from dataclasses import dataclass

MIN_ITEMS_PER_PAGE = 10
MAX_ITEMS_PER_PAGE = 100


def clamp_page(page: int | None) -> int:
    if page is None or page < 1:
        return 1
    return page


def clamp_items_per_page(items_per_page: int | None) -> int:
    """Out-of-range sizes are pulled into [10, 100], never rejected."""
    if items_per_page is None or items_per_page < MIN_ITEMS_PER_PAGE:
        return MIN_ITEMS_PER_PAGE
    if items_per_page > MAX_ITEMS_PER_PAGE:
        return MAX_ITEMS_PER_PAGE
    return items_per_page


def page_offset(page: int, items_per_page: int) -> int:
    return (page - 1) * items_per_page


@dataclass(frozen=True)
class Page:
    page: int = 1
    items_per_page: int = MIN_ITEMS_PER_PAGE

    @classmethod
    def clamped(cls, page: int | None, items_per_page: int | None) -> "Page":
        return cls(page=clamp_page(page), items_per_page=clamp_items_per_page(items_per_page))

    @property
    def offset(self) -> int:
        return page_offset(self.page, self.items_per_page)

    @property
    def limit(self) -> int:
        return self.items_per_page
