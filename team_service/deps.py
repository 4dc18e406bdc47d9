from typing import Optional

from fastapi import Query

from team_service.services.paging import Page


def get_paging(
    page: int = Query(1, description="1-based page; values below 1 mean page 1"),
    items_per_page: Optional[int] = Query(
        10,
        alias="itemsPerPage",
        description="Page size, pulled into the range 10..100",
    ),
) -> Page:
    return Page.clamped(page, items_per_page)
