"""Pagination Calculator — page normalization, page count and offset.

Invariants:
    - Page numbers are always >= 1 after normalize_page()
    - total_pages is 1 when total <= page_size, else ceil(total / page_size)
    - Page 1 always has offset 0
    - Requested page is NOT clamped against total_pages: a page past the end
      produces an offset past the last row and an empty result
"""

import math
from dataclasses import dataclass

PAGE_SIZE = 10


@dataclass(frozen=True)
class PageWindow:
    """Where a requested page sits in a result set."""
    page: int
    total_pages: int
    offset: int
    limit: int


def normalize_page(raw: str | int | None) -> int:
    """Parse an untrusted page parameter. Unparseable or non-positive -> 1."""
    if raw is None:
        return 1
    try:
        page = int(str(raw).strip())
    except ValueError:
        return 1
    return page if page > 0 else 1


def count_pages(total: int, page_size: int = PAGE_SIZE) -> int:
    if total > page_size:
        return math.ceil(total / page_size)
    return 1


def paginate(total: int, page: int, page_size: int = PAGE_SIZE) -> PageWindow:
    """Compute the window for `page` given `total` matching rows."""
    offset = (page - 1) * page_size if page > 1 else 0
    return PageWindow(
        page=page,
        total_pages=count_pages(total, page_size),
        offset=offset,
        limit=page_size,
    )
