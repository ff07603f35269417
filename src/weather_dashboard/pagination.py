# Project: weather-dashboard
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
pagination.py — Page math for the results table.

Pages are 1-based. Out-of-range page requests are clamped, never rejected.
"""

import math
from collections.abc import Sequence
from typing import TypeVar

from weather_dashboard.models import PageView, TableRow

PAGE_SIZE_OPTIONS: tuple[int, ...] = (10, 20, 50)
DEFAULT_PAGE_SIZE: int = 10
MAX_PAGE_BUTTONS: int = 5

T = TypeVar("T")


def check_page_size(page_size: int) -> int:
    """Return page_size if it is one of PAGE_SIZE_OPTIONS, else raise ValueError."""
    if page_size not in PAGE_SIZE_OPTIONS:
        raise ValueError(
            f"Unsupported page size: {page_size}. Choose one of {PAGE_SIZE_OPTIONS}."
        )
    return page_size


def total_pages(row_count: int, page_size: int) -> int:
    """Number of pages needed for row_count rows; at least 1 even when empty."""
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return max(1, math.ceil(row_count / page_size))


def clamp_page(requested: int, total: int) -> int:
    """Clamp a requested page number into [1, total]."""
    return max(1, min(requested, total))


def page_rows(rows: Sequence[T], page_number: int, page_size: int) -> list[T]:
    """Slice out one page of rows. The last page may be short.

    Pages before the first are empty, like pages past the last.
    """
    if page_number < 1:
        return []
    start = (page_number - 1) * page_size
    return list(rows[start:start + page_size])


def page_window(current_page: int, total: int) -> list[int]:
    """Page numbers to show as buttons, at most MAX_PAGE_BUTTONS of them.

    The window is centred on current_page where possible and slides to
    stay inside [1, total] near either end.
    """
    if total <= MAX_PAGE_BUTTONS:
        return list(range(1, total + 1))

    half = MAX_PAGE_BUTTONS // 2
    if current_page <= half + 1:
        first = 1
    elif current_page >= total - half:
        first = total - MAX_PAGE_BUTTONS + 1
    else:
        first = current_page - half
    return list(range(first, first + MAX_PAGE_BUTTONS))


def paginate(rows: Sequence[TableRow], page_number: int, page_size: int) -> PageView:
    """Build the PageView for a (possibly out-of-range) page request."""
    pages = total_pages(len(rows), page_size)
    page = clamp_page(page_number, pages)
    return PageView(
        rows=tuple(page_rows(rows, page, page_size)),
        page_number=page,
        page_size=page_size,
        total_pages=pages,
        total_rows=len(rows),
        window=tuple(page_window(page, pages)),
    )
