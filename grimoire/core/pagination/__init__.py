"""
Pagination of note text into fixed-size pages and two-page spreads.
"""

from .engine import (
    MIN_PAGES,
    max_spread,
    page_count,
    page_at,
    read_page,
    split_lines,
    spread_page_indices,
    write_page,
)
from .models import Page

__all__ = [
    "MIN_PAGES",
    "Page",
    "max_spread",
    "page_count",
    "page_at",
    "read_page",
    "split_lines",
    "spread_page_indices",
    "write_page",
]
