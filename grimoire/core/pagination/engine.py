"""
Splits a note buffer into fixed-size pages and writes page edits back.

The buffer is the single source of truth: pages are never stored, they are
recomputed from the buffer on every call.
"""
import logging
import math
from typing import List, Tuple

from grimoire.config import LINES_PER_PAGE
from .models import Page

logger = logging.getLogger(__name__)

LINE_BREAK = "\n"
MIN_PAGES = 2


def _check_capacity(lines_per_page: int) -> None:
    if lines_per_page < 1:
        raise ValueError(f"lines_per_page must be positive, got {lines_per_page}")


def split_lines(buffer: str) -> List[str]:
    """
    Split a buffer into its lines.
    
    An empty buffer is a single empty line, never an empty list.
    """
    return buffer.split(LINE_BREAK)


def page_count(buffer: str, lines_per_page: int = LINES_PER_PAGE) -> int:
    """
    Number of pages needed to show the buffer.
    
    Args:
        buffer: Full note text
        lines_per_page: Page capacity in lines
        
    Returns:
        ceil(line count / capacity), never less than 2
    """
    _check_capacity(lines_per_page)
    line_total = len(split_lines(buffer))
    return max(MIN_PAGES, math.ceil(line_total / lines_per_page))


def max_spread(total_pages: int) -> int:
    """Index of the last two-page spread for a page total."""
    return max(0, (total_pages - 1) // 2)


def spread_page_indices(spread: int) -> Tuple[int, int]:
    """Left and right page indices shown by a spread."""
    return spread * 2, spread * 2 + 1


def read_page(buffer: str, page_index: int,
              lines_per_page: int = LINES_PER_PAGE) -> str:
    """
    Get the text of one page.
    
    Args:
        buffer: Full note text
        page_index: 0-based page index
        lines_per_page: Page capacity in lines
        
    Returns:
        The page's lines joined by line breaks, or an empty string when the
        index lies outside the buffer
    """
    _check_capacity(lines_per_page)
    if page_index < 0:
        return ""
    start = page_index * lines_per_page
    return LINE_BREAK.join(split_lines(buffer)[start:start + lines_per_page])


def write_page(buffer: str, page_index: int, new_content: str,
               lines_per_page: int = LINES_PER_PAGE) -> str:
    """
    Replace one page's lines in the buffer.
    
    Exactly the lines occupying the page's slots are removed and the lines of
    new_content are spliced in their place, so later pages shift when the
    line count changes. A page past the end of the buffer is appended, unless
    it is blank.
    
    Args:
        buffer: Full note text
        page_index: 0-based page index
        new_content: Replacement text for the page
        lines_per_page: Page capacity in lines
        
    Returns:
        The updated buffer
    """
    _check_capacity(lines_per_page)
    if page_index < 0:
        logger.debug("Ignoring write to negative page index %d", page_index)
        return buffer
    
    lines = split_lines(buffer)
    start = page_index * lines_per_page
    if start >= len(lines) and not new_content:
        # Blank page past the end of the buffer: nothing to write
        return buffer
    lines[start:start + lines_per_page] = split_lines(new_content)
    return LINE_BREAK.join(lines)


def page_at(buffer: str, page_index: int,
            lines_per_page: int = LINES_PER_PAGE) -> Page:
    """
    Build the Page view for one index of the buffer.
    
    Args:
        buffer: Full note text
        page_index: 0-based page index
        lines_per_page: Page capacity in lines
    """
    return Page(index=page_index, capacity=lines_per_page,
                content=read_page(buffer, page_index, lines_per_page))
