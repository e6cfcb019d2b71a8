"""
Distribution of books across the shelves of the bookcase.
"""
import math
from typing import Hashable, List, Sequence

from grimoire.config import BOOKS_PER_SHELF, MIN_SHELVES


def shelf_count(book_total: int, per_shelf: int = BOOKS_PER_SHELF,
                min_shelves: int = MIN_SHELVES) -> int:
    """
    Number of shelves for a book total.
    
    One extra slot is reserved for the "add book" control, which always sits
    on the last shelf.
    """
    if per_shelf < 1:
        raise ValueError(f"per_shelf must be positive, got {per_shelf}")
    return max(min_shelves, math.ceil((book_total + 1) / per_shelf))


def layout_shelves(ids: Sequence[Hashable], per_shelf: int = BOOKS_PER_SHELF,
                   min_shelves: int = MIN_SHELVES) -> List[List[Hashable]]:
    """
    Split an ordered list of ids into shelves.
    
    Args:
        ids: Books in display order
        per_shelf: Books held by one shelf
        min_shelves: Shelves shown even when the bookcase is sparse
        
    Returns:
        One list per shelf; trailing shelves may be empty
    """
    return [
        list(ids[i * per_shelf:(i + 1) * per_shelf])
        for i in range(shelf_count(len(ids), per_shelf, min_shelves))
    ]
