"""
Ordered collection of unique ids and the midpoint rule used while dragging.
"""
from typing import Hashable, Iterable, Iterator, List, Sequence, TypeVar

from .models import TargetBounds

T = TypeVar("T")


def move_item(sequence: Sequence[T], from_index: int, to_index: int) -> List[T]:
    """
    Return a copy of sequence with one element relocated.
    
    The element at from_index is removed and reinserted at to_index.
    
    Raises:
        IndexError: If either index is outside the sequence
    """
    size = len(sequence)
    if not (0 <= from_index < size and 0 <= to_index < size):
        raise IndexError(f"cannot move {from_index} -> {to_index} in sequence of {size}")
    items = list(sequence)
    item = items.pop(from_index)
    items.insert(to_index, item)
    return items


def passes_midpoint(origin_index: int, hover_index: int,
                    pointer: float, bounds: TargetBounds) -> bool:
    """
    Decide whether a drag over a neighbour should swap the two.
    
    Moving forward, the pointer must have reached the far half of the target;
    moving backward, the near half. Hovering near a boundary therefore never
    flips the order back and forth.
    
    Args:
        origin_index: Current index of the dragged item
        hover_index: Index of the hovered item
        pointer: Pointer position along the primary axis
        bounds: Hovered item's extent along the same axis
    """
    if origin_index == hover_index:
        return False
    middle = bounds.midpoint
    if origin_index < hover_index and pointer < middle:
        return False
    if origin_index > hover_index and pointer > middle:
        return False
    return True


class OrderedCollection:
    """Display order of a set of unique ids."""
    
    def __init__(self, ids: Iterable[Hashable] = ()):
        self._ids: List[Hashable] = list(ids)
        if len(set(self._ids)) != len(self._ids):
            raise ValueError("OrderedCollection ids must be unique")
    
    def __len__(self) -> int:
        return len(self._ids)
    
    def __iter__(self) -> Iterator[Hashable]:
        return iter(list(self._ids))
    
    def __contains__(self, item_id) -> bool:
        return item_id in self._ids
    
    def __repr__(self) -> str:
        return f"OrderedCollection({self._ids!r})"
    
    def ids(self) -> List[Hashable]:
        """Snapshot of the current order."""
        return list(self._ids)
    
    def index_of(self, item_id: Hashable) -> int:
        """
        Position of an id, or -1 when it is not in the collection.
        """
        try:
            return self._ids.index(item_id)
        except ValueError:
            return -1
    
    def move(self, from_index: int, to_index: int) -> None:
        """Relocate the id at from_index to to_index."""
        self._ids = move_item(self._ids, from_index, to_index)
    
    def append(self, item_id: Hashable) -> None:
        if item_id in self._ids:
            raise ValueError(f"{item_id!r} is already in the collection")
        self._ids.append(item_id)
    
    def remove(self, item_id: Hashable) -> bool:
        """
        Remove an id.
        
        Returns:
            True if the id was found and removed
        """
        if item_id in self._ids:
            self._ids.remove(item_id)
            return True
        return False
