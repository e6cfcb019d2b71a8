"""
Books on the shelf: ordering, layout and decoration.
"""

from .appearance import scatter_particles, spine_style
from .layout import layout_shelves, shelf_count
from .models import Axis, Book, DragSession, Particle, SpineStyle, TargetBounds
from .ordering import OrderedCollection, move_item, passes_midpoint

__all__ = [
    "Axis",
    "Book",
    "DragSession",
    "OrderedCollection",
    "Particle",
    "SpineStyle",
    "TargetBounds",
    "layout_shelves",
    "move_item",
    "passes_midpoint",
    "scatter_particles",
    "shelf_count",
    "spine_style",
]
