"""
Controller for drag-to-reorder of an ordered collection.
"""
import logging
from typing import Hashable, Iterable, List, Optional

from PyQt5.QtCore import QObject, pyqtSignal

from grimoire.core.shelf import DragSession, OrderedCollection, TargetBounds, passes_midpoint

logger = logging.getLogger(__name__)


class ReorderController(QObject):
    """
    Applies pick-up, hover and drop events to an OrderedCollection.
    
    Every permitted swap is committed to the order immediately, so dropping or
    cancelling a drag needs no further changes.
    """
    
    # Signals
    reordered = pyqtSignal(int, int)  # (drag_index, hover_index) of a committed swap
    order_changed = pyqtSignal(list)  # Full order after a committed swap
    drag_started = pyqtSignal(object)  # Id picked up
    drag_ended = pyqtSignal(object)  # Id dropped or cancelled
    
    def __init__(self, ids: Iterable[Hashable] = (), parent: Optional[QObject] = None):
        super().__init__(parent)
        self.order = OrderedCollection(ids)
        self.session: Optional[DragSession] = None
    
    @property
    def is_dragging(self) -> bool:
        return self.session is not None
    
    def ids(self) -> List[Hashable]:
        return self.order.ids()
    
    def reset(self, ids: Iterable[Hashable]) -> None:
        """
        Replace the collection after items were added or removed.
        
        Any live drag is ended first.
        """
        if self.session is not None:
            self.end_drag()
        self.order = OrderedCollection(ids)
    
    def begin_drag(self, item_id: Hashable) -> Optional[DragSession]:
        """
        Pick up an item.
        
        Args:
            item_id: Id of the item under the pointer
            
        Returns:
            The new DragSession, or None if the id is not in the collection
        """
        index = self.order.index_of(item_id)
        if index < 0:
            logger.debug("Ignoring drag of unknown id %r", item_id)
            return None
        
        self.session = DragSession(id=item_id, origin_index=index)
        self.drag_started.emit(item_id)
        return self.session
    
    def hover(self, target_id: Hashable, pointer: float, bounds: TargetBounds) -> bool:
        """
        Handle the dragged item passing over another item.
        
        Args:
            target_id: Id of the hovered item
            pointer: Pointer position along the primary axis
            bounds: Hovered item's extent along the same axis
            
        Returns:
            True if the order changed
        """
        session = self.session
        if session is None:
            return False
        
        hover_index = self.order.index_of(target_id)
        if hover_index < 0 or hover_index == session.origin_index:
            return False
        
        if not passes_midpoint(session.origin_index, hover_index, pointer, bounds):
            return False
        
        drag_index = session.origin_index
        self.order.move(drag_index, hover_index)
        session.origin_index = hover_index
        
        logger.info("Moved %r from %d to %d", session.id, drag_index, hover_index)
        self.reordered.emit(drag_index, hover_index)
        self.order_changed.emit(self.order.ids())
        return True
    
    def end_drag(self) -> None:
        """Drop the dragged item where it currently sits."""
        if self.session is None:
            return
        item_id = self.session.id
        self.session = None
        self.drag_ended.emit(item_id)
    
    def cancel_drag(self) -> None:
        """Abandon the drag; the last committed order stays in place."""
        self.end_drag()
