"""
Controller for two-page spread navigation with a timed page turn.
"""
import logging
from typing import Optional, Tuple

from PyQt5.QtCore import QObject, QTimer, pyqtSignal

from grimoire.config import TRANSITION_DELAY_MS
from grimoire.core.pagination import MIN_PAGES, max_spread, spread_page_indices

logger = logging.getLogger(__name__)


class SpreadNavigator(QObject):
    """Tracks the open spread of a book and turns pages one spread at a time."""
    
    # Signals
    spread_changed = pyqtSignal(int)  # Emitted with the new spread index
    transition_started = pyqtSignal(int)  # +1 forward, -1 backward
    transition_finished = pyqtSignal()
    
    def __init__(self, total_pages: int = MIN_PAGES,
                 delay_ms: int = TRANSITION_DELAY_MS, parent: Optional[QObject] = None):
        super().__init__(parent)
        
        # Navigation state
        self.current_spread: int = 0
        self.transitioning: bool = False
        self.total_pages: int = max(MIN_PAGES, total_pages)
        self._direction: int = 0
        
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(delay_ms)
        self._timer.timeout.connect(self.finish_transition)
    
    @property
    def max_spread(self) -> int:
        return max_spread(self.total_pages)
    
    def page_indices(self, spread: Optional[int] = None) -> Tuple[int, int]:
        """
        Get the page indices shown by a spread.
        
        Args:
            spread: Spread index, defaults to the current spread
            
        Returns:
            Tuple of (left_page, right_page)
        """
        if spread is None:
            spread = self.current_spread
        return spread_page_indices(spread)
    
    def can_go_next(self) -> bool:
        return not self.transitioning and self.current_spread < self.max_spread
    
    def can_go_prev(self) -> bool:
        return not self.transitioning and self.current_spread > 0
    
    def next(self) -> bool:
        """
        Start turning to the following spread.
        
        Returns:
            True if a transition started, False if the request was dropped
        """
        if not self.can_go_next():
            logger.debug("Dropped next(): spread=%d max=%d transitioning=%s",
                         self.current_spread, self.max_spread, self.transitioning)
            return False
        self._start_transition(1)
        return True
    
    def prev(self) -> bool:
        """
        Start turning to the preceding spread.
        
        Returns:
            True if a transition started, False if the request was dropped
        """
        if not self.can_go_prev():
            logger.debug("Dropped prev(): spread=%d transitioning=%s",
                         self.current_spread, self.transitioning)
            return False
        self._start_transition(-1)
        return True
    
    def _start_transition(self, direction: int) -> None:
        self.transitioning = True
        self._direction = direction
        self.transition_started.emit(direction)
        self._timer.start()
    
    def finish_transition(self) -> None:
        """Complete a pending page turn. Called by the transition timer."""
        if not self.transitioning:
            return
        
        previous = self.current_spread
        target = previous + self._direction
        self.current_spread = max(0, min(self.max_spread, target))
        self.transitioning = False
        self._direction = 0
        
        if self.current_spread != previous:
            self.spread_changed.emit(self.current_spread)
        self.transition_finished.emit()
    
    def set_total_pages(self, total_pages: int) -> None:
        """
        Update the page total, clamping the open spread to the new bounds.
        
        Args:
            total_pages: Current page count of the buffer
        """
        self.total_pages = max(MIN_PAGES, total_pages)
        if self.current_spread > self.max_spread:
            self.current_spread = self.max_spread
            self.spread_changed.emit(self.current_spread)
    
    def reset(self) -> None:
        """Cancel any page turn and return to the first spread."""
        self.shutdown()
        if self.current_spread != 0:
            self.current_spread = 0
            self.spread_changed.emit(0)
    
    def shutdown(self) -> None:
        """Stop a pending page turn without moving."""
        self._timer.stop()
        self.transitioning = False
        self._direction = 0
