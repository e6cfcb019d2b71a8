"""
Editing session for the notes of a single book.
"""
import logging
from typing import Optional, Tuple

from PyQt5.QtCore import QObject, QTimer, pyqtSignal

from grimoire.config import LINES_PER_PAGE, SAVE_INDICATOR_MS, TRANSITION_DELAY_MS
from grimoire.core.pagination import Page, page_at, page_count, read_page, write_page
from grimoire.core.shelf import Book
from .spread_navigator import SpreadNavigator

logger = logging.getLogger(__name__)


class NoteEditorController(QObject):
    """Keeps a book's working buffer and its spread navigation in step."""
    
    # Signals
    saved = pyqtSignal(str, str)  # (book_id, notes)
    buffer_changed = pyqtSignal(str)
    saving_changed = pyqtSignal(bool)
    
    def __init__(self, book: Book, lines_per_page: int = LINES_PER_PAGE,
                 transition_delay_ms: int = TRANSITION_DELAY_MS,
                 save_indicator_ms: int = SAVE_INDICATOR_MS,
                 parent: Optional[QObject] = None):
        super().__init__(parent)
        
        self.book_id: str = book.id
        self.lines_per_page = lines_per_page
        self.buffer: str = book.notes
        self.is_saving: bool = False
        
        self.navigator = SpreadNavigator(
            page_count(self.buffer, lines_per_page), transition_delay_ms, self
        )
        
        self._save_timer = QTimer(self)
        self._save_timer.setSingleShot(True)
        self._save_timer.setInterval(save_indicator_ms)
        self._save_timer.timeout.connect(self._clear_saving)
    
    @property
    def total_pages(self) -> int:
        return page_count(self.buffer, self.lines_per_page)
    
    def page_content(self, page_index: int) -> str:
        return read_page(self.buffer, page_index, self.lines_per_page)
    
    def spread_pages(self) -> Tuple[Page, Page]:
        """Left and right pages of the open spread."""
        left, right = self.navigator.page_indices()
        return (page_at(self.buffer, left, self.lines_per_page),
                page_at(self.buffer, right, self.lines_per_page))
    
    def update_page(self, page_index: int, content: str) -> None:
        """
        Write edited page text back into the buffer.
        
        Args:
            page_index: 0-based page index
            content: Full text of the edited page
        """
        new_buffer = write_page(self.buffer, page_index, content, self.lines_per_page)
        if new_buffer == self.buffer:
            return
        self.buffer = new_buffer
        self.navigator.set_total_pages(self.total_pages)
        self.buffer_changed.emit(self.buffer)
    
    def load(self, notes: str) -> None:
        """
        Replace the buffer wholesale, e.g. when the stored notes change.
        
        Args:
            notes: New full note text
        """
        self.buffer = notes
        # Bounds must be current before spread_changed fires
        self.navigator.shutdown()
        self.navigator.set_total_pages(self.total_pages)
        self.navigator.reset()
        self.buffer_changed.emit(self.buffer)
    
    def save(self) -> None:
        """Hand the full reassembled buffer to the book store."""
        self.is_saving = True
        self.saving_changed.emit(True)
        logger.info("Saving notes for book %s (%d pages)", self.book_id, self.total_pages)
        self.saved.emit(self.book_id, self.buffer)
        self._save_timer.start()
    
    def _clear_saving(self) -> None:
        self.is_saving = False
        self.saving_changed.emit(False)
    
    def close(self) -> None:
        """Stop all pending timers before the editor goes away."""
        self._save_timer.stop()
        self.navigator.shutdown()
        if self.is_saving:
            self._clear_saving()
