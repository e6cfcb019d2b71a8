"""
Delay between picking a book and showing its pages.
"""
from typing import Optional

from PyQt5.QtCore import QObject, QTimer, pyqtSignal

from grimoire.config import OPENING_ANIMATION_MS
from grimoire.core.shelf import Book


class BookOpeningController(QObject):
    """Plays the cover opening for one book at a time."""
    
    opening = pyqtSignal(object)  # Book whose cover started opening
    opened = pyqtSignal(object)  # Book ready for editing
    
    def __init__(self, duration_ms: int = OPENING_ANIMATION_MS,
                 parent: Optional[QObject] = None):
        super().__init__(parent)
        self.book: Optional[Book] = None
        
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(duration_ms)
        self._timer.timeout.connect(self._finish)
    
    @property
    def is_opening(self) -> bool:
        return self.book is not None
    
    def open(self, book: Book) -> None:
        """Start opening a book, replacing any book still opening."""
        self.book = book
        self.opening.emit(book)
        self._timer.start()
    
    def cancel(self) -> None:
        self._timer.stop()
        self.book = None
    
    def _finish(self) -> None:
        book, self.book = self.book, None
        if book is not None:
            self.opened.emit(book)
