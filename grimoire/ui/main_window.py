"""
Main application window: the bookcase, the opening cover and the open book.
"""
import logging
import time
from dataclasses import replace
from typing import Dict, Optional

from PyQt5.QtWidgets import QInputDialog, QMainWindow, QStackedWidget

from grimoire.config import PROJECT_NAME
from grimoire.controllers import BookOpeningController, NoteEditorController, ReorderController
from grimoire.core.shelf import Book
from .note_editor import NoteEditorWidget
from .opening_view import OpeningView
from .shelf_widget import ShelfWidget

logger = logging.getLogger(__name__)

# (cover, accent) pairs handed out to new books in turn
COVER_PALETTE = [
    ("#8B4513", "#D4AF37"),
    ("#4A0E4E", "#9D50BB"),
    ("#0F4C5C", "#5FA8D3"),
    ("#1B4332", "#95D5B2"),
    ("#6A040F", "#F48C06"),
]

STARTER_BOOKS = [
    Book("1", "Potions & Chemistry", "#8B4513", "#D4AF37"),
    Book("2", "Ancient Runes & History", "#4A0E4E", "#9D50BB"),
    Book("3", "Arithmancy & Mathematics", "#0F4C5C", "#5FA8D3"),
]


class MainWindow(QMainWindow):
    """Holds the books in memory and switches between shelf and editor."""
    
    def __init__(self):
        super().__init__()
        self.setWindowTitle(PROJECT_NAME)
        
        self.books: Dict[str, Book] = {book.id: replace(book) for book in STARTER_BOOKS}
        self.reorder_controller = ReorderController(self.books.keys(), self)
        self.opening_controller = BookOpeningController(parent=self)
        self.editor_controller: Optional[NoteEditorController] = None
        self.editor_widget: Optional[NoteEditorWidget] = None
        
        self.stack = QStackedWidget(self)
        self.setCentralWidget(self.stack)
        
        self.shelf_widget = ShelfWidget(self.reorder_controller, self)
        self.shelf_widget.book_selected.connect(self.opening_controller.open)
        self.shelf_widget.add_requested.connect(self.add_book)
        self.shelf_widget.delete_requested.connect(self.delete_book)
        self.stack.addWidget(self.shelf_widget)
        
        self.opening_view = OpeningView(self)
        self.stack.addWidget(self.opening_view)
        
        self.opening_controller.opening.connect(self._on_book_opening)
        self.opening_controller.opened.connect(self.open_book)
        
        self._refresh_shelf()
    
    def _ordered_books(self):
        return [self.books[book_id] for book_id in self.reorder_controller.ids()]
    
    def _refresh_shelf(self):
        self.shelf_widget.set_books(self._ordered_books())
    
    def _on_book_opening(self, book: Book):
        self.opening_view.show_book(book)
        self.stack.setCurrentWidget(self.opening_view)
    
    def add_book(self):
        title, ok = QInputDialog.getText(self, "New book", "Title:")
        if not ok or not title.strip():
            return
        color, accent = COVER_PALETTE[len(self.books) % len(COVER_PALETTE)]
        book = Book(str(int(time.time() * 1000)), title.strip(), color, accent)
        self.books[book.id] = book
        self.reorder_controller.reset(self.reorder_controller.ids() + [book.id])
        logger.info("Added book %s (%s)", book.id, book.title)
        self._refresh_shelf()
    
    def delete_book(self, book_id: str):
        if self.books.pop(book_id, None) is None:
            return
        self.reorder_controller.reset(
            [i for i in self.reorder_controller.ids() if i != book_id]
        )
        if self.editor_controller is not None and self.editor_controller.book_id == book_id:
            self.close_book()
        logger.info("Deleted book %s", book_id)
        self._refresh_shelf()
    
    def open_book(self, book: Book):
        self.close_book()
        self.editor_controller = NoteEditorController(book, parent=self)
        self.editor_controller.saved.connect(self.save_notes)
        self.editor_widget = NoteEditorWidget(self.editor_controller, book.title, self)
        self.editor_widget.close_requested.connect(self.close_book)
        self.stack.addWidget(self.editor_widget)
        self.stack.setCurrentWidget(self.editor_widget)
    
    def save_notes(self, book_id: str, notes: str):
        book = self.books.get(book_id)
        if book is not None:
            book.notes = notes
    
    def close_book(self):
        if self.editor_controller is not None:
            self.editor_controller.close()
            self.editor_controller.deleteLater()
            self.editor_controller = None
        if self.editor_widget is not None:
            self.stack.removeWidget(self.editor_widget)
            self.editor_widget.deleteLater()
            self.editor_widget = None
        self.stack.setCurrentWidget(self.shelf_widget)
    
    def closeEvent(self, event):
        self.opening_controller.cancel()
        self.close_book()
        super().closeEvent(event)
