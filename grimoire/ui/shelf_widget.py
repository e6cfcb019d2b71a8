from typing import Dict, List

from PyQt5.QtCore import QPoint, QRect, Qt, pyqtSignal
from PyQt5.QtWidgets import (
    QApplication,
    QFrame,
    QHBoxLayout,
    QMenu,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
)

from grimoire.controllers import ReorderController
from grimoire.core.shelf import Axis, Book, TargetBounds, layout_shelves, spine_style


class SpineButton(QPushButton):
    """A book spine that can be clicked open or dragged along the shelf."""

    def __init__(self, book: Book, shelf: "ShelfWidget"):
        super().__init__(book.title, shelf)
        self.book = book
        self.shelf = shelf
        self._press_pos = None

        style = spine_style(book.id)
        self.setFixedSize(64, style.height)
        self.setToolTip(book.title)
        self.set_dragging(False)

    def set_dragging(self, dragging: bool):
        """Lift the spine off the shelf while it is being dragged."""
        border = "dashed" if dragging else "solid"
        self.setStyleSheet(
            f"QPushButton {{ background-color: {self.book.color}; color: {self.book.accent_color};"
            f" border: 2px {border} {self.book.accent_color}; border-radius: 4px; }}"
        )
        self.setProperty("dragging", dragging)

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            self._press_pos = event.globalPos()
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event):
        if self._press_pos is None or not (event.buttons() & Qt.LeftButton):
            return super().mouseMoveEvent(event)

        controller = self.shelf.controller
        if not controller.is_dragging:
            distance = (event.globalPos() - self._press_pos).manhattanLength()
            if distance < QApplication.startDragDistance():
                return
            controller.begin_drag(self.book.id)
            self.setDown(False)
        self.shelf.drag_over(event.globalPos())

    def mouseReleaseEvent(self, event):
        controller = self.shelf.controller
        self._press_pos = None
        if controller.is_dragging:
            controller.end_drag()
            return
        super().mouseReleaseEvent(event)

    def contextMenuEvent(self, event):
        menu = QMenu(self)
        delete_action = menu.addAction("Delete")
        if menu.exec_(event.globalPos()) is delete_action:
            answer = QMessageBox.question(
                self, "Delete book",
                f'Delete "{self.book.title}"? This will remove all notes inside.'
            )
            if answer == QMessageBox.Yes:
                self.shelf.delete_requested.emit(self.book.id)


class ShelfWidget(QFrame):
    """Bookcase of spines, reordered by dragging."""

    book_selected = pyqtSignal(object)
    add_requested = pyqtSignal()
    delete_requested = pyqtSignal(str)

    # Spines sit side by side, so drags are measured along x
    axis = Axis.HORIZONTAL

    def __init__(self, controller: ReorderController, parent=None):
        super().__init__(parent)
        self.setObjectName("Shelf")
        self.controller = controller
        self.spines: Dict[str, SpineButton] = {}
        self._rows: List[QHBoxLayout] = []

        self.main_layout = QVBoxLayout(self)
        self.main_layout.setSpacing(24)

        self.add_button = QPushButton("+", self)
        self.add_button.setFixedSize(64, 240)
        self.add_button.setToolTip("Add a new book")
        self.add_button.clicked.connect(self.add_requested)

        controller.order_changed.connect(lambda _ids: self._relayout())
        controller.drag_started.connect(self._on_drag_started)
        controller.drag_ended.connect(self._on_drag_ended)

    def set_books(self, books: List[Book]):
        """Rebuild the spines for the given books, in shelf order."""
        for spine in self.spines.values():
            spine.deleteLater()
        self.spines = {}
        for book in books:
            spine = SpineButton(book, self)
            spine.clicked.connect(lambda _checked=False, b=book: self.book_selected.emit(b))
            self.spines[book.id] = spine
        self._relayout()

    def _relayout(self):
        # Existing spines are moved between rows, never recreated, so a spine
        # keeps its mouse grab while it is being dragged.
        for row in self._rows:
            while row.count():
                row.takeAt(0)
            self.main_layout.removeItem(row)
            row.deleteLater()
        self._rows = []

        shelves = layout_shelves(self.controller.ids())
        for index, shelf_ids in enumerate(shelves):
            row = QHBoxLayout()
            row.setSpacing(12)
            row.setAlignment(Qt.AlignLeft | Qt.AlignBottom)
            for book_id in shelf_ids:
                row.addWidget(self.spines[book_id])
            if index == len(shelves) - 1:
                row.addWidget(self.add_button)
            self.main_layout.addLayout(row)
            self._rows.append(row)

    def drag_over(self, global_pos: QPoint):
        """Forward the pointer position to the controller as a hover event."""
        for book_id, spine in self.spines.items():
            rect = QRect(spine.mapToGlobal(QPoint(0, 0)), spine.size())
            if not rect.contains(global_pos):
                continue
            bounds = TargetBounds.from_rect(rect, self.axis)
            pointer = global_pos.x() if self.axis is Axis.HORIZONTAL else global_pos.y()
            self.controller.hover(book_id, pointer, bounds)
            return

    def _on_drag_started(self, book_id):
        spine = self.spines.get(book_id)
        if spine is not None:
            spine.set_dragging(True)

    def _on_drag_ended(self, book_id):
        spine = self.spines.get(book_id)
        if spine is not None:
            spine.set_dragging(False)
