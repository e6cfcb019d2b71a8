from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtWidgets import (
    QFrame,
    QGraphicsOpacityEffect,
    QHBoxLayout,
    QLabel,
    QPlainTextEdit,
    QPushButton,
    QToolButton,
    QVBoxLayout,
)

from grimoire.controllers import NoteEditorController
from grimoire.core.pagination import Page


class PageEditor(QPlainTextEdit):
    """Text area for one page of the open spread."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.page_index = 0
        self.setLineWrapMode(QPlainTextEdit.NoWrap)
        self.setPlaceholderText("Write your notes here...")
        self._fade = QGraphicsOpacityEffect(self)
        self._fade.setOpacity(1.0)
        self.setGraphicsEffect(self._fade)

    def set_faded(self, faded: bool) -> None:
        self._fade.setOpacity(0.2 if faded else 1.0)
        self.setReadOnly(faded)

    def show_page(self, page: Page) -> None:
        self.page_index = page.index
        self.setToolTip(f"Page {page.index + 1}, from line {page.first_line + 1}")
        self.replace_text(page.content)

    def replace_text(self, text: str) -> None:
        """Set the text, keeping the cursor as close to where it was as possible."""
        if self.toPlainText() == text:
            return
        position = self.textCursor().position()
        self.setPlainText(text)
        cursor = self.textCursor()
        cursor.setPosition(min(position, len(text)))
        self.setTextCursor(cursor)


class NoteEditorWidget(QFrame):
    """Open book showing two pages of notes at a time."""

    close_requested = pyqtSignal()

    def __init__(self, controller: NoteEditorController, title: str, parent=None):
        super().__init__(parent)
        self.setObjectName("NoteEditor")
        self.controller = controller
        self._refreshing = False
        self.setup_ui(title)

        navigator = controller.navigator
        navigator.transition_started.connect(self._on_transition_started)
        navigator.spread_changed.connect(lambda _spread: self.refresh())
        navigator.transition_finished.connect(self.refresh)
        controller.buffer_changed.connect(lambda _buffer: self.refresh())
        controller.saving_changed.connect(self._on_saving_changed)

        self.refresh()

    def setup_ui(self, title: str):
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(16, 16, 16, 16)
        main_layout.setSpacing(10)

        # Header
        header_layout = QHBoxLayout()
        title_label = QLabel(title, self)
        title_label.setStyleSheet("font-weight: bold; font-size: 18px;")
        header_layout.addWidget(title_label)
        header_layout.addStretch()

        self.save_button = QPushButton("Save", self)
        self.save_button.clicked.connect(self.controller.save)
        header_layout.addWidget(self.save_button)

        self.close_button = QToolButton(self)
        self.close_button.setText("✕")
        self.close_button.setToolTip("Close book")
        self.close_button.clicked.connect(self.close_requested)
        header_layout.addWidget(self.close_button)
        main_layout.addLayout(header_layout)

        # Pages
        pages_layout = QHBoxLayout()
        pages_layout.setSpacing(4)
        self.left_page = PageEditor(self)
        self.right_page = PageEditor(self)
        for editor in (self.left_page, self.right_page):
            editor.textChanged.connect(lambda e=editor: self._on_page_edited(e))
            pages_layout.addWidget(editor)
        main_layout.addLayout(pages_layout, 1)

        # Navigation
        nav_layout = QHBoxLayout()
        self.prev_button = QToolButton(self)
        self.prev_button.setText("◀")
        self.prev_button.clicked.connect(self.controller.navigator.prev)
        nav_layout.addWidget(self.prev_button)

        nav_layout.addStretch()
        self.page_label = QLabel("", self)
        self.page_label.setAlignment(Qt.AlignCenter)
        nav_layout.addWidget(self.page_label)
        nav_layout.addStretch()

        self.next_button = QToolButton(self)
        self.next_button.setText("▶")
        self.next_button.clicked.connect(self.controller.navigator.next)
        nav_layout.addWidget(self.next_button)
        main_layout.addLayout(nav_layout)

    def refresh(self):
        """Show the open spread and update navigation state."""
        navigator = self.controller.navigator
        left, right = self.controller.spread_pages()

        self._refreshing = True
        try:
            self.left_page.show_page(left)
            self.right_page.show_page(right)
        finally:
            self._refreshing = False

        self.left_page.set_faded(navigator.transitioning)
        self.right_page.set_faded(navigator.transitioning)
        self.prev_button.setEnabled(navigator.can_go_prev())
        self.next_button.setEnabled(navigator.can_go_next())
        self.page_label.setText(
            f"Pages {left.index + 1}-{right.index + 1} of {self.controller.total_pages}"
        )

    def _on_page_edited(self, editor: PageEditor):
        if self._refreshing:
            return
        self.controller.update_page(editor.page_index, editor.toPlainText())

    def _on_transition_started(self, _direction: int):
        self.left_page.set_faded(True)
        self.right_page.set_faded(True)
        self.prev_button.setEnabled(False)
        self.next_button.setEnabled(False)

    def _on_saving_changed(self, saving: bool):
        self.save_button.setText("Saving..." if saving else "Save")
        self.save_button.setEnabled(not saving)
