import unittest

from PyQt5.QtCore import QEvent, QPoint, QPointF, Qt
from PyQt5.QtGui import QMouseEvent
from PyQt5.QtTest import QTest
from PyQt5.QtWidgets import QApplication

from grimoire.controllers import NoteEditorController, ReorderController
from grimoire.core.pagination import read_page
from grimoire.core.shelf import Book, scatter_particles
from grimoire.ui import NoteEditorWidget, OpeningView, ShelfWidget
from qt_support import get_app

_app = None


def setUpModule():
    global _app
    _app = get_app()


def numbered(count: int, prefix: str = "line") -> str:
    return "\n".join(f"{prefix} {n}" for n in range(count))


def send_mouse(widget, event_type, global_pos: QPoint, button, buttons) -> None:
    local = widget.mapFromGlobal(global_pos)
    event = QMouseEvent(event_type, QPointF(local), QPointF(global_pos),
                        button, buttons, Qt.NoModifier)
    QApplication.sendEvent(widget, event)


class TestShelfDragging(unittest.TestCase):
    def setUp(self) -> None:
        self.controller = ReorderController(["a", "b", "c", "d"])
        self.shelf = ShelfWidget(self.controller)
        self.shelf.set_books([
            Book(book_id, f"Book {book_id}", "#8B4513", "#D4AF37") for book_id in "abcd"
        ])
        self.selected = []
        self.shelf.book_selected.connect(self.selected.append)
        self.shelf.resize(900, 1200)
        self.shelf.show()
        self.shelf.layout().activate()
        QTest.qWait(10)

    def tearDown(self) -> None:
        self.shelf.close()
        self.shelf.deleteLater()

    def drag(self, source_id: str, target_id: str, fraction: float) -> None:
        """Press on one spine and move the pointer across another."""
        source = self.shelf.spines[source_id]
        target = self.shelf.spines[target_id]
        start = source.mapToGlobal(source.rect().center())
        end = target.mapToGlobal(QPoint(int(target.width() * fraction), target.height() // 2))

        send_mouse(source, QEvent.MouseButtonPress, start, Qt.LeftButton, Qt.LeftButton)
        send_mouse(source, QEvent.MouseMove, end, Qt.NoButton, Qt.LeftButton)

    def release(self, source_id: str) -> None:
        source = self.shelf.spines[source_id]
        end = source.mapToGlobal(source.rect().center())
        send_mouse(source, QEvent.MouseButtonRelease, end, Qt.LeftButton, Qt.NoButton)

    def test_forward_drag_past_midpoint_reorders(self) -> None:
        self.drag("a", "c", 0.75)

        self.assertTrue(self.controller.is_dragging)
        self.assertTrue(self.shelf.spines["a"].property("dragging"))
        self.assertEqual(self.controller.ids(), ["b", "c", "a", "d"])
        self.assertEqual(self.controller.session.origin_index, 2)

        self.release("a")

        self.assertFalse(self.controller.is_dragging)
        self.assertFalse(self.shelf.spines["a"].property("dragging"))
        self.assertEqual(self.controller.ids(), ["b", "c", "a", "d"])
        self.assertEqual(self.selected, [])

    def test_forward_drag_before_midpoint_keeps_order(self) -> None:
        self.drag("a", "c", 0.25)
        self.release("a")

        self.assertEqual(self.controller.ids(), ["a", "b", "c", "d"])
        self.assertEqual(self.selected, [])

    def test_click_without_drag_selects_book(self) -> None:
        spine = self.shelf.spines["b"]
        center = spine.mapToGlobal(spine.rect().center())
        send_mouse(spine, QEvent.MouseButtonPress, center, Qt.LeftButton, Qt.LeftButton)
        send_mouse(spine, QEvent.MouseButtonRelease, center, Qt.LeftButton, Qt.NoButton)

        self.assertFalse(self.controller.is_dragging)
        self.assertEqual([book.id for book in self.selected], ["b"])


class TestNoteEditorWidget(unittest.TestCase):
    def setUp(self) -> None:
        self.notes = numbered(45)
        self.controller = NoteEditorController(
            Book("b1", "Potions & Chemistry", "#8B4513", "#D4AF37", notes=self.notes),
            lines_per_page=20, transition_delay_ms=20
        )
        self.widget = NoteEditorWidget(self.controller, "Potions & Chemistry")

    def tearDown(self) -> None:
        self.controller.close()
        self.widget.deleteLater()

    def test_initial_spread(self) -> None:
        self.assertEqual(self.widget.left_page.toPlainText(), read_page(self.notes, 0, 20))
        self.assertEqual(self.widget.right_page.toPlainText(), read_page(self.notes, 1, 20))
        self.assertFalse(self.widget.prev_button.isEnabled())
        self.assertTrue(self.widget.next_button.isEnabled())

    def test_pages_are_suppressed_while_turning(self) -> None:
        self.controller.navigator.next()

        self.assertTrue(self.controller.navigator.transitioning)
        self.assertTrue(self.widget.left_page.isReadOnly())
        self.assertTrue(self.widget.right_page.isReadOnly())
        self.assertFalse(self.widget.next_button.isEnabled())

        self.controller.navigator.finish_transition()

        self.assertFalse(self.widget.left_page.isReadOnly())
        self.assertEqual(self.widget.left_page.page_index, 2)
        self.assertEqual(self.widget.left_page.toPlainText(), read_page(self.notes, 2, 20))
        self.assertTrue(self.widget.prev_button.isEnabled())

    def test_load_redraws_pages(self) -> None:
        self.controller.load("fresh")

        self.assertEqual(self.widget.left_page.toPlainText(), "fresh")
        self.assertEqual(self.widget.right_page.toPlainText(), "")
        self.assertFalse(self.widget.next_button.isEnabled())

    def test_overflowing_edit_reflows_into_next_page(self) -> None:
        self.widget.left_page.setPlainText(numbered(25, "new"))

        self.assertEqual(self.controller.total_pages, 3)
        self.assertEqual(self.widget.left_page.toPlainText(), numbered(20, "new"))
        self.assertEqual(self.widget.right_page.toPlainText().split("\n")[0], "new 20")


class TestOpeningView(unittest.TestCase):
    def test_particles_follow_the_book(self) -> None:
        view = OpeningView()
        view.resize(400, 300)
        view.show_book(Book("b7", "Herbology", "#2E8B57", "#98FB98"))

        self.assertEqual(view.particles, scatter_particles(30, seed="b7"))
        self.assertFalse(view.grab().isNull())
        view.deleteLater()


if __name__ == "__main__":
    unittest.main(verbosity=2)
