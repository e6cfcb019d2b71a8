from typing import List

from PyQt5.QtCore import QPointF, Qt
from PyQt5.QtGui import QColor, QPainter
from PyQt5.QtWidgets import QWidget

from grimoire.core.shelf import Book, Particle, scatter_particles

PARTICLE_COUNT = 30


class OpeningView(QWidget):
    """Cover of the book being opened, with sparkles in its accent color."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.book = None
        self.particles: List[Particle] = []

    def show_book(self, book: Book):
        self.book = book
        # Seeded by the book so every opening of it looks the same
        self.particles = scatter_particles(PARTICLE_COUNT, seed=book.id)
        self.update()

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        painter.fillRect(self.rect(), QColor("#1e1b2e"))
        if self.book is None:
            return

        painter.setPen(Qt.NoPen)
        painter.setBrush(QColor(self.book.accent_color))
        for particle in self.particles:
            center = QPointF(self.width() * particle.left / 100,
                             self.height() * particle.top / 100)
            painter.drawEllipse(center, particle.size, particle.size)

        painter.setPen(QColor(self.book.accent_color))
        painter.drawText(self.rect(), Qt.AlignCenter, f"Opening {self.book.title}...")
