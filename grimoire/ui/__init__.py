"""
User interface components.
"""
from .main_window import MainWindow
from .note_editor import NoteEditorWidget
from .opening_view import OpeningView
from .shelf_widget import ShelfWidget

__all__ = ['MainWindow', 'NoteEditorWidget', 'OpeningView', 'ShelfWidget']
