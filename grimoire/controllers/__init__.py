"""
Application controllers for managing interactions between UI and core logic.
"""
from .spread_navigator import SpreadNavigator
from .reorder_controller import ReorderController
from .note_editor_controller import NoteEditorController
from .opening_controller import BookOpeningController

__all__ = [
    'SpreadNavigator',
    'ReorderController',
    'NoteEditorController',
    'BookOpeningController'
]
