"""
Core note and shelf logic for Grimoire Notes.
"""
from .pagination import Page, page_count, read_page, write_page
from .shelf import Book, OrderedCollection

__all__ = ['Page', 'page_count', 'read_page', 'write_page', 'Book', 'OrderedCollection']
