"""
Grimoire Notes: a bookshelf of paged notebooks.
"""
__version__ = "0.1.0"
