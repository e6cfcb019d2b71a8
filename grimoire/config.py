"""
Grimoire Notes - Configuration
Layout constants, timings and logging settings
"""

import os

# =============================================================================
# VERSION
# =============================================================================
PROJECT_NAME = "Grimoire Notes"

# =============================================================================
# PAGINATION
# =============================================================================
# Lines of note text that fit on a single page of an open book.
LINES_PER_PAGE = 20

# =============================================================================
# TIMINGS (milliseconds)
# =============================================================================
TRANSITION_DELAY_MS = 300       # Page-turn between two spreads
SAVE_INDICATOR_MS = 500         # How long the "saving" state stays visible
OPENING_ANIMATION_MS = 2500     # Cover opening before the editor appears

# =============================================================================
# SHELF LAYOUT
# =============================================================================
BOOKS_PER_SHELF = 6
MIN_SHELVES = 3

# =============================================================================
# LOGGING
# =============================================================================
LOG_LEVEL = os.getenv("GRIMOIRE_LOG_LEVEL", "INFO")
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
