"""
Logging setup for the application.
"""
import logging
import sys
from typing import Optional

from grimoire import config


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Initialize the application logger.
    
    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR).
            Defaults to config.LOG_LEVEL.
        
    Returns:
        Configured "grimoire" logger
    """
    logger = logging.getLogger("grimoire")
    logger.setLevel(getattr(logging, (level or config.LOG_LEVEL).upper(), logging.INFO))
    logger.handlers.clear()
    
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(config.LOG_FORMAT, datefmt=config.LOG_DATE_FORMAT))
    logger.addHandler(handler)
    
    return logger
