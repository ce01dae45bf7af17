"""
Utility helpers: logging, language negotiation, locking
"""

from .app_logger import configure_logging, get_logger
from .language import get_accept_language, get_default_language, normalize_language
from .rwlock import ReadWriteLock

__all__ = [
    "configure_logging",
    "get_logger",
    "get_accept_language",
    "get_default_language",
    "normalize_language",
    "ReadWriteLock",
]
