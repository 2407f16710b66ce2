"""
Utils Package - Exports all utility functions
"""

from .patterns import (
    DEVANAGARI_PATTERN,
    TELUGU_PATTERN,
    INDIC_PATTERN,
    compile_keywords
)
from .formatters import Formatters
from .helpers import Helpers
from .rate_limiter import RateLimiter

__all__ = [
    "DEVANAGARI_PATTERN",
    "TELUGU_PATTERN",
    "INDIC_PATTERN",
    "compile_keywords",
    "Formatters",
    "Helpers",
    "RateLimiter"
]
