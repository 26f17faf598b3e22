"""
Utilities package for the Similar Image Finder.

Provides:
- formatters: Human-readable formatting for counts and elapsed time
"""

from __future__ import annotations

from . import formatters

from .formatters import format_number, pluralize, format_time_estimate

__all__ = [
    # Submodules
    'formatters',
    # Formatters
    'format_number',
    'pluralize',
    'format_time_estimate',
]
