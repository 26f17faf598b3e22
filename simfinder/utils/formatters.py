"""
Formatting utilities for the Similar Image Finder.

Provides human-readable formatting for counts and elapsed time.
"""

from __future__ import annotations

from typing import Optional


def format_number(n: int) -> str:
    """
    Format large numbers with commas for readability.

    Examples:
        >>> format_number(1000)
        '1,000'
        >>> format_number(1234567)
        '1,234,567'
    """
    return f"{n:,}"


def pluralize(count: int, singular: str, plural: Optional[str] = None) -> str:
    """
    Pick the singular or plural form of a noun for count.

    Examples:
        >>> pluralize(1, 'image')
        'image'
        >>> pluralize(2, 'close match', 'close matches')
        'close matches'
    """
    if count == 1:
        return singular
    return plural if plural is not None else singular + 's'


def format_time_estimate(seconds: float) -> str:
    """
    Format seconds into a human-readable duration.

    Examples:
        >>> format_time_estimate(45)
        '45s'
        >>> format_time_estimate(150)
        '2m 30s'
        >>> format_time_estimate(3665)
        '1h 1m'
    """
    if seconds < 60:
        return f"{int(seconds)}s"
    elif seconds < 3600:
        return f"{int(seconds / 60)}m {int(seconds % 60)}s"
    else:
        hours = int(seconds / 3600)
        minutes = int((seconds % 3600) / 60)
        return f"{hours}h {minutes}m"


__all__ = ['format_number', 'pluralize', 'format_time_estimate']
