"""
Scan summary for the CLI interface.

Individual findings are logged as they are detected by the index; this
module only renders the closing summary line.
"""

from __future__ import annotations

import logging

from ..models import ScanResult
from ..utils.formatters import format_number, pluralize


def format_summary(result: ScanResult) -> str:
    """
    Format a one-line summary of a completed scan.

    Examples:
        >>> format_summary(ScanResult(files_scanned=3))
        'Scanned 3 images: 0 possible duplicates, 0 close matches'
    """
    return (
        f"Scanned {format_number(result.files_scanned)} "
        f"{pluralize(result.files_scanned, 'image')}: "
        f"{format_number(result.exact_count)} "
        f"{pluralize(result.exact_count, 'possible duplicate')}, "
        f"{format_number(result.close_count)} "
        f"{pluralize(result.close_count, 'close match', 'close matches')}"
    )


def print_scan_summary(result: ScanResult, logger: logging.Logger) -> None:
    """Log the scan summary at INFO level."""
    logger.info(format_summary(result))


__all__ = ['format_summary', 'print_scan_summary']
