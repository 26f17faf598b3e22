"""
Exception hierarchy for Similar Image Finder.

Every fatal scan failure derives from ScanError so the CLI can catch a single
type and turn it into an error message and a non-zero exit code.
"""

from __future__ import annotations

from typing import Optional


class ScanError(Exception):
    """Base class for all errors that abort a scan."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class TraversalError(ScanError):
    """Walking the directory tree failed (missing root, permissions, I/O)."""


class DecodeError(ScanError):
    """A file with an image extension could not be opened or decoded."""


class FingerprintError(ScanError):
    """The perceptual hash could not be computed for a decoded image."""


__all__ = [
    'ScanError',
    'TraversalError',
    'DecodeError',
    'FingerprintError',
]
