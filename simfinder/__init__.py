"""
Similar Image Finder
====================
Scans a directory tree for JPEG images and reports likely duplicates.

Features:
- Perceptual hashing (64-bit pHash) of every image
- Concurrent fingerprinting with a bounded worker pool
- Sorted similarity index comparing each image to its nearest fingerprints
- Fail-fast: the first unreadable file or directory aborts the scan
- CLI for automation
"""

__version__ = "1.0.0"

from .models import Record, Finding, FindingKind, ScanResult, format_fingerprint, hamming_distance
from .config import IMAGE_EXTENSIONS, DEFAULT_THRESHOLD
from .exceptions import ScanError, TraversalError, DecodeError, FingerprintError
from .index import SimilarityIndex
from .reporting import FindingReporter
from .scanner import (
    iter_image_files,
    find_image_files,
    fingerprint_file,
    compute_fingerprint,
    run_pipeline,
    scan_directory,
)

__all__ = [
    "Record",
    "Finding",
    "FindingKind",
    "ScanResult",
    "format_fingerprint",
    "hamming_distance",
    "IMAGE_EXTENSIONS",
    "DEFAULT_THRESHOLD",
    "ScanError",
    "TraversalError",
    "DecodeError",
    "FingerprintError",
    "SimilarityIndex",
    "FindingReporter",
    "iter_image_files",
    "find_image_files",
    "fingerprint_file",
    "compute_fingerprint",
    "run_pipeline",
    "scan_directory",
]
