"""
Scanner package for the Similar Image Finder.

Provides directory discovery, image fingerprinting and the concurrent
pipeline that feeds fingerprints into the similarity index.

Public API:
- iter_image_files: Lazily discover image files in a directory tree
- find_image_files: Discover image files as a list
- fingerprint_file: Decode an image and compute its perceptual fingerprint
- compute_fingerprint: Fingerprint an already decoded image
- hamming_distance: Distance between two fingerprints
- run_pipeline: Fingerprint paths concurrently into a SimilarityIndex
- scan_directory: Scan a directory and return all findings
"""

from __future__ import annotations

# Import public functions from submodules
from .file_discovery import iter_image_files, find_image_files
from .fingerprint import (
    compute_fingerprint,
    decode_image,
    fingerprint_file,
    hamming_distance,
    resize_lanczos,
)
from .parallel import Channel, TaskGroup, run_pipeline, scan_directory


# Public API exports
__all__ = [
    # File discovery
    'iter_image_files',
    'find_image_files',
    # Fingerprinting
    'compute_fingerprint',
    'decode_image',
    'fingerprint_file',
    'hamming_distance',
    'resize_lanczos',
    # Pipeline
    'Channel',
    'TaskGroup',
    'run_pipeline',
    'scan_directory',
]
