"""
Configuration constants for Similar Image Finder.

This module contains all configurable settings including:
- Supported image extensions
- Perceptual hash parameters and the similarity threshold
- Worker pool and hand-off channel sizing
"""

import os

# Supported image extensions (compared case-insensitively)
IMAGE_EXTENSIONS = frozenset({'.jpg', '.jpeg'})

# Perceptual hash distance threshold.
# Distances at or below this value are reported as likely duplicates,
# distances above it are treated as different images (0-64 range).
DEFAULT_THRESHOLD = 5

# pHash parameters: hash_size=8 produces a 64-bit fingerprint.
# The DCT runs on a (HASH_SIZE * HIGHFREQ_FACTOR) square image.
HASH_SIZE = 8
HIGHFREQ_FACTOR = 4
FINGERPRINT_BITS = HASH_SIZE * HASH_SIZE

# Default number of fingerprint workers: one per available CPU
DEFAULT_WORKERS = os.cpu_count() or 1

# Capacity of the discoverer -> worker hand-off channel
DEFAULT_QUEUE_SIZE = 64

# How often (seconds) blocked channel operations re-check for cancellation
POLL_INTERVAL = 0.05

# Decompression bomb limit for Pillow.
# Default is ~89MP, we raise it to 500MP for large scans and panoramas.
MAX_IMAGE_PIXELS = 500_000_000
