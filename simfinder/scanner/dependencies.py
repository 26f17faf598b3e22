"""
Dependency initialization for the scanner package.

Handles PIL, imagehash and numpy imports with proper error handling and
configuration.
"""

from __future__ import annotations

import warnings
import logging

from ..config import MAX_IMAGE_PIXELS

# Module-level logger
_logger = logging.getLogger(__name__)

# Check for required dependencies
try:
    from PIL import Image, ImageOps
    import imagehash
    import numpy as np
except ImportError:
    raise ImportError(
        "Required packages not found!\n"
        "Install with: pip install Pillow imagehash numpy"
    )

# Increase PIL's decompression bomb limit for large images
Image.MAX_IMAGE_PIXELS = MAX_IMAGE_PIXELS

# We've increased the limit appropriately, don't warn below it
warnings.filterwarnings("ignore", category=Image.DecompressionBombWarning)


__all__ = [
    'Image',
    'ImageOps',
    'imagehash',
    'np',
    '_logger',
]
