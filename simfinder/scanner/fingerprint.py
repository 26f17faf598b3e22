"""
Fingerprinting module for the scanner package.

Decodes images with Pillow and computes a 64-bit perceptual hash (pHash)
with imagehash. Fingerprints are plain ints so they can be ordered and
compared cheaply by the similarity index.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from ..config import HASH_SIZE, HIGHFREQ_FACTOR
from ..exceptions import DecodeError, FingerprintError
from ..models import Record, hamming_distance
from .dependencies import Image, ImageOps, imagehash, np, _logger

# resize(image, width, height) -> resized image
Resizer = Callable[["Image.Image", int, int], "Image.Image"]


def resize_lanczos(img: Image.Image, width: int, height: int) -> Image.Image:
    """Resample img to width x height with the Lanczos filter."""
    return img.resize((width, height), Image.LANCZOS)


def hash_to_int(phash: imagehash.ImageHash) -> int:
    """
    Pack an ImageHash bit matrix into an int.

    The first bit of the matrix becomes the most significant bit, so the
    result prints the same as str(phash).
    """
    bits = np.asarray(phash.hash, dtype=bool).flatten()
    return int.from_bytes(np.packbits(bits).tobytes(), byteorder='big')


def compute_fingerprint(img: Image.Image, resize: Resizer = resize_lanczos) -> int:
    """
    Compute the perceptual fingerprint of a decoded image.

    Args:
        img: Decoded image
        resize: Resampling callback used to shrink the image to the DCT input size

    Returns:
        64-bit fingerprint as an int
    """
    side = HASH_SIZE * HIGHFREQ_FACTOR
    small = resize(img, side, side)
    if small.mode not in ('RGB', 'L'):
        small = small.convert('RGB')
    phash = imagehash.phash(small, hash_size=HASH_SIZE, highfreq_factor=HIGHFREQ_FACTOR)
    return hash_to_int(phash)


def decode_image(filepath: str | Path) -> Image.Image:
    """
    Open and fully decode an image, applying EXIF orientation.

    Raises:
        DecodeError: If the file cannot be opened or is not a valid image
    """
    try:
        with Image.open(filepath) as img:
            # Force load to detect truncated/corrupt images early
            img.load()
            oriented = ImageOps.exif_transpose(img)
            if oriented is img:
                oriented = img.copy()
            return oriented
    except Exception as e:
        raise DecodeError(f"{filepath}: cannot decode image: {e}", path=str(filepath)) from e


def fingerprint_file(filepath: str | Path, resize: Resizer = resize_lanczos) -> Record:
    """
    Decode an image file and fingerprint it.

    Args:
        filepath: Path to the image
        resize: Resampling callback passed to compute_fingerprint

    Returns:
        Record pairing the fingerprint with the path

    Raises:
        DecodeError: If the image cannot be decoded
        FingerprintError: If hashing the decoded image fails
    """
    filepath = str(filepath)
    img = decode_image(filepath)
    try:
        fingerprint = compute_fingerprint(img, resize)
    except Exception as e:
        raise FingerprintError(f"{filepath}: cannot compute phash: {e}", path=filepath) from e
    finally:
        img.close()

    _logger.debug(f"fingerprinted {filepath} -> {fingerprint:x}")
    return Record(fingerprint=fingerprint, identifier=filepath)


__all__ = [
    'resize_lanczos',
    'hash_to_int',
    'compute_fingerprint',
    'decode_image',
    'fingerprint_file',
    'hamming_distance',
]
