"""
File discovery module for the scanner package.

Provides a lazy walk over a directory tree yielding candidate image files.
Traversal errors are fatal: they abort the scan instead of being skipped.
"""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import Iterable, Iterator

from ..config import IMAGE_EXTENSIONS
from ..exceptions import TraversalError


def _is_candidate(path: str, extensions: frozenset) -> bool:
    """Return True if path is a regular file with a supported extension."""
    try:
        mode = os.lstat(path).st_mode
    except OSError as e:
        raise TraversalError(f"cannot stat {path}: {e}", path=path) from e

    # lstat does not follow symlinks, so links are skipped along with
    # directories, devices and sockets
    if not stat.S_ISREG(mode):
        return False
    return os.path.splitext(path)[1].lower() in extensions


def _raise_traversal_error(err: OSError) -> None:
    raise TraversalError(f"cannot read {err.filename}: {err.strerror or err}", path=err.filename) from err


def iter_image_files(
    root_path: str | Path,
    extensions: Iterable[str] = IMAGE_EXTENSIONS,
) -> Iterator[str]:
    """
    Lazily yield image files found under root_path.

    Args:
        root_path: Directory to walk recursively
        extensions: Lower-case extensions (with dot) to accept

    Yields:
        File paths as strings, directories and files in lexical order

    Raises:
        TraversalError: If the root does not exist or any directory cannot
            be read

    Notes:
        - Symlinks are neither followed nor yielded
        - Extension matching is case-insensitive
        - A root that is itself a matching regular file is yielded
    """
    root = os.fspath(root_path)
    extensions = frozenset(ext.lower() for ext in extensions)

    try:
        root_mode = os.lstat(root).st_mode
    except OSError as e:
        raise TraversalError(f"cannot read {root}: {e.strerror or e}", path=root) from e

    if not stat.S_ISDIR(root_mode):
        if _is_candidate(root, extensions):
            yield root
        return

    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_traversal_error):
        dirnames.sort()
        for name in sorted(filenames):
            path = os.path.join(dirpath, name)
            if _is_candidate(path, extensions):
                yield path


def find_image_files(root_path: str | Path) -> list[str]:
    """
    Find all image files in the given directory.

    Args:
        root_path: Directory path to search for images

    Returns:
        List of file paths as strings
    """
    return list(iter_image_files(root_path))


__all__ = ['iter_image_files', 'find_image_files']
