"""
Argument parsing for the CLI interface.

Provides functions to create and configure the argument parser for the
similar image finder command-line interface.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from ..user_config import get_user_config


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser for the CLI.

    Defaults for threshold, workers and queue size come from the user
    configuration (environment variables, then ~/.simfinder/config.json).

    Returns:
        Configured ArgumentParser instance
    """
    config = get_user_config()
    threshold = config.threshold
    workers = config.workers
    queue_size = config.queue_size

    parser = argparse.ArgumentParser(
        prog='simfinder',
        description='Scan a directory for JPEG images and report likely duplicates',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s /path/to/photos
      Report exact and close perceptual matches

  %(prog)s /path/to/photos --threshold 0
      Only report images with identical fingerprints

  %(prog)s /path/to/photos --workers 2 -v
      Use two worker threads and show per-file progress
        """
    )

    parser.add_argument(
        'directory',
        type=Path,
        help='Directory to scan for similar images'
    )

    parser.add_argument(
        '-t', '--threshold',
        type=_non_negative_int,
        default=threshold,
        help=f'Perceptual hash distance threshold (0-64, lower=stricter). Default: {threshold}'
    )

    parser.add_argument(
        '-w', '--workers',
        type=_positive_int,
        default=workers,
        help=f'Number of parallel workers. Default: {workers}'
    )

    parser.add_argument(
        '-q', '--queue-size',
        type=_positive_int,
        default=queue_size,
        help=f'Capacity of the file hand-off queue. Default: {queue_size}'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Verbose output'
    )

    return parser


def parse_arguments(argv=None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        argv: List of argument strings (default: sys.argv)

    Returns:
        Parsed arguments as Namespace object

    Examples:
        >>> args = parse_arguments(['/path/to/photos', '--threshold', '3'])
        >>> args.directory
        PosixPath('/path/to/photos')
        >>> args.threshold
        3
    """
    parser = create_parser()
    return parser.parse_args(argv)


__all__ = [
    'create_parser',
    'parse_arguments',
]
