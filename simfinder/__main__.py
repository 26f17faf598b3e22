"""
Allow running the package with: python -m simfinder

Examples:
    python -m simfinder /path/to/photos
    python -m simfinder /path/to/photos --threshold 3 --workers 4
"""

import sys


def main():
    from .cli import main as cli_main
    sys.exit(cli_main())


if __name__ == '__main__':
    main()
