"""
CLI workflow orchestration for the Similar Image Finder.

Provides the CLIOrchestrator class that coordinates the CLI workflow from
argument parsing through the scan to the final summary and exit code.
"""

from __future__ import annotations

import logging
import time

from ..exceptions import ScanError
from ..models import ScanResult
from ..reporting import FindingReporter
from ..scanner import scan_directory
from ..utils.formatters import format_time_estimate
from .arg_parser import parse_arguments
from .reporting import print_scan_summary


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Configure logging for the CLI.

    Findings are plain message lines; verbose mode switches to DEBUG and adds
    timestamps and levels.

    Args:
        verbose: Enable verbose (DEBUG level) logging

    Returns:
        Configured logger instance
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )
    else:
        logging.basicConfig(level=logging.INFO, format='%(message)s')
    return logging.getLogger(__name__)


class CLIOrchestrator:
    """
    Orchestrates the CLI scanning workflow.

    Manages the lifecycle from argument parsing through the scan and the
    summary report.
    """

    def __init__(self, argv=None):
        """Initialize the orchestrator."""
        self.argv = argv
        self.logger = None
        self.args = None
        self.result = None

    def run(self) -> int:
        """
        Execute the complete CLI workflow.

        Returns:
            Exit code (0 for success, 1 for error)

        Workflow phases:
        1. Setup & argument parsing
        2. Scan (discovery, fingerprinting, matching)
        3. Summary
        """
        # Phase 1: Setup
        self._setup_phase()

        # Phase 2: Scan
        exit_code = self._scan_phase()
        if exit_code != 0:
            return exit_code

        # Phase 3: Summary
        self._report_phase()
        return 0

    def _setup_phase(self) -> None:
        """Phase 1: Parse arguments and setup logging."""
        self.args = parse_arguments(self.argv)
        self.logger = setup_logging(self.args.verbose)

    def _scan_phase(self) -> int:
        """
        Phase 2: Scan the directory, logging findings as they are detected.

        Returns:
            0 for success, 1 if the scan was aborted
        """
        args = self.args
        start_time = time.time()
        try:
            self.result = scan_directory(
                args.directory,
                threshold=args.threshold,
                workers=args.workers,
                queue_size=args.queue_size,
                reporter=FindingReporter(),
            )
        except (ScanError, ValueError) as e:
            self.logger.error(f"error: {e}")
            return 1

        elapsed = time.time() - start_time
        self.logger.debug(f"Scan completed in {format_time_estimate(elapsed)}")
        return 0

    def _report_phase(self) -> None:
        """Phase 3: Print the scan summary."""
        print_scan_summary(self.result or ScanResult(), self.logger)
