"""
Finding reporter for Similar Image Finder.

Renders each finding as a line on the ``simfinder.findings`` logger. Reporting
is fire-and-forget: a failure here never aborts the scan.
"""

from __future__ import annotations

import logging
from typing import Optional

from .models import Finding

_logger = logging.getLogger(__name__)


class FindingReporter:
    """
    Callable sink for findings produced by the similarity index.

    Usage:
        index = SimilarityIndex(threshold=5, reporter=FindingReporter())
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger('simfinder.findings')

    def __call__(self, finding: Finding) -> None:
        try:
            self.logger.info(finding.describe())
        except Exception as e:
            _logger.debug(f"Failed to report finding for {finding.identifier}: {e}")


__all__ = ['FindingReporter']
