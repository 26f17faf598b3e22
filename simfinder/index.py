"""
Sorted similarity index for fast perceptual hash matching.

Records are kept ordered by fingerprint value. Each insertion is compared
only against its immediate neighbours in that order, never against the
whole collection.

Performance per insertion:
- Brute force: O(n) distance computations
- Sorted index: O(log n) lookup + at most 2 distance computations

Hamming distance is not monotonic in the numeric value of a fingerprint, so
two close fingerprints that are not adjacent in sorted order are not
reported. The index is a fast heuristic, not an exhaustive search.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Iterator, Optional

from sortedcontainers import SortedKeyList

from .config import DEFAULT_THRESHOLD
from .models import Finding, FindingKind, Record, hamming_distance
from .reporting import FindingReporter

_logger = logging.getLogger(__name__)


class SimilarityIndex:
    """
    Thread-safe ordered collection of fingerprint records.

    Every call to insert() runs search, comparison and insertion under one
    lock, so concurrent workers see a consistent ordering.

    Usage:
        index = SimilarityIndex(threshold=5)

        for record in records:
            for finding in index.insert(record):
                print(finding.describe())
    """

    def __init__(
        self,
        threshold: int = DEFAULT_THRESHOLD,
        reporter: Optional[Callable[[Finding], None]] = None,
        distance: Callable[[int, int], int] = hamming_distance,
    ):
        """
        Initialize an empty index.

        Args:
            threshold: Maximum distance reported as a close match.
            reporter: Called with every finding. Defaults to a FindingReporter
                      that logs each finding.
            distance: Distance function between two fingerprints.
        """
        if threshold < 0:
            raise ValueError(f"threshold must be non-negative, got {threshold}")

        self.threshold = threshold
        self.reporter = reporter if reporter is not None else FindingReporter()
        self.distance = distance

        self._records = SortedKeyList(key=lambda r: r.fingerprint)
        self._findings: list[Finding] = []
        self._inserted = 0
        self._lock = threading.Lock()

    def insert(self, record: Record, cancelled: Optional[threading.Event] = None) -> list[Finding]:
        """
        Insert a record, reporting duplicates among its sorted neighbours.

        An exact duplicate is reported against the first record with the same
        fingerprint and is not stored, so later copies keep matching against
        that first record.

        Args:
            record: Record to insert
            cancelled: If given and set by the time the lock is held, the
                       record is dropped without comparison or reporting

        Returns:
            Findings produced by this insertion (possibly empty)
        """
        with self._lock:
            if cancelled is not None and cancelled.is_set():
                return []

            self._inserted += 1
            records = self._records
            found: list[Finding] = []

            i = records.bisect_key_left(record.fingerprint)

            if i < len(records) and records[i].fingerprint == record.fingerprint:
                found.append(Finding(
                    kind=FindingKind.EXACT,
                    identifier=record.identifier,
                    other=records[i].identifier,
                    fingerprint=record.fingerprint,
                ))
                self._emit(found)
                return found

            # Right neighbour is still at [i] because record is not inserted yet
            if i < len(records):
                self._compare(record, records[i], found)
            if i > 0:
                self._compare(record, records[i - 1], found)

            records.add(record)
            self._emit(found)
            return found

    def _compare(self, record: Record, neighbour: Record, found: list[Finding]) -> None:
        dist = self.distance(record.fingerprint, neighbour.fingerprint)
        if dist <= self.threshold:
            found.append(Finding(
                kind=FindingKind.CLOSE,
                identifier=record.identifier,
                other=neighbour.identifier,
                fingerprint=record.fingerprint,
                distance=dist,
            ))

    def _emit(self, found: list[Finding]) -> None:
        for finding in found:
            self._findings.append(finding)
            try:
                self.reporter(finding)
            except Exception as e:
                _logger.debug(f"Reporter failed for {finding.identifier}: {e}")

    @property
    def findings(self) -> list[Finding]:
        """All findings reported so far, in report order."""
        with self._lock:
            return list(self._findings)

    @property
    def inserted(self) -> int:
        """Number of records accepted by insert(), exact duplicates included."""
        with self._lock:
            return self._inserted

    def fingerprints(self) -> list[int]:
        """Stored fingerprints in ascending order."""
        with self._lock:
            return [r.fingerprint for r in self._records]

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        with self._lock:
            return iter(list(self._records))


__all__ = ['SimilarityIndex']
