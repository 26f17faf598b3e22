"""
Parallel processing module for the scanner package.

Runs the fingerprint pipeline: one discovery task feeds a bounded channel,
a pool of worker threads drains it, fingerprints each file and inserts the
result into a shared SimilarityIndex. The first failure in any task cancels
all others and is the error the caller sees.
"""

from __future__ import annotations

import logging
import queue
import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Callable, Iterable, Optional

from ..config import DEFAULT_QUEUE_SIZE, DEFAULT_THRESHOLD, DEFAULT_WORKERS, POLL_INTERVAL
from ..index import SimilarityIndex
from ..models import Finding, Record, ScanResult
from .file_discovery import iter_image_files
from .fingerprint import fingerprint_file

logger = logging.getLogger(__name__)


class Channel:
    """
    Bounded hand-off queue between the discoverer and the workers.

    put() and get() block while the queue is full/empty but wake up every
    POLL_INTERVAL seconds to check the shared cancellation event.
    """

    def __init__(self, maxsize: int, cancelled: threading.Event):
        self._queue: queue.Queue = queue.Queue(maxsize=maxsize)
        self._closed = threading.Event()
        self.cancelled = cancelled

    def put(self, item: Any) -> bool:
        """Send item; returns False if the pipeline was cancelled first."""
        while not self.cancelled.is_set():
            try:
                self._queue.put(item, timeout=POLL_INTERVAL)
                return True
            except queue.Full:
                continue
        return False

    def get(self) -> Optional[Any]:
        """Receive an item; returns None once closed and drained, or cancelled."""
        while not self.cancelled.is_set():
            try:
                return self._queue.get(timeout=POLL_INTERVAL)
            except queue.Empty:
                if self._closed.is_set() and self._queue.empty():
                    return None
        return None

    def close(self) -> None:
        """Signal that no more items will be sent."""
        self._closed.set()


class TaskGroup:
    """
    Runs tasks on a thread pool sharing one cancellation event.

    The first task to raise sets the event; its exception is re-raised by
    wait(). Exceptions raised after that are logged and dropped.
    """

    def __init__(self, max_workers: int):
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix='simfinder')
        self.cancelled = threading.Event()
        self._error: Optional[BaseException] = None
        self._lock = threading.Lock()

    def go(self, fn: Callable[..., None], *args: Any) -> None:
        self._executor.submit(self._run, fn, *args)

    def _run(self, fn: Callable[..., None], *args: Any) -> None:
        try:
            fn(*args)
        except Exception as e:
            with self._lock:
                if self._error is None:
                    self._error = e
                    self.cancelled.set()
                    return
            logger.debug(f"Suppressed error after cancellation: {e}")

    def wait(self) -> None:
        """Join all tasks and raise the first error, if any."""
        self._executor.shutdown(wait=True)
        if self._error is not None:
            raise self._error


def _discover(paths: Iterable[str], channel: Channel) -> None:
    try:
        for path in paths:
            if not channel.put(path):
                logger.debug("Discovery cancelled")
                return
    finally:
        channel.close()


def _work(
    channel: Channel,
    index: SimilarityIndex,
    fingerprinter: Callable[[str], Record],
) -> None:
    while True:
        path = channel.get()
        if path is None:
            return
        record = fingerprinter(path)
        # checked under the index lock so nothing is reported after a failure
        index.insert(record, cancelled=channel.cancelled)


def run_pipeline(
    paths: Iterable[str],
    index: SimilarityIndex,
    workers: int = DEFAULT_WORKERS,
    queue_size: int = DEFAULT_QUEUE_SIZE,
    fingerprinter: Callable[[str], Record] = fingerprint_file,
) -> int:
    """
    Fingerprint paths concurrently and insert the records into index.

    Args:
        paths: Iterable of file paths, consumed lazily by a discovery task
        index: Similarity index receiving every record
        workers: Number of fingerprint worker threads
        queue_size: Capacity of the discoverer -> worker channel
        fingerprinter: Function turning a path into a Record

    Returns:
        Number of records accepted by the index, exact duplicates included

    Raises:
        ScanError: The first error raised by discovery or any worker
    """
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")
    if queue_size < 1:
        raise ValueError(f"queue_size must be at least 1, got {queue_size}")

    group = TaskGroup(max_workers=workers + 1)
    channel = Channel(queue_size, group.cancelled)

    start = index.inserted
    group.go(_discover, paths, channel)
    for _ in range(workers):
        group.go(_work, channel, index, fingerprinter)

    group.wait()
    return index.inserted - start


def scan_directory(
    root_path: str | Path,
    threshold: int = DEFAULT_THRESHOLD,
    workers: int = DEFAULT_WORKERS,
    queue_size: int = DEFAULT_QUEUE_SIZE,
    reporter: Optional[Callable[[Finding], None]] = None,
    fingerprinter: Callable[[str], Record] = fingerprint_file,
) -> ScanResult:
    """
    Scan a directory tree and report likely duplicate images.

    Args:
        root_path: Directory to scan recursively
        threshold: Maximum phash distance reported as a close match
        workers: Number of fingerprint worker threads
        queue_size: Capacity of the discoverer -> worker channel
        reporter: Called with each finding as it is detected
        fingerprinter: Function turning a path into a Record

    Returns:
        ScanResult with the number of images scanned and all findings

    Raises:
        ScanError: On the first traversal, decode or fingerprint error
    """
    index = SimilarityIndex(threshold=threshold, reporter=reporter)
    logger.debug(f"Scanning {root_path} with {workers} workers (threshold={threshold})")

    scanned = run_pipeline(
        iter_image_files(root_path),
        index,
        workers=workers,
        queue_size=queue_size,
        fingerprinter=fingerprinter,
    )
    return ScanResult(files_scanned=scanned, findings=index.findings)


__all__ = ['Channel', 'TaskGroup', 'run_pipeline', 'scan_directory']
