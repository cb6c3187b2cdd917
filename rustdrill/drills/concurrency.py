"""Drills on sharing data between threads."""

from __future__ import annotations

import threading
import time
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor


def offset_sums(
    numbers: Sequence[int],
    offsets: Iterable[int] = range(8),
    step: int = 5,
) -> dict[int, int]:
    """Sum every ``step``-th number from each offset, one thread per offset.

    All threads read the same sequence; nothing is copied.
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    offsets = list(offsets)
    if any(offset < 0 for offset in offsets):
        raise ValueError("offsets must not be negative")

    def _sum_from(offset: int) -> int:
        return sum(numbers[i] for i in range(offset, len(numbers), step))

    if not offsets:
        return {}
    with ThreadPoolExecutor(max_workers=len(offsets)) as pool:
        sums = list(pool.map(_sum_from, offsets))
    results = dict(zip(offsets, sums))
    for offset, total in results.items():
        print(f"Sum of offset {offset} is {total}")
    return results


class JobStatus:
    """A count of completed jobs that several threads can update safely."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._completed = 0

    def complete_one(self) -> int:
        """Record one more completed job; return the new count."""
        with self._lock:
            self._completed += 1
            return self._completed

    def completed(self) -> int:
        """The number of jobs completed so far."""
        with self._lock:
            return self._completed


def run_jobs(total: int = 10, interval: float = 0.25, poll: float = 0.5) -> JobStatus:
    """Complete ``total`` jobs in a worker thread while this thread waits.

    The worker sleeps ``interval`` seconds before each job; the waiting
    thread prints a line every ``poll`` seconds until all jobs are done.
    """
    if total < 0:
        raise ValueError(f"job count must not be negative, got {total}")
    if interval < 0 or poll < 0:
        raise ValueError("intervals must not be negative")
    status = JobStatus()

    def _work() -> None:
        for _ in range(total):
            time.sleep(interval)
            status.complete_one()

    worker = threading.Thread(target=_work, daemon=True)
    worker.start()
    while status.completed() < total:
        print("waiting... ")
        time.sleep(poll)
    worker.join()
    return status