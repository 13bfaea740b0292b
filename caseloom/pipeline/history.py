"""In-memory, append-only history of pipeline results."""

import threading
from typing import Iterator

from .models import Result


class HistoryStore:
    """Ordered record of every completed run.

    Appends are serialized with a lock so concurrent runs never lose an
    entry. Entries are never updated or removed, and nothing is persisted.
    """

    def __init__(self):
        self._results: list[Result] = []
        self._lock = threading.Lock()

    def append(self, result: Result) -> None:
        """Add a completed run to the end of the history."""
        with self._lock:
            self._results.append(result)

    def snapshot(self) -> tuple[Result, ...]:
        """Read-only view of all results appended so far."""
        with self._lock:
            return tuple(self._results)

    def total_test_cases(self) -> int:
        """Number of test cases generated across every recorded run."""
        with self._lock:
            return sum(len(result.test_cases) for result in self._results)

    def __len__(self) -> int:
        with self._lock:
            return len(self._results)

    def __iter__(self) -> Iterator[Result]:
        return iter(self.snapshot())
