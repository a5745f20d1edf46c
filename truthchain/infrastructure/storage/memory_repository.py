"""In-process, append-only log of verification results."""

import threading
from collections import deque
from typing import Deque, List

from ...domain.models.verification import VerificationResult
from ...domain.ports.result_repository import ResultRepository


class InMemoryResultRepository(ResultRepository):
    """Bounded in-memory log; the oldest results are evicted first.

    ``count`` keeps counting evicted results.
    """

    def __init__(self, capacity: int = 500):
        """Initialize the repository.

        Args:
            capacity: Maximum number of results kept
        """
        if capacity <= 0:
            raise ValueError("Capacity must be positive")
        self._results: Deque[VerificationResult] = deque(maxlen=capacity)
        self._total = 0
        self._lock = threading.Lock()

    def append(self, result: VerificationResult) -> None:
        """Append a result to the log."""
        with self._lock:
            self._results.append(result)
            self._total += 1

    def recent(self, n: int) -> List[VerificationResult]:
        """Return up to ``n`` results, newest first."""
        if n <= 0:
            return []
        with self._lock:
            snapshot = list(self._results)
        return list(reversed(snapshot[-n:]))

    def count(self) -> int:
        """Total number of results appended so far."""
        with self._lock:
            return self._total

    def __len__(self) -> int:
        with self._lock:
            return len(self._results)
