"""Protocol for the append-only verification log."""

from typing import List, Protocol

from ..models.verification import VerificationResult


class ResultRepository(Protocol):
    """Stores verification results owned by the caller."""

    def append(self, result: VerificationResult) -> None:
        """Append a result to the log."""
        ...

    def recent(self, n: int) -> List[VerificationResult]:
        """Return up to ``n`` results, newest first."""
        ...

    def count(self) -> int:
        """Total number of results appended so far."""
        ...
