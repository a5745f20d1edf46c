"""Normalized model output, before identity and timestamps are stamped."""

from dataclasses import dataclass, field
from typing import List, Optional

from .verdict import Verdict
from .verification import Explanation, Source


@dataclass(frozen=True)
class NormalizedVerification:
    """Verification verdict recovered from raw model text."""

    verdict: Verdict
    confidence: int
    explanation: Explanation
    sources: List[Source]
    summary: str
    why_fake: Optional[str] = None
    structured: bool = True

    def __post_init__(self):
        """Validate the record."""
        if not self.sources:
            raise ValueError("Normalized verification must carry at least one source")
        if (self.why_fake is not None) != (self.verdict is Verdict.FALSE):
            raise ValueError("why_fake must be set exactly when the verdict is FALSE")


@dataclass(frozen=True)
class NormalizedDebate:
    """Debate analysis recovered from raw model text."""

    claim: str
    summary: str
    pros: List[str] = field(default_factory=list)
    cons: List[str] = field(default_factory=list)
    sources: List[str] = field(default_factory=list)
    structured: bool = True


@dataclass(frozen=True)
class NormalizedClaim:
    """Trivia claim recovered from raw model text."""

    statement: str
    answer: str
    explanation: List[str] = field(default_factory=list)
    sources: List[str] = field(default_factory=list)
    structured: bool = True
