"""Stamping of identity and creation time onto normalized records."""

import secrets
import string
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional

from ..models.claim import Claim
from ..models.debate import DebateAnalysis
from ..models.normalized import NormalizedClaim, NormalizedDebate, NormalizedVerification
from ..models.verification import VerificationResult

_SUFFIX_ALPHABET = string.ascii_lowercase + string.digits
_SUFFIX_LENGTH = 9


@dataclass(frozen=True)
class RequestContext:
    """What the caller submitted, plus the model that answered."""

    model_id: str
    content: str = ""
    source_url: Optional[str] = None
    round: int = 1


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ResultAssembler:
    """Builds immutable result records from normalized model output."""

    VERIFICATION_PREFIX = "VER"
    CLAIM_PREFIX = "CLM"
    DEBATE_PREFIX = "DBT"

    def __init__(self, clock: Callable[[], datetime] = _utc_now):
        """Initialize the assembler.

        Args:
            clock: Source of creation timestamps
        """
        self._clock = clock

    def make_id(self, prefix: str, created_at: datetime) -> str:
        """Build ``<prefix>-<epoch millis>-<random suffix>``."""
        millis = int(created_at.timestamp() * 1000)
        suffix = "".join(secrets.choice(_SUFFIX_ALPHABET) for _ in range(_SUFFIX_LENGTH))
        return f"{prefix}-{millis}-{suffix}"

    def assemble_verification(
        self, normalized: NormalizedVerification, context: RequestContext
    ) -> VerificationResult:
        """Assemble a verification result."""
        created_at = self._clock()
        return VerificationResult(
            id=self.make_id(self.VERIFICATION_PREFIX, created_at),
            input_kind="text",
            content=context.content,
            source_url=context.source_url,
            verdict=normalized.verdict,
            confidence=normalized.confidence,
            explanation=normalized.explanation,
            why_fake=normalized.why_fake,
            sources=normalized.sources,
            summary=normalized.summary,
            created_at=created_at,
            model_id=context.model_id,
        )

    def assemble_claim(self, normalized: NormalizedClaim, context: RequestContext) -> Claim:
        """Assemble a trivia claim."""
        created_at = self._clock()
        return Claim(
            id=self.make_id(self.CLAIM_PREFIX, created_at),
            round=context.round,
            statement=normalized.statement,
            answer=normalized.answer,
            explanation=normalized.explanation,
            sources=normalized.sources,
            created_at=created_at,
            model_id=context.model_id,
        )

    def assemble_debate(self, normalized: NormalizedDebate, context: RequestContext) -> DebateAnalysis:
        """Assemble a debate analysis."""
        created_at = self._clock()
        return DebateAnalysis(
            id=self.make_id(self.DEBATE_PREFIX, created_at),
            claim=normalized.claim,
            pros=normalized.pros,
            cons=normalized.cons,
            summary=normalized.summary,
            sources=normalized.sources,
            created_at=created_at,
            model_id=context.model_id,
        )

    def assemble(self, normalized, context: RequestContext):
        """Assemble whichever record matches the normalized input."""
        if isinstance(normalized, NormalizedVerification):
            return self.assemble_verification(normalized, context)
        if isinstance(normalized, NormalizedClaim):
            return self.assemble_claim(normalized, context)
        if isinstance(normalized, NormalizedDebate):
            return self.assemble_debate(normalized, context)
        raise TypeError(f"Cannot assemble {type(normalized).__name__}")
