"""Verdict vocabulary shared by every analysis kind."""

from enum import Enum


class Verdict(str, Enum):
    """Canonical classification of a claim's truthfulness."""

    VERIFIED = "verified"
    FALSE = "false"
    MISLEADING = "misleading"
    NEEDS_CONTEXT = "needs_context"
    UNVERIFIED = "unverified"

    @property
    def legacy_label(self) -> str:
        """Status label used by the web client."""
        return _LEGACY_LABELS[self]


_LEGACY_LABELS = {
    Verdict.VERIFIED: "VERIFIED",
    Verdict.FALSE: "FAKE",
    Verdict.MISLEADING: "MISLEADING",
    Verdict.NEEDS_CONTEXT: "NEEDS_CONTEXT",
    Verdict.UNVERIFIED: "UNVERIFIED",
}


class BiasFlag(str, Enum):
    """Whether the analysed content shows signs of bias."""

    YES = "YES"
    NO = "NO"
    UNSURE = "UNSURE"


class AnalysisKind(str, Enum):
    """The three model-backed analyses the service offers."""

    VERIFICATION = "verification"
    DEBATE = "debate"
    CLAIM = "claim"
