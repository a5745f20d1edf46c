"""Domain models for verification results and related entities."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .verdict import BiasFlag, Verdict


class Source(BaseModel):
    """Represents a citation backing a verdict."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Title or name of the source")
    url: str = Field(..., description="URL of the source")
    credibility_score: int = Field(..., description="Credibility of the source (0-100)")
    relevance: Optional[str] = Field(None, description="How the source supports the verdict")


class Explanation(BaseModel):
    """Structured explanation of a verdict.

    Kept as data; string formatting happens at the presentation boundary.
    """

    model_config = ConfigDict(frozen=True)

    summary: str = Field(default="", description="Short explanation")
    detailed_points: List[str] = Field(default_factory=list, description="Reasons behind the verdict")
    bias_flag: BiasFlag = Field(default=BiasFlag.NO, description="Whether the content looks biased")
    bias_note: Optional[str] = Field(None, description="Bias annotation as the model wrote it")
    tips: List[str] = Field(default_factory=list, description="Practical advice for the reader")


class VerificationResult(BaseModel):
    """Represents the outcome of verifying a piece of text."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "VER-1718000000000-k3j9x0a2b",
                "input_kind": "text",
                "content": "The Earth is flat.",
                "verdict": "false",
                "confidence": 97,
                "summary": "The Earth is an oblate spheroid.",
                "model_id": "qwen-plus",
            }
        },
    )

    id: str = Field(..., description="Unique result identifier")
    input_kind: str = Field(default="text", description="Kind of submitted input")
    content: str = Field(..., description="The submitted text")
    source_url: Optional[str] = Field(None, description="Where the text was found")
    verdict: Verdict = Field(..., description="Normalized verdict")
    confidence: int = Field(..., ge=0, le=100, description="Confidence score (0-100)")
    explanation: Explanation = Field(..., description="Structured explanation")
    why_fake: Optional[str] = Field(None, description="Citation-backed debunk, only for false verdicts")
    sources: List[Source] = Field(..., min_length=1, description="Citations")
    summary: str = Field(..., description="One-line summary")
    created_at: datetime = Field(..., description="When the result was assembled")
    model_id: str = Field(..., description="Model that produced the assessment")
