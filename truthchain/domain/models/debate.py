"""Domain model for pro/con debate analyses."""

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class DebateAnalysis(BaseModel):
    """Balanced arguments for and against the main claim of a text."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique analysis identifier")
    claim: str = Field(..., description="Main claim extracted from the content")
    pros: List[str] = Field(default_factory=list, description="Arguments supporting the claim")
    cons: List[str] = Field(default_factory=list, description="Arguments against the claim")
    summary: str = Field(..., description="Neutral summary")
    sources: List[str] = Field(default_factory=list, description="Supporting source URLs")
    created_at: datetime = Field(..., description="When the analysis was assembled")
    model_id: str = Field(..., description="Model that produced the analysis")
