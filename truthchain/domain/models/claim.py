"""Domain model for trivia claims used by the true-or-false game."""

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Claim(BaseModel):
    """A statement the player has to judge as TRUE or FALSE."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "CLM-1718000000000-a8c1e02f4",
                "round": 1,
                "statement": "The Philippines has more than 7,000 islands.",
                "answer": "TRUE",
                "explanation": ["• The official count is 7,641 islands."],
                "sources": ["https://www.namria.gov.ph"],
                "model_id": "qwen-plus",
            }
        },
    )

    id: str = Field(..., description="Unique claim identifier")
    round: int = Field(..., ge=1, description="Game round the claim was generated for")
    statement: str = Field(..., description="The claim shown to the player")
    answer: str = Field(..., pattern="^(TRUE|FALSE)$", description="Correct answer")
    explanation: List[str] = Field(default_factory=list, description="Why the answer is correct")
    sources: List[str] = Field(default_factory=list, description="Supporting source URLs")
    created_at: datetime = Field(..., description="When the claim was assembled")
    model_id: str = Field(..., description="Model that generated the claim")
