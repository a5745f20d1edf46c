"""True-or-false game endpoints."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from ...domain.services.fact_checking_service import FactCheckingService
from ...infrastructure.dependencies import get_fact_checking_service
from ..presenters import present_claim

router = APIRouter(prefix="/api", tags=["game"])


class GameClaimRequest(BaseModel):
    """Request model for a new trivia claim."""

    round: Optional[int] = Field(default=1, description="Game round, rounds below 1 count as 1")


@router.post("/game-claim")
async def game_claim(
    request: Optional[GameClaimRequest] = None,
    service: FactCheckingService = Depends(get_fact_checking_service),
) -> Dict[str, Any]:
    """Generate a statement for the player to judge."""
    round = request.round if request and request.round else 1
    claim = await service.generate_claim(round)
    return {"success": True, "claim": present_claim(claim)}
