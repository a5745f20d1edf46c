"""Debate analysis endpoints."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from ...domain.errors import ValidationFailure
from ...domain.services.fact_checking_service import FactCheckingService
from ...infrastructure.dependencies import get_fact_checking_service
from ..presenters import present_debate

router = APIRouter(prefix="/api", tags=["debate"])


class DebateRequest(BaseModel):
    """Request model for debate analysis."""

    content: Optional[str] = Field(None, description="Article, claim or statement to debate")


@router.post("/debate")
async def debate(
    request: DebateRequest,
    service: FactCheckingService = Depends(get_fact_checking_service),
) -> Dict[str, Any]:
    """Produce pro and con arguments for the submitted content."""
    try:
        analysis = await service.analyze_debate(request.content or "")
    except ValidationFailure as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {"success": True, "analysis": present_debate(analysis)}
