"""Fact-checking API endpoints."""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from ...domain.errors import ValidationFailure
from ...domain.services.fact_checking_service import FactCheckingService
from ...infrastructure.dependencies import get_fact_checking_service
from ..presenters import present_verification

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["verify"])


class VerifyRequest(BaseModel):
    """Request model for text verification."""

    model_config = ConfigDict(populate_by_name=True)

    type: str = Field(default="text", description="Input kind; only text is supported")
    content: Optional[str] = Field(None, description="Text to verify")
    source_url: Optional[str] = Field(None, alias="sourceUrl", description="Where the text was found")


@router.post("/verify")
async def verify(
    request: VerifyRequest,
    service: FactCheckingService = Depends(get_fact_checking_service),
) -> Dict[str, Any]:
    """Verify a piece of text.

    Args:
        request: Verification request

    Returns:
        The verification result

    Raises:
        HTTPException: If the input kind is unsupported or content is empty
    """
    if request.type != "text":
        raise HTTPException(status_code=400, detail="Only text verification is supported")

    try:
        result = await service.verify(request.content or "", request.source_url)
    except ValidationFailure as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {"success": True, "result": present_verification(result)}
