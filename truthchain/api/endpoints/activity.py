"""Statistics and recent-activity endpoints."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from ...domain.ports.result_repository import ResultRepository
from ...infrastructure.dependencies import get_result_repository
from ..presenters import present_activity

router = APIRouter(prefix="/api", tags=["activity"])

RECENT_ACTIVITY_LIMIT = 10


@router.get("/stats")
async def stats(repository: ResultRepository = Depends(get_result_repository)) -> Dict[str, Any]:
    """Count of verifications served since start-up."""
    return {"success": True, "stats": {"verifiedCount": repository.count()}}


@router.get("/recent-activity")
async def recent_activity(repository: ResultRepository = Depends(get_result_repository)) -> Dict[str, Any]:
    """The latest verifications, newest first."""
    return {
        "success": True,
        "activities": [present_activity(result) for result in repository.recent(RECENT_ACTIVITY_LIMIT)],
    }
