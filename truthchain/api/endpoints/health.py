"""Health check endpoints."""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends

from ...infrastructure.dependencies import ServiceContainer, get_service_container

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
async def health_check(container: ServiceContainer = Depends(get_service_container)) -> Dict[str, Any]:
    """Check that the API is up and which AI providers are ready."""
    return {
        "success": True,
        "message": "TruthChain PH API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "providers": {
            name.title(): is_active
            for name, is_active in container.ai_factory.available_providers.items()
        },
        "capabilities": {
            name.title(): capabilities
            for name, capabilities in container.ai_factory.provider_capabilities.items()
        },
    }
