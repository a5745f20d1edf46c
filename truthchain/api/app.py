"""FastAPI application for the TruthChain service."""

import contextlib
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..domain.errors import ModelInvocationFailure
from ..infrastructure.dependencies import get_service_container
from .endpoints import activity, debate, game, health, verify

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

UNAVAILABLE_DETAIL = "The AI service is currently unavailable, please try again"
UNCONFIGURED_DETAIL = "The AI service is not configured"


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    """Shut down AI providers when the application stops."""
    logger.info("🚀 TruthChain PH API starting")
    yield
    await get_service_container().shutdown()
    logger.info("🔄 TruthChain PH API stopped")


# Create FastAPI application
app = FastAPI(
    title="TruthChain PH API",
    description="Fact-checking, debate analysis and true-or-false game backed by a language model",
    version="0.1.0",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(verify.router)
app.include_router(game.router)
app.include_router(debate.router)
app.include_router(activity.router)


@app.exception_handler(ModelInvocationFailure)
async def model_invocation_failure_handler(request: Request, exc: ModelInvocationFailure) -> JSONResponse:
    """Report an unreachable or unconfigured model as a service error."""
    logger.error(f"❌ {request.url.path}: {exc}")
    return JSONResponse(
        status_code=503,
        content={
            "success": False,
            "retryable": exc.retryable,
            "detail": UNAVAILABLE_DETAIL if exc.retryable else UNCONFIGURED_DETAIL,
        },
    )
