"""Application configuration loaded from environment variables."""

import logging
import os
from typing import Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DASHSCOPE_BASE_URL = "https://dashscope-intl.aliyuncs.com/compatible-mode/v1"


class AppConfig(BaseModel):
    """Settings for the model providers and the fact-checking service."""

    api_key: str = Field(default="", description="API key for verification and debate analysis")
    game_api_key: Optional[str] = Field(default=None, description="API key for trivia claims")
    base_url: str = Field(default=DASHSCOPE_BASE_URL, description="OpenAI-compatible endpoint")
    model: str = Field(default="qwen-plus", description="Model to use")
    temperature: float = Field(default=0.3, description="Temperature for responses")
    max_tokens: int = Field(default=2048, description="Maximum tokens per response")
    request_timeout: float = Field(default=60.0, gt=0, description="Per-attempt model timeout in seconds")
    max_retries: int = Field(default=1, ge=0, le=1, description="Retries after a failed model call")
    history_size: int = Field(default=500, gt=0, description="Verification results kept in memory")

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create configuration from environment variables."""
        api_key = os.getenv("QWEN_API_KEY", "")
        game_api_key = os.getenv("QWEN_GAME_API_KEY") or None

        if not api_key:
            logger.warning("⚠️ QWEN_API_KEY not found in environment variables")
        else:
            logger.info(f"✅ Model API key loaded: {len(api_key)} chars")
        if game_api_key:
            logger.info("🎲 Dedicated trivia-game API key configured")

        return cls(
            api_key=api_key,
            game_api_key=game_api_key,
            base_url=os.getenv("QWEN_BASE_URL", DASHSCOPE_BASE_URL),
            model=os.getenv("QWEN_MODEL", "qwen-plus"),
            temperature=float(os.getenv("QWEN_TEMPERATURE", "0.3")),
            max_tokens=int(os.getenv("QWEN_MAX_TOKENS", "2048")),
            request_timeout=float(os.getenv("TRUTHCHAIN_REQUEST_TIMEOUT", "60")),
            max_retries=min(int(os.getenv("TRUTHCHAIN_MAX_RETRIES", "1")), 1),
            history_size=int(os.getenv("TRUTHCHAIN_HISTORY_SIZE", "500")),
        )
