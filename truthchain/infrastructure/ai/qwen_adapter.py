"""Qwen implementation of the AI provider interface."""

from typing import Dict, Optional

from openai import AsyncOpenAI
from pydantic import BaseModel, Field

from ...domain.ports.ai_provider import AIProvider, ModelRequest
from ..config import DASHSCOPE_BASE_URL, AppConfig


class QwenConfig(BaseModel):
    """Configuration for the Qwen adapter."""

    api_key: str = Field(..., description="DashScope API key")
    base_url: str = Field(default=DASHSCOPE_BASE_URL, description="OpenAI-compatible endpoint")
    model: str = Field(default="qwen-plus", description="Model to use")
    temperature: float = Field(default=0.3, description="Temperature for responses")
    max_tokens: int = Field(default=2048, description="Maximum tokens per response")
    timeout: float = Field(default=60.0, description="API timeout in seconds")

    @classmethod
    def from_app_config(cls, config: AppConfig, api_key: Optional[str] = None) -> "QwenConfig":
        """Derive adapter settings from the application configuration."""
        return cls(
            api_key=api_key if api_key is not None else config.api_key,
            base_url=config.base_url,
            model=config.model,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
            timeout=config.request_timeout,
        )


class QwenAdapter(AIProvider):
    """Qwen implementation of the AI provider interface.

    Talks to DashScope's OpenAI-compatible endpoint. Retries are left to the
    caller, so the client itself never retries.
    """

    def __init__(
        self,
        config: Optional[QwenConfig] = None,
        provider_name: str = "Qwen",
    ):
        """Initialize the adapter."""
        self._config = config or QwenConfig(api_key="")
        self._name = provider_name
        self._client: Optional[AsyncOpenAI] = None
        self._initialized = False

    async def initialize(self) -> None:
        """Create the API client."""
        if not self._config.api_key:
            raise ConnectionError(f"Failed to initialize {self._name} provider: API key not configured")
        try:
            if self._client is None:
                self._client = AsyncOpenAI(
                    api_key=self._config.api_key,
                    base_url=self._config.base_url,
                    timeout=self._config.timeout,
                    max_retries=0,
                )
            self._initialized = True
        except Exception as e:
            self._initialized = False
            self._client = None
            raise ConnectionError(f"Failed to initialize {self._name} provider: {e}")

    async def complete(self, request: ModelRequest) -> str:
        """Send a request to the model and return its raw reply."""
        if not self._client:
            raise RuntimeError("Provider not initialized")

        kwargs = {}
        if request.enable_web_search:
            kwargs["extra_body"] = {
                "enable_search": True,
                "search_options": {"search_strategy": "agent"},
            }

        response = await self._client.chat.completions.create(
            model=self._config.model,
            messages=[
                {"role": "system", "content": request.system_prompt},
                {"role": "user", "content": request.user_prompt},
            ],
            temperature=self._config.temperature,
            max_tokens=self._config.max_tokens,
            stream=False,
            **kwargs,
        )
        if not response.choices:
            raise RuntimeError("Model returned no choices")
        return response.choices[0].message.content or ""

    async def shutdown(self) -> None:
        """Clean up resources and shut down the provider."""
        if self._client:
            await self._client.close()
            self._client = None
        self._initialized = False

    @property
    def provider_name(self) -> str:
        """Get the name of the AI provider."""
        return self._name

    @property
    def model_id(self) -> str:
        """Get the model identifier."""
        return self._config.model

    @property
    def is_available(self) -> bool:
        """Check if the provider is available and ready."""
        return self._initialized and self._client is not None

    @property
    def capabilities(self) -> Dict[str, bool]:
        """Get the provider's capabilities."""
        return {
            "text_generation": True,
            "web_search": True,
            "multilingual": True,
        }
