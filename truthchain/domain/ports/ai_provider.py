"""Protocol for AI providers."""

from typing import Dict, Protocol

from pydantic import BaseModel, ConfigDict, Field


class ModelRequest(BaseModel):
    """Outbound request for the language model."""

    model_config = ConfigDict(frozen=True)

    system_prompt: str = Field(..., description="Instructions and output format")
    user_prompt: str = Field(..., description="The content to analyse")
    enable_web_search: bool = Field(default=True, description="Let the model search the web")


class AIProvider(Protocol):
    """Protocol defining the interface for AI providers.

    Providers are opaque text generators: they return whatever the model
    said, without interpreting it.
    """

    async def initialize(self) -> None:
        """Initialize the AI provider."""
        ...

    async def shutdown(self) -> None:
        """Clean up resources."""
        ...

    async def complete(self, request: ModelRequest) -> str:
        """Send a request to the model and return its raw reply."""
        ...

    @property
    def provider_name(self) -> str:
        """Get the name of the AI provider."""
        ...

    @property
    def model_id(self) -> str:
        """Get the identifier of the model behind the provider."""
        ...

    @property
    def is_available(self) -> bool:
        """Check if the provider is available and ready."""
        ...

    @property
    def capabilities(self) -> Dict[str, bool]:
        """Get the provider's capabilities."""
        ...
