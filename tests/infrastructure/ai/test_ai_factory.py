"""Tests for the AI provider factory."""

import pytest
import pytest_asyncio

from truthchain.domain.ports.ai_provider import AIProvider, ModelRequest
from truthchain.infrastructure.ai.factory import AIProviderFactory
from truthchain.infrastructure.ai.qwen_adapter import QwenAdapter


class StubProvider(AIProvider):
    """Provider that only tracks its lifecycle."""

    def __init__(self, provider_name: str = "Stub", fail: bool = False):
        """Initialize stub provider."""
        self._name = provider_name
        self._fail = fail
        self._initialized = False

    async def initialize(self) -> None:
        """Initialize the provider."""
        if self._fail:
            raise ConnectionError("no key")
        self._initialized = True

    async def complete(self, request: ModelRequest) -> str:
        """Return a fixed reply."""
        return "true"

    async def shutdown(self) -> None:
        """Shutdown the provider."""
        self._initialized = False

    @property
    def provider_name(self) -> str:
        """Get provider name."""
        return self._name

    @property
    def model_id(self) -> str:
        """Get model identifier."""
        return "stub-model"

    @property
    def capabilities(self) -> dict:
        """Get capabilities."""
        return {"text_generation": True}

    @property
    def is_available(self) -> bool:
        """Check if available."""
        return self._initialized


@pytest_asyncio.fixture
async def ai_factory() -> AIProviderFactory:
    """Create an AI provider factory."""
    factory = AIProviderFactory()
    factory.register_provider("stub", StubProvider)
    return factory


@pytest.mark.asyncio
async def test_create_provider(ai_factory: AIProviderFactory):
    """Test provider creation."""
    provider = await ai_factory.create_provider("stub", provider_name="StubAI")

    assert isinstance(provider, StubProvider)
    assert provider.provider_name == "StubAI"
    assert provider.is_available


@pytest.mark.asyncio
async def test_instances_are_cached(ai_factory: AIProviderFactory):
    """Test repeated creation returns the same instance."""
    first = await ai_factory.create_provider("stub")
    second = await ai_factory.create_provider("stub")
    assert first is second
    assert ai_factory.get_provider("stub") is first


@pytest.mark.asyncio
async def test_named_instances(ai_factory: AIProviderFactory):
    """Test two instances of one provider type."""
    main = await ai_factory.create_provider("stub")
    game = await ai_factory.create_provider("stub", instance_name="stub-game", provider_name="Game")

    assert main is not game
    assert ai_factory.available_providers == {"stub": True, "stub-game": True}
    assert ai_factory.provider_capabilities == {
        "stub": {"text_generation": True},
        "stub-game": {"text_generation": True},
    }


@pytest.mark.asyncio
async def test_failed_initialization_is_not_cached(ai_factory: AIProviderFactory):
    """Test a provider that fails to start."""
    with pytest.raises(ConnectionError):
        await ai_factory.create_provider("stub", fail=True)
    assert ai_factory.get_provider("stub") is None


@pytest.mark.asyncio
async def test_shutdown(ai_factory: AIProviderFactory):
    """Test factory shutdown."""
    provider = await ai_factory.create_provider("stub")

    await ai_factory.shutdown()

    assert not provider.is_available
    assert ai_factory.available_providers == {}
    assert ai_factory.provider_capabilities == {}


@pytest.mark.asyncio
async def test_unknown_provider_type(ai_factory: AIProviderFactory):
    """Test error handling for unknown provider type."""
    with pytest.raises(ValueError):
        await ai_factory.create_provider("unknown")


def test_qwen_is_registered():
    """Test the default registration."""
    assert AIProviderFactory()._providers["qwen"] is QwenAdapter
