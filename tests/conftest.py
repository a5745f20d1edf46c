"""Test configuration and common fixtures."""

from datetime import datetime, timezone
from typing import Dict, List, Union

import pytest

from truthchain.domain.ports.ai_provider import AIProvider, ModelRequest
from truthchain.domain.services.fact_checking_service import FactCheckingService
from truthchain.domain.services.result_assembler import ResultAssembler
from truthchain.infrastructure.storage.memory_repository import InMemoryResultRepository

FIXED_NOW = datetime(2024, 6, 10, 12, 0, 0, tzinfo=timezone.utc)


class ScriptedProvider(AIProvider):
    """AI provider that replays scripted replies.

    Each entry is either the raw text to return or an exception to raise.
    The last entry repeats once the script runs out.
    """

    def __init__(self, replies: List[Union[str, Exception]], provider_name: str = "Scripted"):
        """Initialize scripted provider."""
        self._replies = list(replies)
        self._name = provider_name
        self._initialized = False
        self.requests: List[ModelRequest] = []

    async def initialize(self) -> None:
        """Initialize the provider."""
        self._initialized = True

    async def shutdown(self) -> None:
        """Shutdown the provider."""
        self._initialized = False

    async def complete(self, request: ModelRequest) -> str:
        """Return the next scripted reply."""
        self.requests.append(request)
        reply = self._replies.pop(0) if len(self._replies) > 1 else self._replies[0]
        if isinstance(reply, Exception):
            raise reply
        return reply

    @property
    def provider_name(self) -> str:
        """Get provider name."""
        return self._name

    @property
    def model_id(self) -> str:
        """Get model identifier."""
        return "scripted-model"

    @property
    def is_available(self) -> bool:
        """Check if available."""
        return self._initialized

    @property
    def capabilities(self) -> Dict[str, bool]:
        """Get capabilities."""
        return {"text_generation": True}


@pytest.fixture
def repository() -> InMemoryResultRepository:
    """Provide an empty result log."""
    return InMemoryResultRepository(capacity=50)


@pytest.fixture
def assembler() -> ResultAssembler:
    """Provide an assembler with a frozen clock."""
    return ResultAssembler(clock=lambda: FIXED_NOW)


@pytest.fixture
def make_service(repository, assembler):
    """Build a service around scripted replies."""

    def _make(*replies: Union[str, Exception], **kwargs) -> FactCheckingService:
        provider = ScriptedProvider(list(replies))
        kwargs.setdefault("timeout", 1.0)
        return FactCheckingService(provider, repository=repository, assembler=assembler, **kwargs)

    return _make


@pytest.fixture
def scripted_provider():
    """Provide the scripted provider class."""
    return ScriptedProvider
