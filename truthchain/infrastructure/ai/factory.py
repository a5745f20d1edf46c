"""Factory for creating and managing AI providers."""

import logging
from typing import Callable, Dict, Optional

from ...domain.ports.ai_provider import AIProvider
from .qwen_adapter import QwenAdapter

logger = logging.getLogger(__name__)


class AIProviderFactory:
    """Factory for creating and managing AI providers."""

    def __init__(self):
        """Initialize the factory."""
        self._providers: Dict[str, Callable[..., AIProvider]] = {}
        self._instances: Dict[str, AIProvider] = {}

        # Register default providers
        self.register_provider("qwen", QwenAdapter)

    def register_provider(self, name: str, provider_class: Callable[..., AIProvider]) -> None:
        """Register a new AI provider.

        Args:
            name: Provider name
            provider_class: Provider class or callable building an instance
        """
        self._providers[name] = provider_class

    async def create_provider(
        self,
        name: str,
        instance_name: Optional[str] = None,
        **kwargs
    ) -> AIProvider:
        """Create and initialize a provider instance.

        Args:
            name: Registered provider name
            instance_name: Key the instance is stored under, defaults to ``name``
            **kwargs: Provider-specific configuration

        Returns:
            Initialized provider instance

        Raises:
            ValueError: If provider not found
            ConnectionError: If the provider fails to initialize
        """
        if name not in self._providers:
            raise ValueError(f"Provider '{name}' not found")

        key = instance_name or name
        if key not in self._instances:
            provider = self._providers[name](**kwargs)
            await provider.initialize()
            self._instances[key] = provider
            logger.info(f"✅ AI provider '{key}' ready ({provider.provider_name})")

        return self._instances[key]

    def get_provider(self, name: str) -> Optional[AIProvider]:
        """Get an existing provider instance.

        Args:
            name: Instance name

        Returns:
            Provider instance if exists, None otherwise
        """
        return self._instances.get(name)

    @property
    def available_providers(self) -> Dict[str, bool]:
        """Get dictionary of created instances and their availability."""
        return {
            name: provider.is_available
            for name, provider in self._instances.items()
        }

    @property
    def provider_capabilities(self) -> Dict[str, Dict[str, bool]]:
        """Get dictionary of created instances and what each can do."""
        return {
            name: dict(provider.capabilities)
            for name, provider in self._instances.items()
        }

    async def shutdown(self) -> None:
        """Shutdown all provider instances."""
        for provider in self._instances.values():
            await provider.shutdown()
        self._instances.clear()
