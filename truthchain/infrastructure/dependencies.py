"""Dependency injection configuration for hexagonal architecture."""

import asyncio
import logging
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

from ..domain.errors import ProviderConfigurationError
from ..domain.ports.result_repository import ResultRepository
from ..domain.services.fact_checking_service import FactCheckingService
from .ai.factory import AIProviderFactory
from .ai.qwen_adapter import QwenConfig
from .config import AppConfig
from .storage.memory_repository import InMemoryResultRepository

logger = logging.getLogger(__name__)


class ServiceContainer:
    """Service container for dependency injection."""

    def __init__(self, config: Optional[AppConfig] = None):
        """Initialize service container.

        Args:
            config: Application configuration, read from the environment if omitted
        """
        self.config = config or AppConfig.from_env()
        self.ai_factory = AIProviderFactory()
        self.repository: ResultRepository = InMemoryResultRepository(self.config.history_size)
        self._fact_checking_service: Optional[FactCheckingService] = None
        self._lock = asyncio.Lock()
        logger.info("✅ Service container setup completed")

    async def _setup_ai_providers(self):
        """Create the verification provider and, if configured, the game provider."""
        logger.info("🤖 Setting up AI providers...")
        ai_provider = await self.ai_factory.create_provider(
            "qwen",
            config=QwenConfig.from_app_config(self.config),
        )

        claim_provider = None
        if self.config.game_api_key:
            claim_provider = await self.ai_factory.create_provider(
                "qwen",
                instance_name="qwen-game",
                config=QwenConfig.from_app_config(self.config, api_key=self.config.game_api_key),
                provider_name="Qwen (game)",
            )
        return ai_provider, claim_provider

    async def get_fact_checking_service(self) -> FactCheckingService:
        """Get the fact checking service, creating providers on first use.

        Raises:
            ProviderConfigurationError: If no AI provider can be initialized
        """
        async with self._lock:
            if self._fact_checking_service is None:
                try:
                    ai_provider, claim_provider = await self._setup_ai_providers()
                except (ConnectionError, ValueError) as e:
                    logger.error(f"❌ Failed to setup AI providers: {e}")
                    raise ProviderConfigurationError("provider setup", 0, str(e)) from e

                self._fact_checking_service = FactCheckingService(
                    ai_provider,
                    repository=self.repository,
                    claim_provider=claim_provider,
                    timeout=self.config.request_timeout,
                    max_retries=self.config.max_retries,
                )
                logger.info("✅ FactCheckingService created with providers")
        return self._fact_checking_service

    def get_repository(self) -> ResultRepository:
        """Get the verification result log."""
        return self.repository

    async def shutdown(self) -> None:
        """Shut down all providers."""
        await self.ai_factory.shutdown()
        self._fact_checking_service = None


# Global service container instance
@lru_cache()
def get_service_container() -> ServiceContainer:
    """Get global service container instance."""
    load_dotenv()
    return ServiceContainer()


# Convenience functions for FastAPI dependency injection
async def get_fact_checking_service() -> FactCheckingService:
    """FastAPI dependency for fact checking service."""
    return await get_service_container().get_fact_checking_service()


def get_result_repository() -> ResultRepository:
    """FastAPI dependency for the verification result log."""
    return get_service_container().get_repository()
