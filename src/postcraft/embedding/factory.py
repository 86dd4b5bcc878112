"""Factory for embedding providers."""

from postcraft.core.exceptions import ConfigurationError
from postcraft.embedding.base import EmbeddingProvider
from postcraft.embedding.config import EmbeddingConfig
from postcraft.utils.rate_limit import FixedDelayRateLimiter, RateLimiter


class EmbeddingProviderFactory:
    """Creates the embedding provider selected by configuration."""

    def __init__(self, config: EmbeddingConfig | None = None) -> None:
        self._config = config or EmbeddingConfig()

    @property
    def config(self) -> EmbeddingConfig:
        return self._config

    def create_provider(self, rate_limiter: RateLimiter | None = None) -> EmbeddingProvider:
        provider = self._config.provider.lower()
        limiter = rate_limiter or FixedDelayRateLimiter(self._config.chunk_delay)

        if provider == "openai":
            from postcraft.embedding.providers.openai import OpenAIEmbeddingProvider

            return OpenAIEmbeddingProvider(
                model=self._config.openai_model,
                dimensions=self._config.openai_dimensions,
                api_key=self._config.api_key,
                base_url=self._config.base_url,
                timeout=self._config.timeout,
                rate_limiter=limiter,
            )

        raise ConfigurationError(
            f"Unknown embedding provider: {self._config.provider}",
            details={"provider": self._config.provider},
        )
