"""OpenAI embedding provider."""

import openai
from openai import AsyncOpenAI

from postcraft.core.exceptions import ProviderError
from postcraft.embedding.base import EmbeddingProvider
from postcraft.utils.rate_limit import RateLimiter


class OpenAIEmbeddingProvider(EmbeddingProvider):
    """OpenAI-based embedding provider.

    The client is created with ``max_retries=0``: retry policy belongs to
    the caller, not to this component.
    """

    def __init__(
        self,
        model: str = "text-embedding-3-small",
        dimensions: int = 1536,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float = 30.0,
        rate_limiter: RateLimiter | None = None,
        client: AsyncOpenAI | None = None,
    ) -> None:
        super().__init__(rate_limiter=rate_limiter)
        self._model = model
        self._dimensions = dimensions
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout
        self._client = client

    @property
    def model_name(self) -> str:
        return self._model

    @property
    def dimensions(self) -> int:
        return self._dimensions

    def _ensure_client(self) -> AsyncOpenAI:
        """Ensure OpenAI client is initialized."""
        if self._client is None:
            self._client = AsyncOpenAI(
                api_key=self._api_key,
                base_url=self._base_url,
                timeout=self._timeout,
                max_retries=0,
            )
        return self._client

    async def _request(self, texts: list[str]) -> list[tuple[int, list[float]]]:
        client = self._ensure_client()
        try:
            response = await client.embeddings.create(model=self._model, input=texts)
        except openai.OpenAIError as e:
            raise ProviderError(
                f"OpenAI embedding request failed: {e}",
                details={"model": self._model, "inputs": len(texts)},
            ) from e

        if not response.data:
            raise ProviderError(
                "OpenAI embedding response contained no data",
                details={"model": self._model},
            )
        return [(item.index, list(item.embedding)) for item in response.data]

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None
