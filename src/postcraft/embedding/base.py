"""Base embedding provider."""

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable

import structlog

from postcraft.core.exceptions import DimensionMismatchError, ProviderError, ValidationError
from postcraft.core.models.post import Post
from postcraft.utils.rate_limit import FixedDelayRateLimiter, RateLimiter
from postcraft.utils.text import clean_text

logger = structlog.get_logger(__name__)

# Upstream limit on inputs per embeddings request.
MAX_BATCH_SIZE = 2048

ChunkCallback = Callable[[list[Post], list[list[float]]], Awaitable[None]]


class EmbeddingProvider(ABC):
    """Abstract base class for embedding providers.

    Subclasses implement ``_request`` against their backend; cleanup,
    batch validation, ordering and chunked ingestion live here.
    """

    def __init__(self, rate_limiter: RateLimiter | None = None) -> None:
        self._rate_limiter = rate_limiter or FixedDelayRateLimiter(0.5)

    @property
    @abstractmethod
    def model_name(self) -> str:
        """The name of the embedding model."""
        ...

    @property
    @abstractmethod
    def dimensions(self) -> int:
        """The dimensionality of the embeddings."""
        ...

    @abstractmethod
    async def _request(self, texts: list[str]) -> list[tuple[int, list[float]]]:
        """Embed already-cleaned texts.

        Returns ``(input_index, vector)`` pairs in whatever order the backend
        produced them. Backend failures must be raised as ProviderError.
        """
        ...

    def _check_dimensions(self, vector: list[float]) -> list[float]:
        if len(vector) != self.dimensions:
            raise DimensionMismatchError(expected=self.dimensions, actual=len(vector))
        return vector

    async def embed(self, text: str) -> list[float]:
        """Generate the embedding for a single text."""
        items = await self._request([clean_text(text)])
        if not items:
            raise ProviderError(
                "Embedding provider returned no data",
                details={"model": self.model_name},
            )
        return self._check_dimensions(items[0][1])

    async def embed_batch(self, texts: list[str]) -> list[list[float]]:
        """Generate embeddings for many texts; ``result[i]`` embeds ``texts[i]``."""
        if not texts:
            return []
        if len(texts) > MAX_BATCH_SIZE:
            raise ValidationError(
                f"Batch size cannot exceed {MAX_BATCH_SIZE} texts",
                details={"batch_size": len(texts), "max_batch_size": MAX_BATCH_SIZE},
            )

        items = await self._request([clean_text(t) for t in texts])
        if len(items) != len(texts):
            raise ProviderError(
                f"Embedding provider returned {len(items)} vectors for {len(texts)} texts",
                details={"model": self.model_name},
            )

        ordered = sorted(items, key=lambda item: item[0])
        return [self._check_dimensions(vector) for _, vector in ordered]

    async def embed_posts(
        self,
        posts: list[Post],
        chunk_size: int = 100,
        on_chunk: ChunkCallback | None = None,
    ) -> list[list[float]]:
        """Embed posts in sequential chunks, pacing them with the rate limiter.

        Chunk N+1 starts only after chunk N (and ``on_chunk`` for it) has
        completed. A failing chunk aborts the run; earlier chunks have already
        been handed to ``on_chunk``.
        """
        if not posts:
            return []
        if chunk_size < 1 or chunk_size > MAX_BATCH_SIZE:
            raise ValidationError(
                f"chunk_size must be between 1 and {MAX_BATCH_SIZE}",
                details={"chunk_size": chunk_size},
            )

        total_chunks = (len(posts) + chunk_size - 1) // chunk_size
        vectors: list[list[float]] = []

        for number, start in enumerate(range(0, len(posts), chunk_size), start=1):
            chunk = posts[start : start + chunk_size]
            if number > 1:
                await self._rate_limiter.acquire()

            chunk_vectors = await self.embed_batch([p.text for p in chunk])
            logger.debug(
                "embedding.chunk.done",
                chunk=number,
                total_chunks=total_chunks,
                size=len(chunk),
            )
            if on_chunk is not None:
                await on_chunk(chunk, chunk_vectors)
            vectors.extend(chunk_vectors)

        logger.info("embedding.posts.done", count=len(vectors), model=self.model_name)
        return vectors

    async def close(self) -> None:
        """Release backend resources."""
        return None
