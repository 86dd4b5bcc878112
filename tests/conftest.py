"""Shared fixtures and fakes for postcraft tests."""

from __future__ import annotations

import pytest

from postcraft.core.exceptions import ProviderError
from postcraft.embedding.base import EmbeddingProvider
from postcraft.generation.config import GenerationConfig
from postcraft.generation.generator import DraftGenerator
from postcraft.pipelines.ingestion import IngestionPipeline
from postcraft.repositories.profile.memory import InMemoryStyleProfileRepository
from postcraft.repositories.vector.memory import InMemoryVectorRepository
from postcraft.services.style_profiles import StyleProfileService
from postcraft.utils.rate_limit import NoopRateLimiter

DIMENSIONS = 3

# Each topic keyword maps to its own axis, so posts about the same topic
# have cosine similarity 1 and posts about different topics 0.
TOPIC_AXES = {"coffee": 0, "code": 1, "travel": 2}


def topic_vector(text: str) -> list[float]:
    vector = [0.0] * DIMENSIONS
    lowered = text.lower()
    for keyword, axis in TOPIC_AXES.items():
        if keyword in lowered:
            vector[axis] += 1.0
    if not any(vector):
        vector = [0.2, 0.2, 0.2]
    return vector


class RecordingRateLimiter:
    """Counts acquires without waiting."""

    def __init__(self) -> None:
        self.acquired = 0

    async def acquire(self) -> None:
        self.acquired += 1


class FakeEmbeddingProvider(EmbeddingProvider):
    """Deterministic topic-axis embeddings.

    ``shuffle`` returns results in reverse input order to exercise
    re-ordering by index; ``fail_on_request`` makes the N-th request
    (1-based) raise ProviderError.
    """

    def __init__(
        self,
        dimensions: int = DIMENSIONS,
        *,
        shuffle: bool = False,
        fail_on_request: int | None = None,
        rate_limiter=None,
    ) -> None:
        super().__init__(rate_limiter=rate_limiter or NoopRateLimiter())
        self._dimensions = dimensions
        self._shuffle = shuffle
        self._fail_on_request = fail_on_request
        self.requests: list[list[str]] = []

    @property
    def model_name(self) -> str:
        return "fake-embedding"

    @property
    def dimensions(self) -> int:
        return self._dimensions

    async def _request(self, texts: list[str]) -> list[tuple[int, list[float]]]:
        self.requests.append(list(texts))
        if self._fail_on_request == len(self.requests):
            raise ProviderError("upstream unavailable", details={"request": len(self.requests)})
        items = [(i, topic_vector(t)[: self._dimensions]) for i, t in enumerate(texts)]
        if self._shuffle:
            items.reverse()
        return items


class FakeChatModel:
    """Returns a canned completion and records every call."""

    def __init__(self, completion: str = "Draft one\n\nDraft two\n\nDraft three") -> None:
        self.completion = completion
        self.calls: list[dict] = []

    @property
    def model_name(self) -> str:
        return "fake-chat"

    async def complete(
        self,
        system: str,
        user: str,
        *,
        temperature: float,
        max_tokens: int,
    ) -> str:
        self.calls.append(
            {
                "system": system,
                "user": user,
                "temperature": temperature,
                "max_tokens": max_tokens,
            }
        )
        return self.completion


@pytest.fixture
def embedding_provider() -> FakeEmbeddingProvider:
    return FakeEmbeddingProvider()


@pytest.fixture
def vector_repo() -> InMemoryVectorRepository:
    return InMemoryVectorRepository(dimensions=DIMENSIONS)


@pytest.fixture
def profile_repo() -> InMemoryStyleProfileRepository:
    return InMemoryStyleProfileRepository()


@pytest.fixture
def profiles(profile_repo) -> StyleProfileService:
    return StyleProfileService(profile_repo)


@pytest.fixture
def chat_model() -> FakeChatModel:
    return FakeChatModel()


@pytest.fixture
def pipeline(embedding_provider, vector_repo, profiles) -> IngestionPipeline:
    return IngestionPipeline(
        embedding_provider=embedding_provider,
        vector_repo=vector_repo,
        profiles=profiles,
        chunk_size=2,
    )


@pytest.fixture
def generator(embedding_provider, vector_repo, profiles, chat_model) -> DraftGenerator:
    return DraftGenerator(
        embedding_provider=embedding_provider,
        vector_repo=vector_repo,
        profiles=profiles,
        chat_model=chat_model,
        config=GenerationConfig(),
    )


@pytest.fixture
def make_embedding_provider():
    """Factory for providers with non-default options."""
    return FakeEmbeddingProvider


@pytest.fixture
def rate_limiter() -> RecordingRateLimiter:
    return RecordingRateLimiter()
