"""Draft service: the entry point used by outer layers (CLI, HTTP)."""

from typing import Any

from postcraft.config.settings import Settings, get_settings
from postcraft.core.interfaces.collaborators import ChatModel
from postcraft.core.interfaces.repositories import VectorRepository
from postcraft.core.models.draft import DraftResult, IngestionReport
from postcraft.core.models.post import Post
from postcraft.core.models.style import StyleProfile
from postcraft.embedding import EmbeddingConfig, EmbeddingProvider, EmbeddingProviderFactory
from postcraft.generation import DraftGenerator, GenerationConfig, OpenAIChatModel
from postcraft.pipelines.ingestion import IngestionPipeline
from postcraft.repositories.factory import RepositoryFactory
from postcraft.services.ingestion import IngestionService
from postcraft.services.style_profiles import StyleProfileService


class DraftService:
    """Groups draft generation, ingestion and profile lookups for one stack."""

    def __init__(
        self,
        generator: DraftGenerator,
        ingestion: IngestionService,
        profiles: StyleProfileService,
        vector_repo: VectorRepository,
        resources: list[Any] | None = None,
    ) -> None:
        self._generator = generator
        self._ingestion = ingestion
        self._profiles = profiles
        self._vector = vector_repo
        # Objects exposing ``async close()``, closed in order by close().
        self._resources = resources or []

    @classmethod
    async def from_settings(
        cls,
        settings: Settings | None = None,
        *,
        embedding_provider: EmbeddingProvider | None = None,
        chat_model: ChatModel | None = None,
    ) -> "DraftService":
        """Build the full stack from settings.

        ``embedding_provider`` and ``chat_model`` override the OpenAI defaults.
        """
        settings = settings or get_settings()
        factory = RepositoryFactory(settings)
        vector_repo = await factory.get_vector_repository()
        profiles = StyleProfileService(await factory.get_profile_repository())

        if embedding_provider is None:
            embedding_provider = EmbeddingProviderFactory(
                EmbeddingConfig(
                    provider=settings.embedding_provider,
                    openai_model=settings.openai_embedding_model,
                    openai_dimensions=settings.vector_dimensions,
                    api_key=settings.openai_api_key,
                    base_url=settings.openai_base_url,
                    timeout=settings.request_timeout,
                    chunk_size=settings.embedding_chunk_size,
                    chunk_delay=settings.embedding_chunk_delay,
                )
            ).create_provider()
        if chat_model is None:
            chat_model = OpenAIChatModel(
                model=settings.openai_chat_model,
                api_key=settings.openai_api_key,
                base_url=settings.openai_base_url,
                timeout=settings.request_timeout,
            )

        generator = DraftGenerator(
            embedding_provider=embedding_provider,
            vector_repo=vector_repo,
            profiles=profiles,
            chat_model=chat_model,
            config=GenerationConfig(
                temperature=settings.draft_temperature,
                regenerate_temperature=settings.regenerate_temperature,
                max_tokens=settings.draft_max_tokens,
                max_length=settings.max_post_length,
                min_similarity=settings.min_similarity,
            ),
        )
        pipeline = IngestionPipeline(
            embedding_provider=embedding_provider,
            vector_repo=vector_repo,
            profiles=profiles,
            chunk_size=settings.embedding_chunk_size,
        )
        return cls(
            generator=generator,
            ingestion=IngestionService(pipeline),
            profiles=profiles,
            vector_repo=vector_repo,
            resources=[embedding_provider, chat_model, factory],
        )

    async def init(self) -> dict[str, int | str]:
        """Create the vector collection if needed and describe it."""
        await self._vector.ensure_collection()
        return await self._vector.get_collection_info()

    async def generate(
        self,
        user_id: str,
        idea: str,
        num_variations: int = 3,
        top_k: int = 5,
    ) -> DraftResult:
        return await self._generator.generate(user_id, idea, num_variations, top_k)

    async def regenerate(self, user_id: str, idea: str, previous_drafts: list[str]) -> list[str]:
        return await self._generator.regenerate(user_id, idea, previous_drafts)

    async def ingest(self, user_id: str, posts: list[Post]) -> IngestionReport:
        return await self._ingestion.ingest(user_id, posts)

    async def ingest_texts(self, user_id: str, texts: list[str]) -> IngestionReport:
        return await self._ingestion.ingest_texts(user_id, texts)

    async def list_posts(self, user_id: str, limit: int = 50, offset: int = 0) -> list[Post]:
        """Stored posts of a user, newest first."""
        return await self._vector.list_posts(user_id, limit, offset)

    async def get_profile(self, user_id: str) -> StyleProfile | None:
        return await self._profiles.get(user_id)

    async def forget(self, user_id: str) -> None:
        await self._ingestion.forget(user_id)

    async def close(self) -> None:
        for resource in self._resources:
            close = getattr(resource, "close", None)
            if close is not None:
                await close()
