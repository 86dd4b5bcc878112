"""Post ingestion pipeline."""

from typing import TYPE_CHECKING

import structlog

from postcraft.core.exceptions import PipelineError, ProviderError, ValidationError
from postcraft.core.interfaces.repositories import VectorRepository
from postcraft.core.models.draft import IngestionReport
from postcraft.core.models.post import Post
from postcraft.embedding.base import EmbeddingProvider

if TYPE_CHECKING:
    from postcraft.services.style_profiles import StyleProfileService

logger = structlog.get_logger(__name__)


class IngestionPipeline:
    """Pipeline for storing a user's posts and refreshing their style profile.

    Orchestrates the ingestion process:
    1. Make sure the vector collection exists
    2. Embed posts chunk by chunk, paced by the provider's rate limiter
    3. Upsert each chunk as soon as it is embedded
    4. Recompute the style profile from the ingested batch

    Chunks are processed strictly one after another. When a chunk fails, the
    chunks before it stay stored and the profile is left untouched.
    """

    def __init__(
        self,
        embedding_provider: EmbeddingProvider,
        vector_repo: VectorRepository,
        profiles: "StyleProfileService",
        chunk_size: int = 100,
    ) -> None:
        self._embedding = embedding_provider
        self._vector = vector_repo
        self._profiles = profiles
        self._chunk_size = chunk_size
        self._collection_ready = False

    async def ingest(self, user_id: str, posts: list[Post]) -> IngestionReport:
        """Ingest a batch of posts for a user.

        Raises:
            ValidationError: If ``posts`` is empty.
            ProviderError: If embedding fails. Raised as-is, with ``user_id``,
                ``persisted`` and ``total`` added to its details.
            PipelineError: If any other step fails. ``details["persisted"]``
                holds the number of posts stored before the failure.
        """
        if not posts:
            raise ValidationError("No posts to ingest", details={"user_id": user_id})

        log = logger.bind(user_id=user_id, posts=len(posts))
        point_ids: list[str] = []

        async def persist_chunk(chunk: list[Post], vectors: list[list[float]]) -> None:
            point_ids.extend(await self._vector.upsert_batch(user_id, chunk, vectors))

        try:
            if not self._collection_ready:
                await self._vector.ensure_collection()
                self._collection_ready = True

            await self._embedding.embed_posts(
                posts,
                chunk_size=self._chunk_size,
                on_chunk=persist_chunk,
            )
            profile = await self._profiles.recompute(user_id, posts)

        except ValidationError:
            raise
        except ProviderError as e:
            e.details.update(user_id=user_id, persisted=len(point_ids), total=len(posts))
            log.error("ingestion.failed", persisted=len(point_ids), error=str(e))
            raise
        except Exception as e:
            log.error("ingestion.failed", persisted=len(point_ids), error=str(e))
            raise PipelineError(
                f"Failed to ingest posts: {e}",
                details={
                    "user_id": user_id,
                    "persisted": len(point_ids),
                    "total": len(posts),
                },
            ) from e

        log.info("ingestion.done", point_ids=len(point_ids))
        return IngestionReport(
            user_id=user_id,
            post_count=len(posts),
            point_ids=point_ids,
            style_profile=profile,
        )

    async def delete_user(self, user_id: str) -> None:
        """Remove a user's stored posts and style profile."""
        await self._vector.delete_user(user_id)
        await self._profiles.delete(user_id)
        logger.info("ingestion.user_deleted", user_id=user_id)
