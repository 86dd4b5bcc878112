"""Ingestion service."""

from postcraft.core.exceptions import ValidationError
from postcraft.core.interfaces.collaborators import ContentSource
from postcraft.core.models.draft import IngestionReport
from postcraft.core.models.post import Post
from postcraft.pipelines.ingestion import IngestionPipeline


class IngestionService:
    """Service for getting a user's posts into the index."""

    def __init__(self, pipeline: IngestionPipeline) -> None:
        self._pipeline = pipeline

    async def ingest(self, user_id: str, posts: list[Post]) -> IngestionReport:
        return await self._pipeline.ingest(user_id, posts)

    async def ingest_texts(self, user_id: str, texts: list[str]) -> IngestionReport:
        """Ingest raw post texts typed in by hand. Blank entries are skipped."""
        posts = [Post.from_text(t.strip()) for t in texts if t and t.strip()]
        if not posts:
            raise ValidationError("At least one post text is required", details={"user_id": user_id})
        return await self._pipeline.ingest(user_id, posts)

    async def ingest_from_source(
        self,
        user_id: str,
        source: ContentSource,
        limit: int = 100,
    ) -> IngestionReport:
        """Pull posts from an external source and ingest them."""
        posts = await source.fetch_posts(user_id, limit=limit)
        if not posts:
            raise ValidationError("No posts found for user", details={"user_id": user_id})
        return await self._pipeline.ingest(user_id, posts)

    async def forget(self, user_id: str) -> None:
        """Delete everything stored for a user."""
        await self._pipeline.delete_user(user_id)
