"""Draft generation and ingestion result models."""

from pydantic import BaseModel, Field

from postcraft.core.models.post import SimilarPost
from postcraft.core.models.style import StyleProfile


class DraftResult(BaseModel):
    """Outcome of one generation request. Not persisted as a whole."""

    drafts: list[str]
    similar_posts: list[SimilarPost]
    style_profile: StyleProfile | None = None
    confidence: float = Field(ge=0.0, le=1.0)


class IngestionReport(BaseModel):
    """Outcome of ingesting a batch of posts for a user."""

    user_id: str
    post_count: int
    point_ids: list[str] = Field(default_factory=list)
    style_profile: StyleProfile | None = None
