"""Style profile model."""

from datetime import UTC, datetime

from pydantic import BaseModel, Field

DEFAULT_TONE = "casual"
DEFAULT_SENTENCE_STRUCTURE = "1-2 sentences"


class StyleProfile(BaseModel):
    """Aggregate writing statistics for one user.

    One profile per user. It is recomputed from the latest ingested batch
    and replaces the previous one; batches are never merged.
    """

    user_id: str
    avg_length: int = Field(ge=0)
    emoji_frequency: float = Field(ge=0.0, le=1.0)
    hashtag_frequency: float = Field(ge=0.0, le=1.0)
    tone: str = DEFAULT_TONE
    sentence_structure: str = DEFAULT_SENTENCE_STRUCTURE
    posts_analyzed: int = Field(default=0, ge=0)
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
