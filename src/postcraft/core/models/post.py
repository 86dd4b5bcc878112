"""Post and retrieval result models."""

from datetime import UTC, datetime
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from postcraft.utils.text import has_emoji, has_hashtag


def _now_iso() -> str:
    return datetime.now(UTC).isoformat()


class Post(BaseModel):
    """A single short social post with its style metadata.

    Posts are immutable once stored; re-collecting a post stores it again
    under a fresh point id rather than mutating the stored copy.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    text: str
    created_at: str = Field(default_factory=_now_iso)
    engagement_score: float = 0
    has_emoji: bool = False
    has_hashtag: bool = False
    length: int = 0

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        id: str | None = None,
        created_at: str | None = None,
        engagement_score: float = 0,
    ) -> "Post":
        """Build a post from raw text, detecting emoji and hashtags."""
        fields: dict = {
            "text": text,
            "engagement_score": engagement_score,
            "has_emoji": has_emoji(text),
            "has_hashtag": has_hashtag(text),
            "length": len(text),
        }
        if id is not None:
            fields["id"] = id
        if created_at is not None:
            fields["created_at"] = created_at
        return cls(**fields)

    def payload(self, user_id: str) -> dict[str, str | int | float | bool]:
        """Metadata stored next to the post's vector."""
        return {
            "user_id": user_id,
            "post_id": self.id,
            "text": self.text,
            "created_at": self.created_at,
            "engagement_score": self.engagement_score,
            "has_emoji": self.has_emoji,
            "has_hashtag": self.has_hashtag,
            "length": self.length,
        }

    @classmethod
    def from_payload(cls, payload: dict) -> "Post":
        return cls(
            id=str(payload.get("post_id", "")),
            text=payload.get("text", ""),
            created_at=payload.get("created_at", ""),
            engagement_score=payload.get("engagement_score", 0) or 0,
            has_emoji=bool(payload.get("has_emoji", False)),
            has_hashtag=bool(payload.get("has_hashtag", False)),
            length=int(payload.get("length", 0) or 0),
        )


class SimilarPost(BaseModel):
    """A stored post paired with its cosine similarity to a query."""

    post: Post
    similarity: float
