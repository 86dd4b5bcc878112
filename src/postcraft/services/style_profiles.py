"""Style profile computation and storage."""

import structlog

from postcraft.core.exceptions import ValidationError
from postcraft.core.interfaces.repositories import StyleProfileRepository
from postcraft.core.models.post import Post
from postcraft.core.models.style import (
    DEFAULT_SENTENCE_STRUCTURE,
    DEFAULT_TONE,
    StyleProfile,
)

logger = structlog.get_logger(__name__)


def compute_style_profile(user_id: str, posts: list[Post]) -> StyleProfile:
    """Aggregate a batch of posts into a style profile.

    ``avg_length`` is the rounded mean post length; the frequencies are the
    fraction of posts using emoji / hashtags. Tone and sentence structure are
    fixed defaults: no inference is done on them.
    """
    if not posts:
        raise ValidationError(
            "Cannot compute a style profile from zero posts",
            details={"user_id": user_id},
        )

    total = len(posts)
    return StyleProfile(
        user_id=user_id,
        avg_length=round(sum(p.length for p in posts) / total),
        emoji_frequency=sum(1 for p in posts if p.has_emoji) / total,
        hashtag_frequency=sum(1 for p in posts if p.has_hashtag) / total,
        tone=DEFAULT_TONE,
        sentence_structure=DEFAULT_SENTENCE_STRUCTURE,
        posts_analyzed=total,
    )


class StyleProfileService:
    """Recomputes and serves per-user style profiles."""

    def __init__(self, repository: StyleProfileRepository) -> None:
        self._repository = repository

    async def recompute(self, user_id: str, posts: list[Post]) -> StyleProfile:
        """Compute a profile from ``posts`` and overwrite the stored one."""
        profile = compute_style_profile(user_id, posts)
        await self._repository.upsert(profile)
        logger.info(
            "profile.recomputed",
            user_id=user_id,
            posts=profile.posts_analyzed,
            avg_length=profile.avg_length,
        )
        return profile

    async def get(self, user_id: str) -> StyleProfile | None:
        """Return the user's profile, or None if none was computed yet."""
        return await self._repository.get(user_id)

    async def delete(self, user_id: str) -> bool:
        return await self._repository.delete(user_id)
