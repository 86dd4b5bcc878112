"""Tests for core domain models."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from postcraft.core.exceptions import DimensionMismatchError, NoHistoryError, ProviderError
from postcraft.core.models import DraftResult, Post, SimilarPost, StyleProfile


@pytest.mark.unit
class TestPost:
    """Tests for Post model."""

    def test_from_text_detects_features(self) -> None:
        """Test that emoji, hashtags and length are derived from the text."""
        post = Post.from_text("Morning coffee ☕ #coffee")

        assert post.has_emoji is True
        assert post.has_hashtag is True
        assert post.length == len("Morning coffee ☕ #coffee")
        assert post.engagement_score == 0
        assert post.id

    def test_from_text_plain(self) -> None:
        """Test a post with neither emoji nor hashtag."""
        post = Post.from_text("Just shipped a release")

        assert post.has_emoji is False
        assert post.has_hashtag is False

    def test_ids_are_unique(self) -> None:
        """Test that each post gets its own id."""
        assert Post.from_text("a").id != Post.from_text("a").id

    def test_post_is_immutable(self) -> None:
        """Test that stored posts cannot be mutated."""
        post = Post.from_text("hello")

        with pytest.raises(PydanticValidationError):
            post.text = "changed"

    def test_payload_round_trip(self) -> None:
        """Test payload carries user id and restores the post fields."""
        post = Post.from_text(
            "Deploy day 🚀",
            id="p1",
            created_at="2024-01-01T00:00:00+00:00",
            engagement_score=12,
        )

        payload = post.payload("alice")

        assert payload["user_id"] == "alice"
        assert payload["post_id"] == "p1"
        assert Post.from_payload(payload) == post


@pytest.mark.unit
class TestStyleProfile:
    """Tests for StyleProfile model."""

    def test_defaults(self) -> None:
        """Test default tone and sentence structure."""
        profile = StyleProfile(
            user_id="alice",
            avg_length=80,
            emoji_frequency=0.4,
            hashtag_frequency=0.0,
        )

        assert profile.tone == "casual"
        assert profile.sentence_structure == "1-2 sentences"
        assert profile.updated_at is not None

    def test_frequency_bounds(self) -> None:
        """Test that frequencies outside [0, 1] are rejected."""
        with pytest.raises(PydanticValidationError):
            StyleProfile(
                user_id="alice",
                avg_length=80,
                emoji_frequency=1.5,
                hashtag_frequency=0.0,
            )


@pytest.mark.unit
class TestDraftResult:
    """Tests for DraftResult model."""

    def test_confidence_bounds(self) -> None:
        """Test that confidence must lie in [0, 1]."""
        similar = [SimilarPost(post=Post.from_text("x"), similarity=0.9)]

        with pytest.raises(PydanticValidationError):
            DraftResult(drafts=[], similar_posts=similar, confidence=1.2)


@pytest.mark.unit
class TestExceptions:
    """Tests for the error taxonomy."""

    def test_no_history_names_user(self) -> None:
        error = NoHistoryError("alice")

        assert "alice" in error.message
        assert error.details == {"user_id": "alice"}

    def test_dimension_mismatch_is_provider_error(self) -> None:
        error = DimensionMismatchError(expected=1536, actual=3)

        assert isinstance(error, ProviderError)
        assert error.details == {"expected": 1536, "actual": 3}
