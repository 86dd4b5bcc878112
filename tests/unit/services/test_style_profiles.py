"""Tests for style profile computation and the profile repositories."""

import pytest

from postcraft.core.exceptions import RepositoryError, ValidationError
from postcraft.core.models import Post
from postcraft.repositories.profile import (
    InMemoryStyleProfileRepository,
    SQLStyleProfileRepository,
)
from postcraft.services.style_profiles import StyleProfileService, compute_style_profile

ALICE_POSTS = [
    "Coffee first ☕",
    "Shipping the new release today #buildinpublic",
    "Tired but happy 😴",
    "Reading about vector search",
    "Weekend plans: nothing at all",
]


def _posts(texts):
    return [Post.from_text(t) for t in texts]


@pytest.mark.unit
class TestComputeStyleProfile:
    def test_aggregates_batch(self) -> None:
        """Test aggregating a batch into a style profile."""
        posts = _posts(ALICE_POSTS)

        profile = compute_style_profile("alice", posts)

        expected_avg = round(sum(len(t) for t in ALICE_POSTS) / len(ALICE_POSTS))
        assert profile.user_id == "alice"
        assert profile.avg_length == expected_avg
        assert profile.emoji_frequency == pytest.approx(0.4)
        assert profile.hashtag_frequency == pytest.approx(0.2)
        assert profile.tone == "casual"
        assert profile.sentence_structure == "1-2 sentences"
        assert profile.posts_analyzed == 5

    def test_empty_batch_rejected(self) -> None:
        """Test that an empty batch is rejected."""
        with pytest.raises(ValidationError):
            compute_style_profile("alice", [])


@pytest.fixture(params=["memory", "sql"])
async def profile_store(request, tmp_path):
    if request.param == "memory":
        repository = InMemoryStyleProfileRepository()
    else:
        repository = SQLStyleProfileRepository(
            f"sqlite+aiosqlite:///{tmp_path / 'profiles.db'}"
        )
    yield repository
    await repository.close()


@pytest.mark.unit
class TestStyleProfileService:
    async def test_get_missing_profile(self, profile_store) -> None:
        """Test that an unknown user has no profile."""
        service = StyleProfileService(profile_store)

        assert await service.get("nobody") is None

    async def test_recompute_persists(self, profile_store) -> None:
        """Test that a recomputed profile is stored."""
        service = StyleProfileService(profile_store)

        created = await service.recompute("alice", _posts(ALICE_POSTS))
        stored = await service.get("alice")

        assert stored is not None
        assert stored.avg_length == created.avg_length
        assert stored.emoji_frequency == pytest.approx(0.4)
        assert stored.posts_analyzed == 5

    async def test_recompute_overwrites_previous_batch(self, profile_store) -> None:
        """Test that a new batch replaces the previous profile."""
        service = StyleProfileService(profile_store)
        await service.recompute("alice", _posts(ALICE_POSTS))

        await service.recompute("alice", _posts(["plain text", "more plain text"]))
        stored = await service.get("alice")

        assert stored.posts_analyzed == 2
        assert stored.emoji_frequency == 0.0
        assert stored.hashtag_frequency == 0.0
        assert stored.avg_length == round((10 + 15) / 2)

    async def test_profiles_are_per_user(self, profile_store) -> None:
        """Test that profiles are kept per user."""
        service = StyleProfileService(profile_store)
        await service.recompute("alice", _posts(ALICE_POSTS))

        assert await service.get("bob") is None

    async def test_delete(self, profile_store) -> None:
        """Test deleting a profile reports whether one existed."""
        service = StyleProfileService(profile_store)
        await service.recompute("alice", _posts(ALICE_POSTS))

        assert await service.delete("alice") is True
        assert await service.get("alice") is None
        assert await service.delete("alice") is False


@pytest.mark.unit
async def test_sql_errors_raise_repository_error(tmp_path) -> None:
    """Test that database errors surface as RepositoryError."""
    repository = SQLStyleProfileRepository(
        f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'dir' / 'profiles.db'}"
    )

    with pytest.raises(RepositoryError) as exc_info:
        await repository.get("alice")

    assert exc_info.value.details == {"user_id": "alice"}
    await repository.close()
