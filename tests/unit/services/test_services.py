"""Tests for the ingestion and draft services."""

import pytest

from postcraft.config import Settings
from postcraft.core.exceptions import ConfigurationError, NoHistoryError, ValidationError
from postcraft.core.models import Post
from postcraft.services import DraftService, IngestionService


class FakeSource:
    def __init__(self, posts):
        self.posts = posts
        self.requested: list[tuple[str, int]] = []

    async def fetch_posts(self, user_id, limit=100):
        self.requested.append((user_id, limit))
        return self.posts[:limit]


@pytest.fixture
def ingestion(pipeline):
    return IngestionService(pipeline)


@pytest.mark.unit
class TestIngestionService:
    async def test_ingest_texts_skips_blank_entries(self, ingestion, vector_repo) -> None:
        """Test that blank texts are skipped."""
        report = await ingestion.ingest_texts("alice", ["coffee time", "  ", "", " code day "])

        assert report.post_count == 2
        assert await vector_repo.count("alice") == 2

    async def test_ingest_texts_detects_features(self, ingestion, profiles) -> None:
        """Test that emoji and hashtags are detected from raw text."""
        await ingestion.ingest_texts("alice", ["coffee ☕ #morning", "plain"])

        stored = await profiles.get("alice")
        assert stored.emoji_frequency == pytest.approx(0.5)
        assert stored.hashtag_frequency == pytest.approx(0.5)

    async def test_ingest_texts_requires_text(self, ingestion) -> None:
        """Test that only blank texts are rejected."""
        with pytest.raises(ValidationError):
            await ingestion.ingest_texts("alice", [" ", ""])

    async def test_ingest_from_source(self, ingestion, vector_repo) -> None:
        """Test ingesting posts fetched from a post source."""
        source = FakeSource([Post.from_text(f"coffee {i}") for i in range(3)])

        report = await ingestion.ingest_from_source("alice", source, limit=2)

        assert source.requested == [("alice", 2)]
        assert report.post_count == 2
        assert await vector_repo.count("alice") == 2

    async def test_ingest_from_empty_source(self, ingestion) -> None:
        """Test that an empty source is rejected."""
        with pytest.raises(ValidationError):
            await ingestion.ingest_from_source("alice", FakeSource([]))


def _memory_settings(**overrides) -> Settings:
    values = {
        "vector_store": "memory",
        "profile_store": "memory",
        "embedding_dimensions": 3,
        "openai_api_key": "test",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
async def service(embedding_provider, chat_model):
    svc = await DraftService.from_settings(
        _memory_settings(),
        embedding_provider=embedding_provider,
        chat_model=chat_model,
    )
    yield svc
    await svc.close()


@pytest.mark.unit
class TestDraftService:
    async def test_end_to_end(self, service, chat_model) -> None:
        """Test init, ingest, generate and regenerate on one stack."""
        info = await service.init()
        assert info["points_count"] == 0

        await service.ingest_texts("alice", ["coffee first ☕", "coffee again", "travel soon"])
        result = await service.generate("alice", "coffee musings", num_variations=2)

        assert result.drafts == ["Draft one", "Draft two"]
        assert len(result.similar_posts) == 2
        assert result.style_profile.posts_analyzed == 3

        drafts = await service.regenerate("alice", "coffee musings", result.drafts)
        assert len(drafts) == 3
        assert chat_model.calls[-1]["temperature"] == 0.9

    async def test_profile_lookup(self, service) -> None:
        """Test that a profile exists only after ingestion."""
        assert await service.get_profile("alice") is None

        await service.ingest("alice", [Post.from_text("coffee")])

        assert (await service.get_profile("alice")).posts_analyzed == 1

    async def test_list_posts(self, service) -> None:
        """Test paging through a user's stored posts."""
        await service.ingest(
            "alice",
            [
                Post.from_text("coffee", created_at="2024-01-01T09:00:00+00:00"),
                Post.from_text("travel", created_at="2024-02-01T09:00:00+00:00"),
            ],
        )
        await service.ingest_texts("bob", ["code"])

        posts = await service.list_posts("alice", limit=1)

        assert [p.text for p in posts] == ["travel"]
        assert [p.text for p in await service.list_posts("alice", offset=1)] == ["coffee"]

    async def test_forget(self, service) -> None:
        """Test that forget removes posts and profile."""
        await service.ingest_texts("alice", ["coffee"])

        await service.forget("alice")

        assert await service.get_profile("alice") is None
        with pytest.raises(NoHistoryError):
            await service.generate("alice", "coffee")

    async def test_unknown_vector_store(self, embedding_provider, chat_model) -> None:
        """Test that an unknown vector store is a configuration error."""
        with pytest.raises(ConfigurationError):
            await DraftService.from_settings(
                _memory_settings(vector_store="pinecone"),
                embedding_provider=embedding_provider,
                chat_model=chat_model,
            )
