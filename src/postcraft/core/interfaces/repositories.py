"""Repository protocols."""

from typing import Protocol

from postcraft.core.models.post import Post, SimilarPost
from postcraft.core.models.style import StyleProfile


class VectorRepository(Protocol):
    """Protocol for the vector store (Qdrant or in-memory).

    All users share one collection; every point is tagged with ``user_id``
    and every query is filtered on it.
    """

    @property
    def dimensions(self) -> int:
        """Vector size declared for the collection."""
        ...

    async def ensure_collection(self) -> None:
        """Create the collection if it does not exist yet."""
        ...

    async def upsert_one(self, user_id: str, post: Post, vector: list[float]) -> str:
        """Store one post. Returns the generated point id."""
        ...

    async def upsert_batch(
        self,
        user_id: str,
        posts: list[Post],
        vectors: list[list[float]],
    ) -> list[str]:
        """Store posts in a single upsert call. Returns point ids in input order."""
        ...

    async def find_similar(
        self,
        user_id: str,
        query_vector: list[float],
        top_k: int = 5,
        min_score: float = 0.0,
    ) -> list[SimilarPost]:
        """Nearest posts of one user, best first, all scoring >= min_score."""
        ...

    async def list_posts(self, user_id: str, limit: int = 50, offset: int = 0) -> list[Post]:
        """A page of the user's stored posts, newest first by ``created_at``."""
        ...

    async def delete_user(self, user_id: str) -> None:
        """Delete every point tagged with the user."""
        ...

    async def count(self, user_id: str | None = None) -> int:
        """Number of stored points, optionally for one user."""
        ...

    async def get_collection_info(self) -> dict[str, int | str]:
        """Get information about the collection."""
        ...

    async def close(self) -> None: ...


class StyleProfileRepository(Protocol):
    """Protocol for the style profile store, keyed by ``user_id``."""

    async def get(self, user_id: str) -> StyleProfile | None:
        """Get a profile, or None when the user has none yet."""
        ...

    async def upsert(self, profile: StyleProfile) -> StyleProfile:
        """Insert or fully overwrite the user's profile."""
        ...

    async def delete(self, user_id: str) -> bool:
        """Delete a profile. Returns True if one existed."""
        ...

    async def close(self) -> None: ...
