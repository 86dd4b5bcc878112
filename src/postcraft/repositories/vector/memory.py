"""In-memory vector repository.

Exact cosine search over numpy arrays. Used for local runs without a Qdrant
server and in tests; it honours the same contract as QdrantRepository.
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import uuid4

import numpy as np
import structlog

from postcraft.core.interfaces.repositories import VectorRepository
from postcraft.core.models.post import Post, SimilarPost
from postcraft.repositories.vector.base import (
    check_batch,
    check_page,
    check_top_k,
    check_vector,
)

logger = structlog.get_logger(__name__)


@dataclass
class _Point:
    id: str
    user_id: str
    vector: np.ndarray
    post: Post


class InMemoryVectorRepository(VectorRepository):
    """Vector index held in process memory."""

    def __init__(self, dimensions: int = 1536, collection_name: str = "user_posts") -> None:
        self._dimensions = dimensions
        self._collection_name = collection_name
        self._points: dict[str, _Point] = {}
        self._created = False

    @property
    def dimensions(self) -> int:
        return self._dimensions

    async def ensure_collection(self) -> None:
        if self._created:
            logger.info("memory.collection.exists", collection=self._collection_name)
            return
        self._created = True
        logger.info(
            "memory.collection.created",
            collection=self._collection_name,
            dimensions=self._dimensions,
        )

    async def upsert_one(self, user_id: str, post: Post, vector: list[float]) -> str:
        point_ids = await self.upsert_batch(user_id, [post], [vector])
        return point_ids[0]

    async def upsert_batch(
        self,
        user_id: str,
        posts: list[Post],
        vectors: list[list[float]],
    ) -> list[str]:
        check_batch(posts, vectors, self._dimensions)

        point_ids = []
        for post, vector in zip(posts, vectors, strict=True):
            point_id = str(uuid4())
            self._points[point_id] = _Point(
                id=point_id,
                user_id=user_id,
                vector=np.asarray(vector, dtype=np.float64),
                post=post,
            )
            point_ids.append(point_id)
        return point_ids

    async def find_similar(
        self,
        user_id: str,
        query_vector: list[float],
        top_k: int = 5,
        min_score: float = 0.0,
    ) -> list[SimilarPost]:
        check_top_k(top_k)
        check_vector(query_vector, self._dimensions)

        candidates = [p for p in self._points.values() if p.user_id == user_id]
        if not candidates:
            return []

        query = np.asarray(query_vector, dtype=np.float64)
        matrix = np.stack([p.vector for p in candidates])
        norms = np.linalg.norm(matrix, axis=1) * np.linalg.norm(query)
        dots = matrix @ query
        # Zero-norm vectors score 0 rather than NaN.
        scores = np.divide(dots, norms, out=np.zeros_like(dots), where=norms > 0)

        results = [
            SimilarPost(post=point.post, similarity=float(score))
            for point, score in zip(candidates, scores, strict=True)
            if score >= min_score
        ]
        results.sort(key=lambda r: r.similarity, reverse=True)
        return results[:top_k]

    async def list_posts(self, user_id: str, limit: int = 50, offset: int = 0) -> list[Post]:
        check_page(limit, offset)
        posts = [p.post for p in self._points.values() if p.user_id == user_id]
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts[offset : offset + limit]

    async def delete_user(self, user_id: str) -> None:
        for point_id in [pid for pid, p in self._points.items() if p.user_id == user_id]:
            del self._points[point_id]

    async def count(self, user_id: str | None = None) -> int:
        if user_id is None:
            return len(self._points)
        return sum(1 for p in self._points.values() if p.user_id == user_id)

    async def get_collection_info(self) -> dict[str, int | str]:
        return {
            "name": self._collection_name,
            "status": "green" if self._created else "missing",
            "points_count": len(self._points),
            "dimensions": self._dimensions,
        }

    async def close(self) -> None:
        return None
