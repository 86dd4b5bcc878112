"""Qdrant implementation of the vector repository."""

import math
from uuid import uuid4

import structlog
from qdrant_client import AsyncQdrantClient, models
from qdrant_client.http.exceptions import UnexpectedResponse

from postcraft.core.interfaces.repositories import VectorRepository
from postcraft.core.models.post import Post, SimilarPost
from postcraft.repositories.vector.base import (
    check_batch,
    check_page,
    check_top_k,
    check_vector,
)

logger = structlog.get_logger(__name__)


class QdrantRepository(VectorRepository):
    """Qdrant implementation for vector storage and search.

    Uses the async qdrant-client. All users share one collection; the
    ``user_id`` payload field partitions it and is indexed as a keyword.
    """

    def __init__(
        self,
        url: str = "http://localhost:6333",
        api_key: str | None = None,
        collection_name: str = "user_posts",
        dimensions: int = 1536,
        timeout: float = 30.0,
        client: AsyncQdrantClient | None = None,
    ) -> None:
        self._url = url
        self._api_key = api_key
        self._collection_name = collection_name
        self._dimensions = dimensions
        self._timeout = timeout
        self._client = client

    @property
    def dimensions(self) -> int:
        return self._dimensions

    @property
    def collection_name(self) -> str:
        return self._collection_name

    def _ensure_connected(self) -> AsyncQdrantClient:
        """Ensure Qdrant client is connected."""
        if self._client is None:
            self._client = AsyncQdrantClient(
                url=self._url,
                api_key=self._api_key,
                # The client takes whole seconds.
                timeout=max(1, math.ceil(self._timeout)),
            )
        return self._client

    @staticmethod
    def _user_filter(user_id: str) -> models.Filter:
        return models.Filter(
            must=[
                models.FieldCondition(
                    key="user_id",
                    match=models.MatchValue(value=user_id),
                )
            ]
        )

    async def ensure_collection(self) -> None:
        """Create the collection with cosine distance unless it exists."""
        client = self._ensure_connected()
        log = logger.bind(collection=self._collection_name)

        if await client.collection_exists(self._collection_name):
            log.info("qdrant.collection.exists")
            return

        try:
            await client.create_collection(
                collection_name=self._collection_name,
                vectors_config=models.VectorParams(
                    size=self._dimensions,
                    distance=models.Distance.COSINE,
                ),
            )
        except UnexpectedResponse as e:
            # Another caller created it between the check and the create.
            if e.status_code == 409:
                log.info("qdrant.collection.exists")
                return
            raise
        await client.create_payload_index(
            collection_name=self._collection_name,
            field_name="user_id",
            field_schema=models.PayloadSchemaType.KEYWORD,
        )
        log.info("qdrant.collection.created", dimensions=self._dimensions)

    async def upsert_one(self, user_id: str, post: Post, vector: list[float]) -> str:
        point_ids = await self.upsert_batch(user_id, [post], [vector])
        return point_ids[0]

    async def upsert_batch(
        self,
        user_id: str,
        posts: list[Post],
        vectors: list[list[float]],
    ) -> list[str]:
        """Upsert all points in one call; a store failure fails the whole batch."""
        check_batch(posts, vectors, self._dimensions)
        if not posts:
            return []

        client = self._ensure_connected()
        points = [
            models.PointStruct(
                id=str(uuid4()),
                vector=vector,
                payload=post.payload(user_id),
            )
            for post, vector in zip(posts, vectors, strict=True)
        ]
        await client.upsert(
            collection_name=self._collection_name,
            points=points,
            wait=True,
        )
        logger.info(
            "qdrant.upsert.done",
            collection=self._collection_name,
            user_id=user_id,
            count=len(points),
        )
        return [str(p.id) for p in points]

    async def find_similar(
        self,
        user_id: str,
        query_vector: list[float],
        top_k: int = 5,
        min_score: float = 0.0,
    ) -> list[SimilarPost]:
        """Exact nearest-neighbour search within one user's posts.

        ``min_score`` is sent to Qdrant as the score threshold and enforced
        again on the returned points.
        """
        check_top_k(top_k)
        check_vector(query_vector, self._dimensions)

        client = self._ensure_connected()
        response = await client.query_points(
            collection_name=self._collection_name,
            query=query_vector,
            query_filter=self._user_filter(user_id),
            limit=top_k,
            with_payload=True,
            score_threshold=min_score,
            search_params=models.SearchParams(exact=True),
        )

        results = [
            SimilarPost(post=Post.from_payload(point.payload or {}), similarity=point.score)
            for point in response.points
            if (point.payload or {}).get("user_id") == user_id and point.score >= min_score
        ]
        results.sort(key=lambda r: r.similarity, reverse=True)
        return results[:top_k]

    async def list_posts(self, user_id: str, limit: int = 50, offset: int = 0) -> list[Post]:
        """A page of the user's stored posts, newest first.

        Scroll has no payload ordering without a range index, so every point of
        the user is fetched and sorted here.
        """
        check_page(limit, offset)
        client = self._ensure_connected()

        posts: list[Post] = []
        next_offset = None
        while True:
            records, next_offset = await client.scroll(
                collection_name=self._collection_name,
                scroll_filter=self._user_filter(user_id),
                limit=256,
                offset=next_offset,
                with_payload=True,
                with_vectors=False,
            )
            posts.extend(Post.from_payload(record.payload or {}) for record in records)
            if next_offset is None:
                break

        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts[offset : offset + limit]

    async def delete_user(self, user_id: str) -> None:
        client = self._ensure_connected()
        await client.delete(
            collection_name=self._collection_name,
            points_selector=models.FilterSelector(filter=self._user_filter(user_id)),
            wait=True,
        )
        logger.info("qdrant.delete_user.done", collection=self._collection_name, user_id=user_id)

    async def count(self, user_id: str | None = None) -> int:
        client = self._ensure_connected()
        result = await client.count(
            collection_name=self._collection_name,
            count_filter=self._user_filter(user_id) if user_id is not None else None,
            exact=True,
        )
        return result.count

    async def get_collection_info(self) -> dict[str, int | str]:
        client = self._ensure_connected()
        info = await client.get_collection(self._collection_name)
        return {
            "name": self._collection_name,
            "status": str(info.status),
            "points_count": info.points_count or 0,
            "dimensions": self._dimensions,
        }

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None
