"""Vector repository implementations."""

from postcraft.repositories.vector.memory import InMemoryVectorRepository
from postcraft.repositories.vector.qdrant import QdrantRepository

__all__ = ["InMemoryVectorRepository", "QdrantRepository"]
