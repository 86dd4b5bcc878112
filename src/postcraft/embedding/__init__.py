"""Embedding generation module for postcraft."""

from postcraft.embedding.base import MAX_BATCH_SIZE, EmbeddingProvider
from postcraft.embedding.config import EmbeddingConfig
from postcraft.embedding.factory import EmbeddingProviderFactory
from postcraft.embedding.similarity import cosine_similarity

__all__ = [
    "MAX_BATCH_SIZE",
    "EmbeddingConfig",
    "EmbeddingProvider",
    "EmbeddingProviderFactory",
    "cosine_similarity",
]
