"""Domain models for postcraft."""

from postcraft.core.models.draft import DraftResult, IngestionReport
from postcraft.core.models.post import Post, SimilarPost
from postcraft.core.models.style import StyleProfile

__all__ = [
    "DraftResult",
    "IngestionReport",
    "Post",
    "SimilarPost",
    "StyleProfile",
]
