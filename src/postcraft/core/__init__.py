"""Core domain models and interfaces for postcraft."""

from postcraft.core.exceptions import (
    ConfigurationError,
    DimensionMismatchError,
    NoHistoryError,
    PipelineError,
    PostcraftError,
    ProviderError,
    RepositoryError,
    ValidationError,
)
from postcraft.core.models import (
    DraftResult,
    IngestionReport,
    Post,
    SimilarPost,
    StyleProfile,
)

__all__ = [
    # Models
    "Post",
    "SimilarPost",
    "StyleProfile",
    "DraftResult",
    "IngestionReport",
    # Exceptions
    "PostcraftError",
    "ConfigurationError",
    "ValidationError",
    "NoHistoryError",
    "ProviderError",
    "DimensionMismatchError",
    "RepositoryError",
    "PipelineError",
]
