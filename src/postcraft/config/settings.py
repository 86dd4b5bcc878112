"""Application settings using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

# Output dimension of the OpenAI embedding models we know about.
EMBEDDING_DIMENSIONS: dict[str, int] = {
    "text-embedding-3-small": 1536,
    "text-embedding-3-large": 3072,
    "text-embedding-ada-002": 1536,
}

DEFAULT_EMBEDDING_DIMENSIONS = 1536


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="POSTCRAFT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # General
    # Forces DEBUG level and the console renderer
    debug: bool = False
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"

    # Timeout applied to every call to OpenAI and Qdrant, in seconds
    request_timeout: float = 30.0

    # OpenAI
    openai_api_key: str | None = None
    openai_base_url: str | None = None
    openai_embedding_model: str = "text-embedding-3-small"
    openai_chat_model: str = "gpt-4"

    # Embedding
    embedding_provider: str = "openai"
    embedding_dimensions: int | None = None
    embedding_chunk_size: int = 100
    embedding_chunk_delay: float = 0.5

    # Vector Store
    vector_store: str = "qdrant"

    # Qdrant
    qdrant_url: str = "http://localhost:6333"
    qdrant_api_key: str | None = None
    qdrant_collection: str = "user_posts"

    # Style profile store
    profile_store: str = "sql"
    database_url: str = "sqlite+aiosqlite:///./postcraft.db"

    # Draft generation
    draft_temperature: float = 0.8
    regenerate_temperature: float = 0.9
    draft_max_tokens: int = 500
    max_post_length: int = 280
    min_similarity: float = 0.3

    @property
    def vector_dimensions(self) -> int:
        """Vector size of the configured embedding model."""
        if self.embedding_dimensions is not None:
            return self.embedding_dimensions
        return EMBEDDING_DIMENSIONS.get(
            self.openai_embedding_model, DEFAULT_EMBEDDING_DIMENSIONS
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
