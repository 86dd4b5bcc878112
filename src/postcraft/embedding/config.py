"""Embedding configuration."""

from pydantic import BaseModel, ConfigDict, Field


class EmbeddingConfig(BaseModel):
    """Configuration for embedding generation."""

    model_config = ConfigDict(frozen=True)

    # Provider selection
    provider: str = Field(default="openai", description="Embedding provider (openai)")

    # OpenAI settings
    openai_model: str = Field(
        default="text-embedding-3-small", description="OpenAI embedding model"
    )
    openai_dimensions: int = Field(
        default=1536, description="Embedding dimensions for OpenAI"
    )
    api_key: str | None = Field(default=None, description="OpenAI API key")
    base_url: str | None = Field(default=None, description="OpenAI-compatible base URL")
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")

    # Batch settings
    chunk_size: int = Field(default=100, ge=1, le=2048, description="Posts per embedding call")
    chunk_delay: float = Field(
        default=0.5, ge=0, description="Seconds to wait between embedding chunks"
    )
