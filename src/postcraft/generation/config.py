"""Draft generation configuration."""

from pydantic import BaseModel, ConfigDict, Field


class GenerationConfig(BaseModel):
    """Sampling and filtering knobs for draft generation."""

    model_config = ConfigDict(frozen=True)

    temperature: float = Field(default=0.8, ge=0.0, le=2.0)
    regenerate_temperature: float = Field(default=0.9, ge=0.0, le=2.0)
    max_tokens: int = Field(default=500, ge=1)
    max_length: int = Field(default=280, ge=1, description="Max characters per draft")
    min_similarity: float = Field(
        default=0.3, ge=-1.0, le=1.0, description="Minimum similarity of example posts"
    )
    regenerate_top_k: int = Field(default=5, ge=1)
    regenerate_variations: int = Field(default=3, ge=1)
