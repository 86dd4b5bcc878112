"""Draft generation for postcraft."""

from postcraft.generation.config import GenerationConfig
from postcraft.generation.confidence import compute_confidence, confidence_score
from postcraft.generation.generator import DraftGenerator, parse_drafts
from postcraft.generation.llm import OpenAIChatModel

__all__ = [
    "DraftGenerator",
    "GenerationConfig",
    "OpenAIChatModel",
    "compute_confidence",
    "confidence_score",
    "parse_drafts",
]
