"""Business logic services for postcraft."""

from postcraft.services.drafts import DraftService
from postcraft.services.ingestion import IngestionService
from postcraft.services.style_profiles import StyleProfileService, compute_style_profile

__all__ = [
    "DraftService",
    "IngestionService",
    "StyleProfileService",
    "compute_style_profile",
]
