"""Post ingestion pipeline."""

from postcraft.pipelines.ingestion.pipeline import IngestionPipeline

__all__ = ["IngestionPipeline"]
