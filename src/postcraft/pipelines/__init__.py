"""Processing pipelines for postcraft."""

from postcraft.pipelines.ingestion import IngestionPipeline

__all__ = ["IngestionPipeline"]
