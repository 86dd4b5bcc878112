"""Configuration module for postcraft."""

from postcraft.config.logging import configure_logging, get_logger
from postcraft.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_logger", "get_settings"]
