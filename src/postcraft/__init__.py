"""Post-style-conditioned draft generation."""

__version__ = "0.1.0"
