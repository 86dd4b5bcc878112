"""Core interfaces (protocols) for postcraft."""

from postcraft.core.interfaces.collaborators import ChatModel, ContentSource
from postcraft.core.interfaces.repositories import (
    StyleProfileRepository,
    VectorRepository,
)

__all__ = [
    "ChatModel",
    "ContentSource",
    "StyleProfileRepository",
    "VectorRepository",
]
