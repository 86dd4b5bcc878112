"""Style profile repository implementations."""

from postcraft.repositories.profile.memory import InMemoryStyleProfileRepository
from postcraft.repositories.profile.sql import SQLStyleProfileRepository

__all__ = ["InMemoryStyleProfileRepository", "SQLStyleProfileRepository"]
