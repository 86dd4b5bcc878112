"""Repository implementations for postcraft."""

from postcraft.repositories.factory import RepositoryFactory

__all__ = ["RepositoryFactory"]
