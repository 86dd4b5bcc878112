"""Repository factory for creating repository instances."""

from typing import TYPE_CHECKING

from postcraft.core.exceptions import ConfigurationError
from postcraft.core.interfaces.repositories import (
    StyleProfileRepository,
    VectorRepository,
)

if TYPE_CHECKING:
    from postcraft.config.settings import Settings


class RepositoryFactory:
    """Factory for creating repository instances.

    Creates the appropriate repository implementations based on
    configuration settings, once per factory.
    """

    def __init__(self, settings: "Settings") -> None:
        self._settings = settings
        self._vector: VectorRepository | None = None
        self._profiles: StyleProfileRepository | None = None

    async def get_vector_repository(self) -> VectorRepository:
        """Get or create the vector repository."""
        if self._vector is None:
            vector_store = self._settings.vector_store.lower()

            if vector_store == "qdrant":
                from postcraft.repositories.vector.qdrant import QdrantRepository

                self._vector = QdrantRepository(
                    url=self._settings.qdrant_url,
                    api_key=self._settings.qdrant_api_key,
                    collection_name=self._settings.qdrant_collection,
                    dimensions=self._settings.vector_dimensions,
                    timeout=self._settings.request_timeout,
                )
            elif vector_store == "memory":
                from postcraft.repositories.vector.memory import InMemoryVectorRepository

                self._vector = InMemoryVectorRepository(
                    dimensions=self._settings.vector_dimensions,
                    collection_name=self._settings.qdrant_collection,
                )
            else:
                raise ConfigurationError(
                    f"Unknown vector store: {vector_store}",
                    details={"vector_store": vector_store},
                )

        return self._vector

    async def get_profile_repository(self) -> StyleProfileRepository:
        """Get or create the style profile repository."""
        if self._profiles is None:
            profile_store = self._settings.profile_store.lower()

            if profile_store == "sql":
                from postcraft.repositories.profile.sql import SQLStyleProfileRepository

                self._profiles = SQLStyleProfileRepository(
                    database_url=self._settings.database_url,
                )
            elif profile_store == "memory":
                from postcraft.repositories.profile.memory import (
                    InMemoryStyleProfileRepository,
                )

                self._profiles = InMemoryStyleProfileRepository()
            else:
                raise ConfigurationError(
                    f"Unknown profile store: {profile_store}",
                    details={"profile_store": profile_store},
                )

        return self._profiles

    async def close(self) -> None:
        """Close all repository connections."""
        if self._vector is not None:
            await self._vector.close()
        if self._profiles is not None:
            await self._profiles.close()
        self._vector = None
        self._profiles = None
