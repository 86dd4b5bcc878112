"""In-memory style profile repository."""

from postcraft.core.interfaces.repositories import StyleProfileRepository
from postcraft.core.models.style import StyleProfile


class InMemoryStyleProfileRepository(StyleProfileRepository):
    """Profiles kept in a dict keyed by user id."""

    def __init__(self) -> None:
        self._profiles: dict[str, StyleProfile] = {}

    async def get(self, user_id: str) -> StyleProfile | None:
        return self._profiles.get(user_id)

    async def upsert(self, profile: StyleProfile) -> StyleProfile:
        self._profiles[profile.user_id] = profile
        return profile

    async def delete(self, user_id: str) -> bool:
        return self._profiles.pop(user_id, None) is not None

    async def close(self) -> None:
        return None
