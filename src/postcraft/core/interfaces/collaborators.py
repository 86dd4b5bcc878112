"""Protocols for external collaborators: the chat model and content sources."""

from typing import Protocol

from postcraft.core.models.post import Post


class ChatModel(Protocol):
    """A chat completion backend returning one text completion per call."""

    @property
    def model_name(self) -> str: ...

    async def complete(
        self,
        system: str,
        user: str,
        *,
        temperature: float,
        max_tokens: int,
    ) -> str:
        """Send a system + user message pair and return the completion text."""
        ...


class ContentSource(Protocol):
    """Black-box producer of a user's posts (timeline API, feed crawler...)."""

    async def fetch_posts(self, user_id: str, limit: int = 100) -> list[Post]: ...
