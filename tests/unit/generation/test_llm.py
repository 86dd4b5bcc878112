"""Tests for the OpenAI chat model."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from postcraft.core.exceptions import ProviderError
from postcraft.generation import OpenAIChatModel


def _client(*contents):
    client = MagicMock()
    client.chat.completions.create = AsyncMock(
        return_value=SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content=c)) for c in contents]
        )
    )
    return client


@pytest.mark.unit
class TestOpenAIChatModel:
    async def test_sends_system_and_user_messages(self) -> None:
        """Test the chat completion request and returned text."""
        client = _client("one\n\ntwo")
        model = OpenAIChatModel(model="gpt-4", client=client)

        text = await model.complete("system text", "user text", temperature=0.8, max_tokens=500)

        assert text == "one\n\ntwo"
        client.chat.completions.create.assert_awaited_once_with(
            model="gpt-4",
            messages=[
                {"role": "system", "content": "system text"},
                {"role": "user", "content": "user text"},
            ],
            temperature=0.8,
            max_tokens=500,
        )

    async def test_no_choices(self) -> None:
        """Test that a response without choices is a provider error."""
        model = OpenAIChatModel(client=_client())

        with pytest.raises(ProviderError):
            await model.complete("s", "u", temperature=0.8, max_tokens=10)

    async def test_empty_content(self) -> None:
        """Test that empty message content becomes an empty string."""
        model = OpenAIChatModel(client=_client(None))

        assert await model.complete("s", "u", temperature=0.8, max_tokens=10) == ""
