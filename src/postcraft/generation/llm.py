"""OpenAI chat completion backend."""

from openai import AsyncOpenAI

from postcraft.core.exceptions import ProviderError
from postcraft.core.interfaces.collaborators import ChatModel


class OpenAIChatModel(ChatModel):
    """Chat model backed by the OpenAI chat completions API.

    SDK errors (rate limiting, auth) propagate as raised by the SDK. The
    client does not retry.
    """

    def __init__(
        self,
        model: str = "gpt-4",
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float = 30.0,
        client: AsyncOpenAI | None = None,
    ) -> None:
        self._model = model
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout
        self._client = client

    @property
    def model_name(self) -> str:
        return self._model

    def _ensure_client(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = AsyncOpenAI(
                api_key=self._api_key,
                base_url=self._base_url,
                timeout=self._timeout,
                max_retries=0,
            )
        return self._client

    async def complete(
        self,
        system: str,
        user: str,
        *,
        temperature: float,
        max_tokens: int,
    ) -> str:
        client = self._ensure_client()
        response = await client.chat.completions.create(
            model=self._model,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            temperature=temperature,
            max_tokens=max_tokens,
        )
        if not response.choices:
            raise ProviderError(
                "Chat completion returned no choices",
                details={"model": self._model},
            )
        return response.choices[0].message.content or ""

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None
