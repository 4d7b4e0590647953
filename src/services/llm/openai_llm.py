"""OpenAI chat-completions provider used for prompt expansion."""

import logging

from openai import AsyncOpenAI

from src.core.config import get_settings
from src.services.llm.base import BaseLLM
from src.services.openai_client import (
    create_openai_client,
    require_client,
    translate_openai_error,
)

logger = logging.getLogger(__name__)


class OpenAILLM(BaseLLM):
    """Chat model behind ``client.chat.completions``.

    One request per call, no retry: prompt expansion is a small JSON
    round-trip and failures go straight back to the caller.
    """

    def __init__(
        self,
        client: AsyncOpenAI | None = None,
        model: str | None = None,
        settings=None,
    ) -> None:
        self._settings = settings or get_settings()
        self._client = client or create_openai_client(self._settings.openai_api_key)
        self._model = model or self._settings.openai_chat_model

    async def generate(self, prompt: str, **kwargs) -> str:
        client = require_client(self._client)
        system = kwargs.pop("system", None)

        messages: list[dict[str, str]] = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        try:
            response = await client.chat.completions.create(
                model=self._model,
                messages=messages,
                **kwargs,
            )
        except Exception as exc:
            raise translate_openai_error(exc, "chat completion") from exc
        return response.choices[0].message.content or ""
