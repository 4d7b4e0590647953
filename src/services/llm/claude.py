"""
Claude LLM provider implementation.

Uses the Anthropic Python SDK (``anthropic.AsyncAnthropic``) as an alternative
backend for prompt expansion. SDK exceptions are translated to the same
``ConnectivityError`` / ``ProviderError`` pair the OpenAI providers raise.
"""

import logging

from anthropic import APIConnectionError, APIError, AsyncAnthropic

from src.core.config import get_settings
from src.core.exceptions import ConnectivityError, ProviderError
from src.services.llm.base import BaseLLM

logger = logging.getLogger(__name__)


class ClaudeLLM(BaseLLM):
    """Claude API LLM provider."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        max_tokens: int = 1024,
        temperature: float = 0.7,
        settings=None,
    ) -> None:
        settings = settings or get_settings()
        self._api_key = api_key or settings.claude_api_key
        self._model = model or settings.claude_model
        self._max_tokens = max_tokens
        self._temperature = temperature
        # One request per call; no SDK-level retries
        self._client = AsyncAnthropic(api_key=self._api_key, max_retries=0)

    async def _call_api(
        self,
        user_prompt: str,
        system: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> str:
        """Send a single request to Claude and return the first text block."""
        if not self._api_key:
            raise ProviderError("CLAUDE_API_KEY is not configured")
        try:
            kwargs: dict = {
                "model": self._model,
                "max_tokens": max_tokens or self._max_tokens,
                "temperature": temperature if temperature is not None else self._temperature,
                "messages": [{"role": "user", "content": user_prompt}],
            }
            if system:
                kwargs["system"] = system

            response = await self._client.messages.create(**kwargs)
            return response.content[0].text if response.content else ""

        # APITimeoutError is a subclass of APIConnectionError
        except APIConnectionError as exc:
            logger.warning("Claude API connection error: %s", exc)
            raise ConnectivityError() from exc
        except APIError as exc:
            logger.error("Claude API error: %s", exc.message)
            raise ProviderError(exc.message) from exc

    async def generate(self, prompt: str, **kwargs) -> str:
        """Generate a free-form text response."""
        return await self._call_api(
            user_prompt=prompt,
            system=kwargs.pop("system", None),
            temperature=kwargs.pop("temperature", None),
            max_tokens=kwargs.pop("max_tokens", None),
        )
