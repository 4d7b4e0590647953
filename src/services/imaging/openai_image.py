"""OpenAI image provider (``images.generate``, dall-e-3 by default)."""

import logging

from openai import AsyncOpenAI

from src.core.config import get_settings
from src.core.exceptions import ProviderError
from src.services.imaging.base import BaseImageGenerator
from src.services.openai_client import (
    create_openai_client,
    require_client,
    translate_openai_error,
)

logger = logging.getLogger(__name__)


class OpenAIImageGenerator(BaseImageGenerator):
    """Requests exactly one image at a fixed size and returns its URL.

    Args:
        client: Shared ``AsyncOpenAI`` client (built from settings when omitted).
        model: Image model name.
        size: Resolution string accepted by the images API.
        settings: Optional Settings instance (defaults to get_settings()).
    """

    def __init__(
        self,
        client: AsyncOpenAI | None = None,
        model: str | None = None,
        size: str | None = None,
        settings=None,
    ) -> None:
        self._settings = settings or get_settings()
        self._client = client or create_openai_client(self._settings.openai_api_key)
        self._model = model or self._settings.openai_image_model
        self._size = size or self._settings.image_size

    async def generate(self, prompt: str, **kwargs) -> str:
        client = require_client(self._client)
        try:
            response = await client.images.generate(
                model=self._model,
                prompt=prompt,
                n=1,
                size=kwargs.pop("size", self._size),
                **kwargs,
            )
        except Exception as exc:
            raise translate_openai_error(exc, "image generation") from exc

        if not response.data or not response.data[0].url:
            raise ProviderError("Image provider returned no image URL")
        return response.data[0].url
