"""OpenAI speech-to-text provider (``audio.transcriptions``, whisper-1 by default)."""

import logging

from openai import AsyncOpenAI

from src.core.config import get_settings
from src.core.models import AudioCapture
from src.services.openai_client import (
    create_openai_client,
    require_client,
    translate_openai_error,
)
from src.services.transcription.base import BaseSTT

logger = logging.getLogger(__name__)


class OpenAISTT(BaseSTT):
    """Speech-to-text via the hosted OpenAI transcription endpoint.

    Args:
        client: Shared ``AsyncOpenAI`` client (built from settings when omitted).
        model: Transcription model name.
        settings: Optional Settings instance (defaults to get_settings()).
    """

    def __init__(
        self,
        client: AsyncOpenAI | None = None,
        model: str | None = None,
        settings=None,
    ) -> None:
        self._settings = settings or get_settings()
        self._client = client or create_openai_client(self._settings.openai_api_key)
        self._model = model or self._settings.openai_transcription_model

    async def transcribe(self, audio: AudioCapture, **kwargs) -> str:
        """Upload *audio* and return the transcript text."""
        client = require_client(self._client)
        logger.debug(
            "Transcribing %d bytes (%s) with %s", len(audio.data), audio.mime_type, self._model
        )
        try:
            response = await client.audio.transcriptions.create(
                file=(audio.filename, audio.data, audio.mime_type),
                model=self._model,
                **kwargs,
            )
        except Exception as exc:
            raise translate_openai_error(exc, "transcription") from exc
        return response.text
