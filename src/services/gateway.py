"""AI gateway: the three provider capabilities behind one object.

Built once at application startup by ``create_gateway()`` and passed to the
request handlers through ``app.state``. Each call is exactly one provider
request; retry policy lives with the caller (see ``src.services.retry``).
"""

import logging
from dataclasses import dataclass

from src.core.config import Settings, get_settings
from src.core.models import AudioCapture
from src.services.imaging import BaseImageGenerator, create_image_generator
from src.services.llm import BaseLLM, create_llm
from src.services.openai_client import create_openai_client
from src.services.transcription import BaseSTT, create_stt

logger = logging.getLogger(__name__)


@dataclass
class AIGateway:
    """Speech-to-text, prompt expansion, and text-to-image in one place."""

    stt: BaseSTT
    llm: BaseLLM
    image_generator: BaseImageGenerator

    async def transcribe(self, audio: AudioCapture) -> str:
        return await self.stt.transcribe(audio)

    async def expand_prompt(self, transcript: str) -> str:
        return await self.llm.expand_prompt(transcript)

    async def generate_image(self, prompt: str) -> str:
        return await self.image_generator.generate(prompt)


def create_gateway(settings: Settings | None = None) -> AIGateway:
    """Assemble the gateway from settings, sharing one OpenAI client.

    Args:
        settings: Optional Settings instance (defaults to get_settings()).

    Returns:
        AIGateway: Ready-to-use gateway. A missing API key does not raise here.
    """
    settings = settings or get_settings()
    client = create_openai_client(settings.openai_api_key)

    if settings.llm_provider == "openai":
        llm = create_llm("openai", client=client, settings=settings)
    else:
        llm = create_llm(settings.llm_provider, settings=settings)

    logger.info(
        "AI gateway ready (stt=%s, llm=%s, image=%s)",
        settings.openai_transcription_model,
        settings.llm_provider,
        settings.openai_image_model,
    )
    return AIGateway(
        stt=create_stt("openai", client=client, settings=settings),
        llm=llm,
        image_generator=create_image_generator("openai", client=client, settings=settings),
    )
