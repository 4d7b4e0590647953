"""
Voice-to-image REST endpoints.

Three stateless handlers, one provider capability each:

- ``POST /transcribe``      multipart ``audio`` file -> ``{"transcript"}``
- ``POST /generate-prompt`` ``{"transcript"}``       -> ``{"prompt"}``
- ``POST /generate-image``  ``{"prompt"}``           -> ``{"imageUrl"}``

Every failure is logged here and re-raised as a ``SoundSketchError`` so the
registered error handlers render the JSON envelope.
"""

import logging

from fastapi import APIRouter, Depends, File, Request, UploadFile

from src.core.config import Settings, get_settings
from src.core.exceptions import (
    ConnectivityError,
    ImageGenerationError,
    MissingInputError,
    PromptGenerationError,
    ProviderError,
    SoundSketchError,
)
from src.core.models import (
    AudioCapture,
    ErrorResponse,
    GenerateImageRequest,
    GenerateImageResponse,
    GeneratePromptRequest,
    GeneratePromptResponse,
    TranscribeResponse,
)
from src.services.gateway import AIGateway, create_gateway
from src.services.retry import is_transient, with_retry

logger = logging.getLogger(__name__)

router = APIRouter(tags=["generation"])

_ERRORS = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


def get_gateway(request: Request) -> AIGateway:
    """Return the process-wide gateway, building it on first use if startup did not."""
    gateway = getattr(request.app.state, "gateway", None)
    if gateway is None:
        gateway = create_gateway()
        request.app.state.gateway = gateway
    return gateway


@router.post(
    "/transcribe",
    response_model=TranscribeResponse,
    responses={**_ERRORS, 503: {"model": ErrorResponse}},
)
async def transcribe(
    audio: UploadFile | None = File(None),
    gateway: AIGateway = Depends(get_gateway),
    settings: Settings = Depends(get_settings),
):
    """Transcribe an uploaded recording, retrying transient connection failures."""
    data = await audio.read() if audio is not None else b""
    if not data:
        raise MissingInputError("No audio file provided")

    capture = AudioCapture(
        data=data,
        mime_type=audio.content_type or "application/octet-stream",
        filename=audio.filename or "recording.webm",
    )

    try:
        transcript = await with_retry(
            lambda: gateway.transcribe(capture),
            max_attempts=settings.transcribe_max_attempts,
            delay=settings.retry_delay_seconds,
        )
    except SoundSketchError:
        logger.exception("Error in transcribe API")
        raise
    except Exception as exc:
        logger.exception("Error in transcribe API")
        if is_transient(exc):
            raise ConnectivityError() from exc
        raise ProviderError(str(exc) or "An unexpected error occurred") from exc

    return TranscribeResponse(transcript=transcript)


@router.post("/generate-prompt", response_model=GeneratePromptResponse, responses=_ERRORS)
async def generate_prompt(
    body: GeneratePromptRequest,
    gateway: AIGateway = Depends(get_gateway),
):
    """Expand a transcript into a detailed image prompt."""
    try:
        prompt = await gateway.expand_prompt(body.transcript)
    except Exception as exc:
        logger.exception("Error in generate-prompt API")
        raise PromptGenerationError() from exc
    return GeneratePromptResponse(prompt=prompt)


@router.post("/generate-image", response_model=GenerateImageResponse, responses=_ERRORS)
async def generate_image(
    body: GenerateImageRequest,
    gateway: AIGateway = Depends(get_gateway),
):
    """Generate one image for the (possibly user-edited) prompt."""
    try:
        image_url = await gateway.generate_image(body.prompt)
    except Exception as exc:
        logger.exception("Error in generate-image API")
        raise ImageGenerationError() from exc
    return GenerateImageResponse(image_url=image_url)
