"""
Shared OpenAI SDK plumbing for the speech, chat, and image providers.

The ``AsyncOpenAI`` client is built once from settings and handed to every
capability. SDK exceptions are translated into the application's
``ConnectivityError`` / ``ProviderError`` so callers never depend on
``openai`` exception types.
"""

import logging

from openai import APIConnectionError, APIError, AsyncOpenAI, OpenAIError

from src.core.exceptions import ConnectivityError, ProviderError, SoundSketchError

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "OPENAI_API_KEY is not configured"


def create_openai_client(api_key: str) -> AsyncOpenAI | None:
    """Build an ``AsyncOpenAI`` client, or ``None`` when no key is configured.

    A missing key is not fatal at startup; it surfaces as ``ProviderError``
    on the first capability call instead.
    """
    if not api_key:
        logger.warning("%s; AI calls will fail until it is set", MISSING_KEY_MESSAGE)
        return None
    # SDK retries disabled: retry policy lives in src.services.retry only
    return AsyncOpenAI(api_key=api_key, max_retries=0)


def require_client(client: AsyncOpenAI | None) -> AsyncOpenAI:
    """Return *client* or raise ``ProviderError`` if the API key was never configured."""
    if client is None:
        raise ProviderError(MISSING_KEY_MESSAGE)
    return client


def translate_openai_error(exc: Exception, operation: str) -> SoundSketchError:
    """Map an exception raised by the OpenAI SDK to an application error.

    Args:
        exc: The exception caught around the SDK call.
        operation: Short label used in log lines (e.g. "transcription").

    Returns:
        ``ConnectivityError`` for transport failures (including timeouts),
        ``ProviderError`` carrying the provider's message for everything else.
    """
    if isinstance(exc, SoundSketchError):
        return exc
    # APITimeoutError is a subclass of APIConnectionError
    if isinstance(exc, APIConnectionError):
        logger.warning("OpenAI %s connection error: %s", operation, exc)
        return ConnectivityError()
    if isinstance(exc, APIError):
        logger.error("OpenAI %s failed: %s", operation, exc.message)
        return ProviderError(exc.message)
    if isinstance(exc, OpenAIError):
        logger.error("OpenAI %s failed: %s", operation, exc)
        return ProviderError(str(exc))
    logger.error("Unexpected error during OpenAI %s: %s", operation, exc)
    return ProviderError(str(exc) or "An unexpected error occurred")
