"""
Abstract base class for Speech-to-Text providers.

All STT implementations must implement this interface, enabling
provider-agnostic transcription in the request handlers.
"""

from abc import ABC, abstractmethod

from src.core.models import AudioCapture


class BaseSTT(ABC):
    """Interface that every STT provider must implement."""

    @abstractmethod
    async def transcribe(self, audio: AudioCapture, **kwargs) -> str:
        """Transcribe a recorded audio payload to text.

        Args:
            audio: Raw audio bytes with content type and filename.
            **kwargs: Provider-specific options (language, prompt, etc.).

        Returns:
            The transcript text.

        Raises:
            ConnectivityError: On transport failures.
            ProviderError: When the provider rejects the request.
        """
