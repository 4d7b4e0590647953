"""
SoundSketch exception hierarchy.

All application-specific exceptions inherit from SoundSketchError,
enabling centralized error handling in the API middleware layer.
"""

from datetime import UTC, datetime


class SoundSketchError(Exception):
    """Base exception for all SoundSketch errors."""

    def __init__(
        self,
        detail: str = "An unexpected error occurred",
        code: str = "SOUNDSKETCH_ERROR",
        status_code: int = 500,
    ) -> None:
        self.detail = detail
        self.code = code
        self.status_code = status_code
        self.timestamp = datetime.now(UTC).isoformat()
        super().__init__(detail)


class MissingInputError(SoundSketchError):
    """Raised when a required request field is absent (client error)."""

    def __init__(self, detail: str = "Missing required input") -> None:
        super().__init__(
            detail=detail,
            code="VALIDATION_ERROR",
            status_code=400,
        )


class ConnectivityError(SoundSketchError):
    """Raised when the transport to the AI provider fails (reset, refused, timeout)."""

    def __init__(self, detail: str = "Connection error. Please try again later.") -> None:
        super().__init__(
            detail=detail,
            code="CONNECTIVITY_ERROR",
            status_code=503,
        )


class ProviderError(SoundSketchError):
    """Raised when the AI provider rejects a request (invalid key, quota, policy...)."""

    def __init__(self, detail: str = "AI provider error") -> None:
        super().__init__(
            detail=detail,
            code="PROVIDER_ERROR",
            status_code=500,
        )


class PromptGenerationError(SoundSketchError):
    """Raised when a transcript could not be expanded into an image prompt."""

    def __init__(self, detail: str = "Error generating prompt") -> None:
        super().__init__(detail=detail, code="PROMPT_GENERATION_ERROR", status_code=500)


class ImageGenerationError(SoundSketchError):
    """Raised when an image could not be generated from a prompt."""

    def __init__(self, detail: str = "Error generating image") -> None:
        super().__init__(detail=detail, code="IMAGE_GENERATION_ERROR", status_code=500)
