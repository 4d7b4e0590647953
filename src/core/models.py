"""
Pydantic v2 request / response models used across the API and UI layers.

Everything here is transient and request-scoped; nothing is persisted.
"""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------


class HealthResponse(BaseModel):
    """GET /health response."""

    status: str = "ok"
    version: str = "0.1.0"
    timestamp: datetime


# ---------------------------------------------------------------------------
# Audio
# ---------------------------------------------------------------------------


class AudioCapture(BaseModel):
    """Raw recorded audio plus its content type, consumed once by transcription."""

    data: bytes
    mime_type: str = "audio/webm"
    filename: str = "recording.webm"


# ---------------------------------------------------------------------------
# Transcription
# ---------------------------------------------------------------------------


class TranscribeResponse(BaseModel):
    """POST /transcribe response."""

    transcript: str


# ---------------------------------------------------------------------------
# Prompt generation
# ---------------------------------------------------------------------------


class GeneratePromptRequest(BaseModel):
    """POST /generate-prompt request body. The transcript may be empty."""

    transcript: str


class GeneratePromptResponse(BaseModel):
    """POST /generate-prompt response."""

    prompt: str


# ---------------------------------------------------------------------------
# Image generation
# ---------------------------------------------------------------------------


class GenerateImageRequest(BaseModel):
    """POST /generate-image request body."""

    prompt: str


class GenerateImageResponse(BaseModel):
    """POST /generate-image response, serialized as ``{"imageUrl": ...}``."""

    model_config = ConfigDict(populate_by_name=True)

    image_url: str = Field(alias="imageUrl")


# ---------------------------------------------------------------------------
# Error
# ---------------------------------------------------------------------------


class ErrorResponse(BaseModel):
    """Error envelope returned by every failing endpoint."""

    error: str
    code: str = "INTERNAL_ERROR"
    timestamp: datetime


# ---------------------------------------------------------------------------
# Client workflow
# ---------------------------------------------------------------------------


class WorkflowState(StrEnum):
    """User-visible pipeline state. Exactly one holds at a time."""

    idle = "idle"
    recording = "recording"
    processing = "processing"
    generating = "generating"
    error = "error"
