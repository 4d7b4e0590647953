"""Shared pytest fixtures for SoundSketch test suite.

Provides common test fixtures used across unit and integration tests,
including a mock AI gateway, fake SDK errors, and sample audio.
"""

from unittest.mock import AsyncMock

import httpx
import pytest

from src.core.models import AudioCapture

# ---------------------------------------------------------------------------
# Gateway Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_gateway():
    """Create a mock AIGateway with successful defaults for all three capabilities.

    Returns:
        AsyncMock: A mock implementing the AIGateway interface.
    """
    from src.services.gateway import AIGateway

    gateway = AsyncMock(spec=AIGateway)
    gateway.transcribe.return_value = "a red fox"
    gateway.expand_prompt.return_value = "A watercolor painting of a red fox in a snowy forest"
    gateway.generate_image.return_value = (
        "https://oaidalleapiprodscus.blob.core.windows.net/private/img-fox.png"
    )
    return gateway


# ---------------------------------------------------------------------------
# Provider error Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def openai_request():
    """A dummy httpx request to attach to SDK exceptions."""
    return httpx.Request("POST", "https://api.openai.com/v1/audio/transcriptions")


# ---------------------------------------------------------------------------
# Audio Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_audio_bytes():
    """A few bytes standing in for a recorded webm clip.

    Returns:
        bytes: Opaque audio payload (the provider is mocked, so content is irrelevant).
    """
    return b"\x1aE\xdf\xa3" + b"\x00" * 256


@pytest.fixture
def sample_audio(sample_audio_bytes):
    """An AudioCapture as produced when recording stops."""
    return AudioCapture(data=sample_audio_bytes, mime_type="audio/webm", filename="recording.webm")
