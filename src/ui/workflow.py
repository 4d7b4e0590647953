"""
Client-side workflow for record -> transcribe -> prompt -> image.

States: idle -> recording -> processing -> idle (prompt ready)
        idle -> generating -> idle (image ready)
        any failure -> error; the next start/generate action clears it.

The workflow owns no network code of its own; it sequences calls on an
``APIClient`` and keeps the results as plain attributes so the Streamlit
component can render them from session state.
"""

import logging
import time
from collections.abc import Callable
from typing import Protocol

from src.core.models import AudioCapture, WorkflowState
from src.ui.api_client import APIClient

logger = logging.getLogger(__name__)

NO_AUDIO_MESSAGE = "No audio recording available"
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred"


class NoAudioError(Exception):
    """Raised when recording stopped but no captured audio materialized in time."""

    def __init__(self) -> None:
        super().__init__(NO_AUDIO_MESSAGE)


class Recorder(Protocol):
    """Audio capture source driven by explicit start/stop actions."""

    def start(self) -> None: ...

    def stop(self) -> None: ...

    def captured_audio(self) -> AudioCapture | None: ...


class BufferedRecorder:
    """Recorder fed by a UI widget that hands over the finished recording.

    ``st.audio_input`` records in the browser and returns the bytes after the
    user stops, so capture here is just holding on to what the widget gave us.
    """

    def __init__(self) -> None:
        self._capture: AudioCapture | None = None
        self.is_recording = False

    def start(self) -> None:
        self._capture = None
        self.is_recording = True

    def load(
        self, data: bytes, mime_type: str = "audio/wav", filename: str = "recording.wav"
    ) -> None:
        """Store the widget's recording; empty payloads are ignored."""
        if data:
            self._capture = AudioCapture(data=data, mime_type=mime_type, filename=filename)

    def stop(self) -> None:
        self.is_recording = False

    def captured_audio(self) -> AudioCapture | None:
        return self._capture


class VoiceToImageWorkflow:
    """State machine over ``WorkflowState`` for one user session.

    Args:
        client: Backend API client.
        recorder: Audio capture source.
        audio_wait_timeout: Seconds to wait for captured audio after stopping.
        audio_poll_interval: Seconds between checks while waiting for audio.
        sleep: Blocking sleep function, injectable for tests.
    """

    def __init__(
        self,
        client: APIClient,
        recorder: Recorder,
        audio_wait_timeout: float = 1.0,
        audio_poll_interval: float = 0.1,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._client = client
        self._recorder = recorder
        self._audio_wait_timeout = audio_wait_timeout
        self._audio_poll_interval = audio_poll_interval
        self._sleep = sleep

        self.state = WorkflowState.idle
        self.transcript = ""
        self.generated_prompt = ""
        self.editable_prompt = ""
        self.image_url: str | None = None
        self.error: str | None = None

    @property
    def is_busy(self) -> bool:
        return self.state in (WorkflowState.processing, WorkflowState.generating)

    @property
    def can_generate(self) -> bool:
        return (
            self.state in (WorkflowState.idle, WorkflowState.error)
            and bool(self.generated_prompt)
        )

    # -- recording --

    def start_recording(self) -> bool:
        """Begin capturing audio. Returns False if the action is not allowed now."""
        if self.state not in (WorkflowState.idle, WorkflowState.error):
            logger.warning("Cannot start recording while %s", self.state)
            return False
        self.error = None
        self._recorder.start()
        self.state = WorkflowState.recording
        return True

    def stop_recording(self) -> bool:
        """Stop capture, then transcribe and expand the prompt in sequence.

        Returns:
            True if a prompt is ready, False if the action was not allowed
            or any step failed (see ``error``).
        """
        if self.state != WorkflowState.recording:
            logger.warning("Cannot stop recording while %s", self.state)
            return False

        self._recorder.stop()
        self.state = WorkflowState.processing
        self.error = None

        try:
            audio = self._wait_for_audio()
            transcript = self._client.transcribe(audio)
            prompt = self._client.generate_prompt(transcript)
        except Exception as exc:
            self._fail(exc)
            return False

        self.transcript = transcript
        self.generated_prompt = prompt
        self.editable_prompt = prompt
        self.state = WorkflowState.idle
        return True

    def _wait_for_audio(self) -> AudioCapture:
        """Poll the recorder until audio appears or the timeout elapses."""
        max_polls = 0
        if self._audio_poll_interval > 0:
            max_polls = round(self._audio_wait_timeout / self._audio_poll_interval)

        audio = self._recorder.captured_audio()
        for _ in range(max_polls):
            if audio is not None:
                break
            self._sleep(self._audio_poll_interval)
            audio = self._recorder.captured_audio()
        if audio is None:
            raise NoAudioError()
        return audio

    # -- prompt / image --

    def edit_prompt(self, text: str) -> None:
        self.editable_prompt = text

    def generate_image(self) -> bool:
        """Generate (or regenerate) the image from the current editable prompt."""
        if not self.can_generate:
            logger.warning("Cannot generate image while %s", self.state)
            return False

        self.state = WorkflowState.generating
        self.error = None
        try:
            image_url = self._client.generate_image(self.editable_prompt)
        except Exception as exc:
            self._fail(exc)
            return False

        self.image_url = image_url
        self.state = WorkflowState.idle
        return True

    def reset(self) -> None:
        """Discard every result and return to a fresh idle state."""
        self.state = WorkflowState.idle
        self.transcript = ""
        self.generated_prompt = ""
        self.editable_prompt = ""
        self.image_url = None
        self.error = None

    def _fail(self, exc: Exception) -> None:
        logger.error("Workflow step failed: %s", exc)
        self.error = str(exc) or UNKNOWN_ERROR_MESSAGE
        self.state = WorkflowState.error
