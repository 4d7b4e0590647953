"""
Recorder component: drives ``VoiceToImageWorkflow`` from Streamlit widgets.

States: idle -> recording -> processing -> idle (prompt ready) -> generating -> idle
"""

import logging

import streamlit as st

from src.core.config import get_settings
from src.core.models import WorkflowState
from src.ui.api_client import get_api_client
from src.ui.components.image_card import render_image_card
from src.ui.workflow import BufferedRecorder, VoiceToImageWorkflow

logger = logging.getLogger(__name__)


def get_workflow() -> VoiceToImageWorkflow:
    """Return this session's workflow, creating it (and its recorder) on first render."""
    if "workflow" not in st.session_state:
        settings = get_settings()
        client = get_api_client(st.session_state.get("api_base_url", settings.api_base_url))
        st.session_state.recorder = BufferedRecorder()
        st.session_state.workflow = VoiceToImageWorkflow(
            client=client,
            recorder=st.session_state.recorder,
            audio_wait_timeout=settings.audio_wait_timeout,
        )
    return st.session_state.workflow


def render_recorder() -> None:
    """Render the full voice-to-image UI based on the workflow state."""
    workflow = get_workflow()

    _render_capture(workflow)

    if workflow.error:
        st.error(workflow.error)

    if workflow.generated_prompt:
        _render_prompt_editor(workflow)

    if workflow.image_url:
        render_image_card(workflow.image_url, get_settings().image_allowed_hosts)


def _render_capture(workflow: VoiceToImageWorkflow) -> None:
    """Record audio; a finished recording runs transcription and prompt expansion."""
    audio = st.audio_input(
        "Tap the microphone to start recording",
        disabled=workflow.is_busy,
        key="voice_input",
    )
    if audio is None:
        return

    # st.audio_input keeps returning the same recording on every rerun
    audio_id = getattr(audio, "file_id", None) or audio.name
    if st.session_state.get("_processed_audio_id") == audio_id:
        return
    st.session_state._processed_audio_id = audio_id

    if not workflow.start_recording():
        return
    recorder: BufferedRecorder = st.session_state.recorder
    recorder.load(audio.getvalue(), mime_type=audio.type or "audio/wav", filename=audio.name)
    with st.spinner("Processing audio..."):
        workflow.stop_recording()
    st.rerun()


def _render_prompt_editor(workflow: VoiceToImageWorkflow) -> None:
    """Editable prompt plus the Generate / Regenerate action."""
    edited = st.text_area(
        "Generated Prompt (you can edit):",
        value=workflow.editable_prompt,
        placeholder="Edit your prompt here...",
        height=120,
    )
    workflow.edit_prompt(edited)

    label = "Regenerate" if workflow.image_url else "Generate Art"
    if st.button(label, type="primary", disabled=not workflow.can_generate):
        with st.spinner("Generating image..."):
            workflow.generate_image()
        if workflow.state == WorkflowState.error:
            logger.info("Image generation failed: %s", workflow.error)
        st.rerun()
