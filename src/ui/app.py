"""
SoundSketch Streamlit UI, main entry point.

Run with: ``streamlit run src/ui/app.py``
"""

# ---------------------------------------------------------------------------
# Ensure project root is on sys.path so ``from src.xxx`` imports work.
# Streamlit replaces sys.path[0] with the script directory (src/ui/),
# which removes the project root needed for absolute ``src.*`` imports.
# ---------------------------------------------------------------------------
import sys  # noqa: E402
from pathlib import Path  # noqa: E402

_project_root = str(Path(__file__).resolve().parent.parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import streamlit as st  # noqa: E402

from src.core.config import get_settings  # noqa: E402
from src.ui.api_client import get_api_client  # noqa: E402
from src.ui.components.recorder import render_recorder  # noqa: E402

# ---------------------------------------------------------------------------
# Page config (must be first Streamlit call)
# ---------------------------------------------------------------------------
st.set_page_config(
    page_title="SoundSketch",
    page_icon="\U0001f3a8",
    layout="centered",
)

if "api_base_url" not in st.session_state:
    st.session_state.api_base_url = get_settings().api_base_url

# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------
with st.sidebar:
    st.title("\U0001f3a8 SoundSketch")
    st.caption("Speak an idea, get a picture")
    st.divider()
    st.session_state.api_base_url = st.text_input(
        "Backend API URL",
        value=st.session_state.api_base_url,
        help="URL of the SoundSketch FastAPI backend server (default: http://localhost:8000)",
    )

    _client = get_api_client(st.session_state.api_base_url)
    _conn_ok, _conn_msg = _client.check_connection()
    if _conn_ok:
        st.success(f"Backend: {_conn_msg}")
    else:
        st.error(f"Backend: {_conn_msg}")

    if st.button("Start Over", width="stretch"):
        if "workflow" in st.session_state:
            st.session_state.workflow.reset()
        st.rerun()

# ---------------------------------------------------------------------------
# Main page
# ---------------------------------------------------------------------------
st.header("Voice to Image Generator")
render_recorder()
