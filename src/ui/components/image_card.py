"""Image card component: renders the latest generated image."""

import streamlit as st

from src.ui.utils import is_allowed_image_url


def render_image_card(image_url: str, allowed_hosts: list[str]) -> None:
    """Embed the image if its host is allow-listed, otherwise show a link.

    Args:
        image_url: Provider-hosted URL of the generated image.
        allowed_hosts: Hostnames the UI may embed images from.
    """
    with st.container(border=True):
        if is_allowed_image_url(image_url, allowed_hosts):
            st.image(image_url, caption="Generated image", width="stretch")
        else:
            st.warning("Image host is not in the allowed list; open it directly instead.")
            st.markdown(f"[Open generated image]({image_url})")
