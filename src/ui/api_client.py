"""
Synchronous HTTP client for the SoundSketch backend API.

Uses ``httpx.Client`` (sync) because Streamlit scripts run synchronously.
"""

import logging

import httpx
import streamlit as st

from src.core.models import AudioCapture

logger = logging.getLogger(__name__)


class APIError(Exception):
    """User-friendly API error with categorized message.

    Categories: "connection", "timeout", "http", "network", "unknown".
    Used by the UI to display appropriate error messages.
    """

    def __init__(self, message: str, category: str = "unknown") -> None:
        self.message = message
        self.category = category
        super().__init__(message)


class APIClient:
    """Thin synchronous wrapper around httpx for calling the FastAPI backend.

    All methods return parsed values or raise ``APIError`` with the message
    from the backend's ``{"error": ...}`` envelope.
    """

    def __init__(self, base_url: str = "http://localhost:8000") -> None:
        """Initialize the HTTP client.

        Args:
            base_url: Base URL of the SoundSketch FastAPI backend.
        """
        self._base_url = base_url.rstrip("/")
        self._client = httpx.Client(base_url=self._base_url, timeout=30.0)

    def _request(
        self, method: str, path: str, fallback: str = "Request failed", **kwargs
    ) -> httpx.Response:
        """Execute an HTTP request with user-friendly error handling.

        Args:
            method: HTTP method name ("get", "post").
            path: API endpoint path (e.g. "/transcribe").
            fallback: Message used when an error response carries no ``error`` field.
            **kwargs: Passed through to httpx (json, files, timeout, etc.).

        Returns:
            The httpx Response object with a successful status code.

        Raises:
            APIError: On connection, timeout, HTTP status, or network errors.
        """
        try:
            resp = getattr(self._client, method)(path, **kwargs)
            resp.raise_for_status()
            return resp
        except httpx.ConnectError:
            raise APIError(
                "Backend server is not running. "
                "Start it with: `uvicorn src.api.app:app --reload --port 8000`",
                category="connection",
            ) from None
        except httpx.TimeoutException:
            raise APIError(
                "Request timed out. The server may be overloaded.",
                category="timeout",
            ) from None
        except httpx.HTTPStatusError as exc:
            try:
                detail = exc.response.json().get("error") or fallback
            except Exception:
                detail = fallback
            logger.warning("%s %s failed (%s): %s", method.upper(), path, exc.response.status_code, detail)
            raise APIError(str(detail), category="http") from None
        except httpx.HTTPError as exc:
            raise APIError(f"Network error: {exc}", category="network") from None

    # -- health --

    def health_check(self) -> dict:
        return self._request("get", "/health").json()

    def check_connection(self) -> tuple[bool, str]:
        """Check if the backend is reachable. Returns (ok, message)."""
        try:
            self.health_check()
            return True, "Connected"
        except APIError as exc:
            return False, exc.message

    # -- pipeline --

    def transcribe(self, audio: AudioCapture) -> str:
        """Upload recorded audio as multipart field ``audio``; return the transcript."""
        resp = self._request(
            "post",
            "/transcribe",
            fallback="Failed to transcribe audio",
            files={"audio": (audio.filename, audio.data, audio.mime_type)},
            timeout=120.0,
        )
        return resp.json()["transcript"]

    def generate_prompt(self, transcript: str) -> str:
        resp = self._request(
            "post",
            "/generate-prompt",
            fallback="Failed to generate prompt",
            json={"transcript": transcript},
        )
        return resp.json()["prompt"]

    def generate_image(self, prompt: str) -> str:
        """Request one image for *prompt*; return its URL."""
        resp = self._request(
            "post",
            "/generate-image",
            fallback="Failed to generate image",
            json={"prompt": prompt},
            timeout=120.0,
        )
        return resp.json()["imageUrl"]


@st.cache_resource
def get_api_client(base_url: str = "http://localhost:8000") -> APIClient:
    """Return a cached APIClient, keyed by base_url.

    Uses Streamlit's ``cache_resource`` to persist the client across reruns.
    When the base URL changes (e.g. user updates sidebar), a new client
    is created automatically because the cache key includes the parameter.
    """
    return APIClient(base_url=base_url)
