"""Unit tests for the Streamlit-side APIClient.

Validates that the APIClient calls the right endpoints with the right
payloads, parses the success envelopes, and turns error envelopes and
transport failures into ``APIError`` with user-facing messages.
"""

from unittest.mock import MagicMock, patch

import httpx
import pytest

from src.ui.api_client import APIClient, APIError


@pytest.fixture
def client():
    """Create an APIClient with a mocked httpx.Client."""
    with patch("src.ui.api_client.httpx.Client") as mock_cls:
        mock_http = MagicMock()
        mock_cls.return_value = mock_http
        api = APIClient(base_url="http://test:8000/")
        api._mock_http = mock_http  # expose for assertions
        yield api


def _ok(payload: dict) -> MagicMock:
    resp = MagicMock()
    resp.json.return_value = payload
    return resp


def _http_error(status: int, body=None, text: str = "") -> MagicMock:
    request = httpx.Request("POST", "http://test:8000/x")
    response = httpx.Response(status, request=request, json=body) if body is not None else (
        httpx.Response(status, request=request, text=text)
    )
    resp = MagicMock()
    resp.raise_for_status.side_effect = httpx.HTTPStatusError(
        "error", request=request, response=response
    )
    return resp


class TestInit:
    def test_strips_trailing_slash(self):
        with patch("src.ui.api_client.httpx.Client") as mock_cls:
            APIClient(base_url="http://test:8000/")
        mock_cls.assert_called_once_with(base_url="http://test:8000", timeout=30.0)


class TestTranscribe:
    def test_uploads_audio_field(self, client, sample_audio):
        client._mock_http.post.return_value = _ok({"transcript": "a red fox"})

        result = client.transcribe(sample_audio)

        assert result == "a red fox"
        client._mock_http.post.assert_called_once_with(
            "/transcribe",
            files={"audio": ("recording.webm", sample_audio.data, "audio/webm")},
            timeout=120.0,
        )

    def test_error_envelope_message(self, client, sample_audio):
        client._mock_http.post.return_value = _http_error(
            503, {"error": "Connection error. Please try again later."}
        )

        with pytest.raises(APIError) as exc_info:
            client.transcribe(sample_audio)

        assert exc_info.value.message == "Connection error. Please try again later."
        assert exc_info.value.category == "http"

    def test_fallback_message_when_body_not_json(self, client, sample_audio):
        client._mock_http.post.return_value = _http_error(502, text="Bad Gateway")

        with pytest.raises(APIError, match="Failed to transcribe audio"):
            client.transcribe(sample_audio)


class TestGeneratePrompt:
    def test_sends_transcript(self, client):
        client._mock_http.post.return_value = _ok({"prompt": "A watercolor fox"})

        result = client.generate_prompt("a red fox")

        assert result == "A watercolor fox"
        client._mock_http.post.assert_called_once_with(
            "/generate-prompt", json={"transcript": "a red fox"}
        )

    def test_fallback_message_when_error_missing(self, client):
        client._mock_http.post.return_value = _http_error(500, {"detail": "something"})

        with pytest.raises(APIError, match="Failed to generate prompt"):
            client.generate_prompt("x")


class TestGenerateImage:
    def test_returns_image_url(self, client):
        client._mock_http.post.return_value = _ok({"imageUrl": "https://img.test/fox.png"})

        result = client.generate_image("a red fox in watercolor")

        assert result == "https://img.test/fox.png"
        client._mock_http.post.assert_called_once_with(
            "/generate-image", json={"prompt": "a red fox in watercolor"}, timeout=120.0
        )

    def test_error_envelope(self, client):
        client._mock_http.post.return_value = _http_error(500, {"error": "Error generating image"})

        with pytest.raises(APIError, match="Error generating image"):
            client.generate_image("x")


class TestTransportErrors:
    def test_connect_error(self, client):
        client._mock_http.get.side_effect = httpx.ConnectError("refused")

        ok, message = client.check_connection()

        assert ok is False
        assert "not running" in message

    def test_timeout(self, client):
        client._mock_http.post.side_effect = httpx.ReadTimeout("slow")

        with pytest.raises(APIError) as exc_info:
            client.generate_prompt("x")
        assert exc_info.value.category == "timeout"

    def test_health_ok(self, client):
        client._mock_http.get.return_value = _ok({"status": "ok"})

        assert client.check_connection() == (True, "Connected")
        client._mock_http.get.assert_called_once_with("/health")
