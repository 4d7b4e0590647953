"""
Application configuration via pydantic-settings.

Loads values from .env file with sensible defaults for local development.
Use ``get_settings()`` to obtain the cached singleton instance.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """SoundSketch application settings loaded from environment / .env file.

    All settings can be overridden via environment variables or a `.env` file.
    Field names map directly to env var names (case-insensitive).

    Attributes:
        openai_api_key: Credential for the OpenAI API (speech, chat, images).
        llm_provider: Which backend expands transcripts into prompts ("openai" or "claude").
        transcribe_max_attempts: Total transcription attempts on transient failures.
        image_allowed_hosts: Hosts the UI is allowed to render images from.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Silently ignore unrecognized env vars
    )

    # --- OpenAI ---
    openai_api_key: str = ""  # Required; calls fail with ProviderError when empty
    openai_transcription_model: str = "whisper-1"
    openai_chat_model: str = "gpt-3.5-turbo"
    openai_image_model: str = "dall-e-3"
    image_size: str = "1024x1024"

    # --- Prompt expansion ---
    # "openai" uses the chat model above, "claude" uses the Anthropic API
    llm_provider: str = "openai"
    claude_api_key: str = ""  # Required when llm_provider="claude"
    claude_model: str = "claude-sonnet-4-20250514"

    # --- Retry (transcription only) ---
    transcribe_max_attempts: int = 3
    retry_delay_seconds: float = 1.0  # Constant delay, no backoff

    # --- Application ---
    app_host: str = "0.0.0.0"  # Bind address for the FastAPI server
    app_port: int = 8000
    log_level: str = "INFO"  # Python logging level
    cors_origins: list[str] = [
        "http://localhost:8501",  # Streamlit
        "http://localhost:3000",  # Dev frontend
    ]

    # --- UI ---
    api_base_url: str = "http://localhost:8000"
    audio_wait_timeout: float = 1.0  # Seconds to wait for captured audio after stop
    image_allowed_hosts: list[str] = ["oaidalleapiprodscus.blob.core.windows.net"]


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings singleton.

    Uses ``functools.lru_cache`` so the .env file is read only once.
    Subsequent calls return the same ``Settings`` instance.

    Returns:
        Settings: The application-wide configuration object.
    """
    return Settings()
