"""Unit tests for AIGateway composition and the provider factories."""

from unittest.mock import AsyncMock, patch

import pytest

from src.core.config import Settings
from src.services.gateway import AIGateway, create_gateway
from src.services.imaging import BaseImageGenerator, create_image_generator
from src.services.imaging.openai_image import OpenAIImageGenerator
from src.services.llm import BaseLLM, create_llm
from src.services.llm.openai_llm import OpenAILLM
from src.services.transcription import BaseSTT, create_stt
from src.services.transcription.openai_stt import OpenAISTT


def _settings(**overrides) -> Settings:
    defaults = {"openai_api_key": "sk-test", "_env_file": None}
    defaults.update(overrides)
    return Settings(**defaults)


class TestFactories:
    def test_unknown_stt_provider(self):
        with pytest.raises(ValueError, match="Unknown STT provider"):
            create_stt("local")

    def test_unknown_llm_provider(self):
        with pytest.raises(ValueError, match="Unknown LLM provider"):
            create_llm("ollama")

    def test_unknown_image_provider(self):
        with pytest.raises(ValueError, match="Unknown image provider"):
            create_image_generator("stable-diffusion")


class TestCreateGateway:
    def test_openai_providers_share_one_client(self):
        gateway = create_gateway(_settings())

        assert isinstance(gateway.stt, OpenAISTT)
        assert isinstance(gateway.llm, OpenAILLM)
        assert isinstance(gateway.image_generator, OpenAIImageGenerator)
        assert gateway.stt._client is gateway.llm._client is gateway.image_generator._client

    def test_missing_key_does_not_raise(self):
        gateway = create_gateway(_settings(openai_api_key=""))

        assert gateway.stt._client is None

    def test_claude_prompt_provider(self):
        with patch("src.services.gateway.create_llm") as mock_create_llm:
            mock_create_llm.return_value = AsyncMock(spec=BaseLLM)
            settings = _settings(llm_provider="claude")
            gateway = create_gateway(settings)

        mock_create_llm.assert_called_once_with("claude", settings=settings)
        assert gateway.llm is mock_create_llm.return_value

    def test_claude_uses_passed_settings(self):
        settings = _settings(
            llm_provider="claude", claude_api_key="sk-ant-explicit", claude_model="claude-x"
        )
        with patch("src.services.llm.claude.get_settings") as mock_get_settings:
            gateway = create_gateway(settings)

        mock_get_settings.assert_not_called()
        assert gateway.llm._api_key == "sk-ant-explicit"
        assert gateway.llm._model == "claude-x"

    def test_openai_client_has_no_sdk_retries(self):
        gateway = create_gateway(_settings())

        assert gateway.stt._client.max_retries == 0


class TestAIGateway:
    async def test_delegates_each_capability(self, sample_audio):
        stt = AsyncMock(spec=BaseSTT)
        stt.transcribe.return_value = "hello"
        llm = AsyncMock(spec=BaseLLM)
        llm.expand_prompt.return_value = "a prompt"
        images = AsyncMock(spec=BaseImageGenerator)
        images.generate.return_value = "https://example.test/a.png"
        gateway = AIGateway(stt=stt, llm=llm, image_generator=images)

        assert await gateway.transcribe(sample_audio) == "hello"
        assert await gateway.expand_prompt("hello") == "a prompt"
        assert await gateway.generate_image("a prompt") == "https://example.test/a.png"

        stt.transcribe.assert_awaited_once_with(sample_audio)
        llm.expand_prompt.assert_awaited_once_with("hello")
        images.generate.assert_awaited_once_with("a prompt")
