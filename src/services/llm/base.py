"""
Abstract base class for LLM providers.

All LLM implementations (OpenAI, Claude) must implement this interface,
enabling provider-agnostic prompt expansion in the request handlers.
"""

from abc import ABC, abstractmethod

PROMPT_SYSTEM_INSTRUCTION = (
    "You are a helpful assistant that generates image prompts based on voice transcripts."
)
PROMPT_TEMPLATE = 'Generate a detailed image prompt based on this transcript: "{transcript}"'


class BaseLLM(ABC):
    """Interface that every LLM provider must implement."""

    @abstractmethod
    async def generate(self, prompt: str, **kwargs) -> str:
        """Generate a free-form text response.

        Args:
            prompt: The user message to send to the model.
            **kwargs: Provider-specific options (system, temperature, max_tokens).

        Returns:
            The model's text response (empty string if the model returned none).
        """

    async def expand_prompt(self, transcript: str, **kwargs) -> str:
        """Turn a voice transcript into a detailed image-generation prompt."""
        return await self.generate(
            PROMPT_TEMPLATE.format(transcript=transcript),
            system=PROMPT_SYSTEM_INSTRUCTION,
            **kwargs,
        )
