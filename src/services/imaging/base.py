"""
Abstract base class for image-generation providers.
"""

from abc import ABC, abstractmethod


class BaseImageGenerator(ABC):
    """Interface that every image-generation provider must implement."""

    @abstractmethod
    async def generate(self, prompt: str, **kwargs) -> str:
        """Render one image for *prompt*.

        Args:
            prompt: Literal prompt text, possibly edited by the user.
            **kwargs: Provider-specific options (size, quality, etc.).

        Returns:
            URL of the generated image, hosted by the provider.
        """
