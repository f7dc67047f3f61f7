"""Abstract base class for text-generation adapters.

Swap Gemini for another model provider by implementing this interface.
"""

from abc import ABC, abstractmethod


class GenerationError(Exception):
    """The text model could not produce usable output."""


class TextGenerationAdapter(ABC):
    """Contract that any text-generation backend must satisfy."""

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """Return the model's trimmed text for *prompt*; raise GenerationError on failure."""
