"""Port for the generative text collaborator."""

from typing import Protocol


class TextGeneratorPort(Protocol):
    """Port exposing a prompt-in, text-out language model."""

    def generate(self, prompt: str) -> str:
        """Return the model reply for a prompt."""


__all__ = ["TextGeneratorPort"]
