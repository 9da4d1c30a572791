"""Gemini adapter for the text generation port."""

from google import genai
from google.genai import errors

from src.application.ports.text_generator import TextGeneratorPort
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import DEFAULT_GEMINI_MODEL


class GeminiTextGenerator(TextGeneratorPort):
    """TextGeneratorPort implementation using the google-genai client."""

    def __init__(
        self,
        api_key: str,
        model_name: str = DEFAULT_GEMINI_MODEL,
        client=None,
        logger=None,
    ) -> None:
        """Initialize the generator.

        Args:
            api_key: Gemini API key.
            model_name: Model used for generation.
            client: Optional preconfigured genai client.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._client = client or genai.Client(api_key=api_key)
        self._model_name = model_name
        self._logger = logger or get_app_logger()

    def generate(self, prompt: str) -> str:
        """Return the model reply for a prompt.

        Args:
            prompt: Natural-language request.

        Returns:
            str: Reply text.

        Raises:
            RuntimeError: If the API call fails or returns no text.
        """
        try:
            response = self._client.models.generate_content(
                model=self._model_name,
                contents=prompt,
            )
        except errors.APIError as exc:
            raise RuntimeError(
                f"Gemini request failed with model {self._model_name}: {exc}"
            ) from exc

        text = getattr(response, "text", None)
        if not text:
            raise RuntimeError(
                f"Gemini returned an empty reply for model {self._model_name}"
            )
        self._logger.debug(f"Gemini reply received ({len(text)} chars)")
        return text


__all__ = ["GeminiTextGenerator", "DEFAULT_GEMINI_MODEL"]
