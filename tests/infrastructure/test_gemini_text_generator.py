"""Tests for the Gemini text generator adapter."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from google.genai import errors

from src.infrastructure.gemini_text_generator import GeminiTextGenerator


def _client(response=None, error=None) -> SimpleNamespace:
    models = MagicMock()
    if error is not None:
        models.generate_content.side_effect = error
    else:
        models.generate_content.return_value = response
    return SimpleNamespace(models=models)


def test_generate_returns_reply_text() -> None:
    client = _client(response=SimpleNamespace(text='{"summary": "ok"}'))
    generator = GeminiTextGenerator(
        "key",
        model_name="gemini-test",
        client=client,
        logger=MagicMock(),
    )

    assert generator.generate("prompt") == '{"summary": "ok"}'
    client.models.generate_content.assert_called_once_with(
        model="gemini-test",
        contents="prompt",
    )


def test_generate_wraps_api_errors() -> None:
    error = errors.APIError(
        429,
        {
            "error": {
                "code": 429,
                "message": "quota exhausted",
                "status": "RESOURCE_EXHAUSTED",
            }
        },
    )
    generator = GeminiTextGenerator(
        "key",
        client=_client(error=error),
        logger=MagicMock(),
    )

    with pytest.raises(RuntimeError, match="Gemini request failed"):
        generator.generate("prompt")


def test_generate_rejects_empty_replies() -> None:
    generator = GeminiTextGenerator(
        "key",
        client=_client(response=SimpleNamespace(text="")),
        logger=MagicMock(),
    )

    with pytest.raises(RuntimeError, match="empty reply"):
        generator.generate("prompt")
