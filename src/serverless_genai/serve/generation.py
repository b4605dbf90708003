"""Gemini generation proxy.

Holds the process-wide client handle and turns one prompt into a
GenerationResult. HTTP status mapping lives in the app module.
"""
from __future__ import annotations
import logging
from typing import Any

from google import genai
from google.genai import types

from serverless_genai.common.schema import GenerationResult, Outcome
from serverless_genai.common.settings import Settings

LOGGER = logging.getLogger("serverless_genai.serve.generation")

MODEL_ID = "gemini-2.5-flash"
MAX_OUTPUT_TOKENS = 256

UNAVAILABLE_MESSAGE = "AI service is unavailable. The server is missing required configuration (API Key)."
PROMPT_REQUIRED_MESSAGE = "Prompt is required in the request body."
UPSTREAM_ERROR_MESSAGE = "Failed to generate content from the AI model due to an internal API error."


def create_client(api_key: str | None) -> genai.Client | None:
    """
    Build the Gemini client, or return None when no credential is configured.

    Args:
        api_key: Gemini API key.
    """
    if not api_key:
        LOGGER.warning(
            "GEMINI_API_KEY is not set. The /api/generate endpoint will not work "
            "until the key is configured and the service restarted."
        )
        return None
    client = genai.Client(api_key=api_key)
    LOGGER.info("Gemini AI client initialized successfully.")
    return client


def _first_text(response: Any) -> str:
    text = response.candidates[0].content.parts[0].text
    if text is None:
        raise ValueError("First candidate part carries no text")
    return text


class GenerationProxy:
    """Forwards prompts to Gemini with a fixed model and output-token cap."""

    def __init__(self, client: Any | None) -> None:
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "GenerationProxy":
        return cls(create_client(settings.gemini_api_key))

    @property
    def client(self) -> Any | None:
        return self._client

    @property
    def configured(self) -> bool:
        return self._client is not None

    async def generate(self, prompt: str | None) -> GenerationResult:
        if self._client is None:
            LOGGER.error(
                "AI service is not configured because GEMINI_API_KEY is missing from the environment."
            )
            return GenerationResult.failed(Outcome.UNAVAILABLE, UNAVAILABLE_MESSAGE)

        if not prompt:
            LOGGER.debug("Rejected request without a prompt")
            return GenerationResult.failed(Outcome.INVALID_PROMPT, PROMPT_REQUIRED_MESSAGE)

        try:
            response = await self._client.aio.models.generate_content(
                model=MODEL_ID,
                contents=[types.Content(role="user", parts=[types.Part(text=prompt)])],
                config=types.GenerateContentConfig(max_output_tokens=MAX_OUTPUT_TOKENS),
            )
            text = _first_text(response)
        except Exception:
            LOGGER.exception("Gemini API call failed")
            return GenerationResult.failed(Outcome.UPSTREAM_ERROR, UPSTREAM_ERROR_MESSAGE)

        return GenerationResult.ok(text)
