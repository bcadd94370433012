"""Google Gemini API wrapper: JSON generation and text embeddings."""

import json
import logging

from google import genai
from google.genai import types

from config import settings

logger = logging.getLogger(__name__)

_client: genai.Client | None = None


class GeminiUnavailableError(RuntimeError):
    """Raised when an embedding is requested without a configured API key."""


def get_client() -> genai.Client | None:
    global _client
    if not settings.gemini_api_key:
        logger.warning("No GEMINI_API_KEY set - Gemini features disabled")
        return None
    if _client is None:
        _client = genai.Client(api_key=settings.gemini_api_key)
    return _client


def reset_client() -> None:
    """Drop the cached client (used by tests and after key rotation)."""
    global _client
    _client = None


def _strip_code_fences(text: str) -> str:
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        if text.endswith("```"):
            text = text[:-3]
        text = text.strip()
    return text


async def generate_json(prompt: str, temperature: float = 0.3) -> dict | None:
    """Send a prompt to Gemini and parse the JSON response."""
    client = get_client()
    if client is None:
        return None

    try:
        response = await client.aio.models.generate_content(
            model=settings.generation_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=temperature,
                max_output_tokens=4096,
                response_mime_type="application/json",
            ),
        )
        return json.loads(_strip_code_fences(response.text or ""))

    except json.JSONDecodeError as e:
        logger.error("Failed to parse Gemini response as JSON: %s", e)
        return None
    except Exception as e:
        logger.error("Gemini API error: %s", e)
        return None


async def generate_embedding(text: str) -> list[float]:
    """Embed text into a settings.embedding_dimensions-long vector.

    Unlike generate_json this raises on failure; callers decide how to degrade.
    """
    client = get_client()
    if client is None:
        raise GeminiUnavailableError("GEMINI_API_KEY is not set")

    response = await client.aio.models.embed_content(
        model=settings.embedding_model,
        contents=text,
        config=types.EmbedContentConfig(
            output_dimensionality=settings.embedding_dimensions,
        ),
    )
    if not response.embeddings or response.embeddings[0].values is None:
        raise ValueError("Gemini returned no embedding")
    return list(response.embeddings[0].values)
