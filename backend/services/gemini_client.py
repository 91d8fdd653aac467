"""Google Gemini API wrapper with error handling.

Both entry points return ``None`` on any failure so callers can fall
back to the deterministic engine without handling API errors themselves.
"""

import json
import logging

from google import genai
from google.genai import types

from config import settings

logger = logging.getLogger(__name__)

_client: genai.Client | None = None


def is_configured() -> bool:
    return bool(settings.gemini_api_key)


def get_client() -> genai.Client | None:
    global _client
    if not settings.gemini_api_key:
        logger.warning("No GEMINI_API_KEY set - Gemini features disabled")
        return None
    if _client is None:
        _client = genai.Client(api_key=settings.gemini_api_key)
    return _client


def strip_code_fences(text: str) -> str:
    """Remove a surrounding markdown code fence (```json ... ```) if present."""
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        if text.endswith("```"):
            text = text[:-3]
        text = text.strip()
    return text


async def generate_text(prompt: str, temperature: float = 0.3) -> str | None:
    """Send a prompt to Gemini and return the raw response text."""
    client = get_client()
    if client is None:
        return None

    try:
        response = await client.aio.models.generate_content(
            model=settings.gemini_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=temperature,
                max_output_tokens=8192,
            ),
        )
    except Exception as e:
        logger.error("Gemini API error: %s", e)
        return None

    if not response.text:
        logger.warning("Gemini returned an empty response")
        return None
    return strip_code_fences(response.text)


async def generate_json(prompt: str) -> dict | None:
    """Send a prompt to Gemini and parse the JSON response."""
    text = await generate_text(prompt)
    if text is None:
        return None

    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error("Failed to parse Gemini response as JSON: %s", e)
        return None

    if not isinstance(parsed, dict):
        logger.error("Gemini JSON response is a %s, expected an object", type(parsed).__name__)
        return None
    return parsed
