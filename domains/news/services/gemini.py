"""Gemini summarisation for news articles.

Best effort: any failure is logged and returns None so the caller can
fall back to a placeholder.
"""

from typing import Optional

import httpx

from config import GEMINI_API_KEY, GEMINI_MODEL, HTTP_TIMEOUT_SECONDS
from logger import logger
from ..config import GEMINI_API_BASE, GENERATION_CONFIG, SUMMARY_PROMPT


def _extract_text(data: dict) -> Optional[str]:
    """Pull candidates[0].content.parts[0].text out of a Gemini response."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) else None


async def summarize(text: str) -> Optional[str]:
    """Summarise text in two sentences, or None if unavailable."""
    if not isinstance(text, str) or not text.strip():
        return None

    if not GEMINI_API_KEY:
        logger.warning("GEMINI_API_KEY not configured, skipping summary")
        return None

    payload = {
        "contents": [
            {"parts": [{"text": SUMMARY_PROMPT.format(text=text)}]}
        ],
        "generationConfig": GENERATION_CONFIG,
    }

    try:
        async with httpx.AsyncClient(timeout=HTTP_TIMEOUT_SECONDS) as client:
            response = await client.post(
                f"{GEMINI_API_BASE}/{GEMINI_MODEL}:generateContent",
                params={"key": GEMINI_API_KEY},
                json=payload,
            )
            response.raise_for_status()
            data = response.json()
    except httpx.HTTPStatusError as e:
        logger.error(f"Gemini API error: HTTP {e.response.status_code} - {e.response.text[:200]}")
        return None
    except (httpx.HTTPError, ValueError) as e:
        logger.error(f"Gemini API error: {e}")
        return None

    summary = _extract_text(data)
    if not summary or not summary.strip():
        logger.warning("Gemini response contained no summary text")
        return None

    return summary.strip()
