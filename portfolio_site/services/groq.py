"""
Groq service — wraps calls to the Groq chat-completions API.

Groq speaks the OpenAI wire format, so this is a single JSON POST with a
bearer token. Single attempt, no fallback model: any failure surfaces as
GroqError for the caller to report.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from portfolio_site.config import settings
from portfolio_site.errors import ServiceMisconfiguredError

logger = logging.getLogger(__name__)


class GroqError(Exception):
    """Raised when the completion API fails or returns an unusable body."""


def _extract_content(data: Any) -> str:
    """Pull choices[0].message.content out of a completion body."""
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as exc:
        raise GroqError("Invalid response structure from Groq API") from exc
    if not isinstance(content, str):
        raise GroqError("Invalid response structure from Groq API")
    return content


async def call_groq(
    messages: list[dict[str, str]],
    client: httpx.AsyncClient,
) -> str:
    """
    Send a full message list to Groq and return the assistant's text.

    Raises ServiceMisconfiguredError when no API key is configured (checked
    before any network traffic) and GroqError for every upstream failure.
    """
    if not settings.groq_api_key:
        raise ServiceMisconfiguredError("GROQ_API_KEY not configured")

    payload = {
        "model": settings.groq_model,
        "messages": messages,
        "max_tokens": settings.chat_max_tokens,
        "temperature": settings.chat_temperature,
    }
    logger.debug("Groq request (%s): %d messages", settings.groq_model, len(messages))

    try:
        response = await client.post(
            settings.groq_api_url,
            json=payload,
            headers={"Authorization": f"Bearer {settings.groq_api_key}"},
            timeout=settings.upstream_timeout_seconds,
        )
    except httpx.HTTPError as exc:
        logger.error("Groq API unreachable: %s", exc)
        raise GroqError(f"Groq API unreachable: {exc}") from exc

    if response.is_error:
        logger.error(
            "Groq API error: %s %s", response.status_code, response.reason_phrase
        )
        raise GroqError(f"Groq API error: {response.status_code}")

    try:
        data = response.json()
    except ValueError as exc:
        logger.error("Groq API returned non-JSON body: %s", response.text[:200])
        raise GroqError("Groq API returned a non-JSON body") from exc

    content = _extract_content(data)
    logger.debug("Groq response:\n%s", content)
    return content
