"""
Chat relay — one stateless chat turn.

The client owns the conversation history and sends it with every message;
the relay appends the new user turn and the assistant's reply and hands the
whole list back. Nothing is stored server-side.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from portfolio_site.errors import InvalidRequestError, UpstreamError
from portfolio_site.schemas.chat import ChatMessage, ChatResponse
from portfolio_site.services.groq import GroqError, call_groq
from portfolio_site.utils.actions import extract_action
from portfolio_site.utils.prompts import build_chat_messages

logger = logging.getLogger(__name__)

UPSTREAM_FAILURE_MESSAGE = "Failed to get AI response. Please try again later."


async def relay_chat(
    message: Optional[str],
    history: list[ChatMessage],
    client: httpx.AsyncClient,
) -> ChatResponse:
    """
    Forward one user message (plus prior turns) to the completion service.

    Returns the assistant reply and ``history + [user, assistant]``.
    Raises InvalidRequestError for a missing/blank message, before any
    upstream call; ServiceMisconfiguredError propagates from call_groq;
    every other upstream failure becomes UpstreamError.
    """
    if message is None or not message.strip():
        logger.info("Rejected chat turn with empty message")
        raise InvalidRequestError("Message is required", code="MESSAGE_REQUIRED")

    prior = [turn.model_dump() for turn in history]
    messages = build_chat_messages(prior, message)

    try:
        reply = await call_groq(messages, client)
    except GroqError as exc:
        logger.error("Chat relay upstream failure: %s", exc)
        raise UpstreamError(UPSTREAM_FAILURE_MESSAGE) from exc

    updated = [
        *history,
        ChatMessage(role="user", content=message),
        ChatMessage(role="assistant", content=reply),
    ]
    action = extract_action(reply)
    if action:
        logger.debug("Assistant reply carries action tag %s", action)

    return ChatResponse(message=reply, conversation_history=updated, action=action)
