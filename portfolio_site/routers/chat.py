"""
Chat endpoint — called by the chat client with the full conversation history.
Returns the assistant reply and the updated history as one JSON body.
"""

from __future__ import annotations

import logging

import httpx
from fastapi import APIRouter, Depends
from fastapi.responses import Response

from portfolio_site.http_client import get_http_client
from portfolio_site.schemas.chat import ChatRequest, ChatResponse
from portfolio_site.services.chat_relay import relay_chat
from portfolio_site.utils.cors import preflight_response

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])


@router.post("/chat", response_model=ChatResponse, response_model_by_alias=True)
async def chat(
    body: ChatRequest,
    client: httpx.AsyncClient = Depends(get_http_client),
) -> ChatResponse:
    """
    Relay one user message to the completion service.

    The client must send back exactly the conversationHistory it received on
    the previous turn; the relay keeps no state between calls.

    Errors:
      400 MESSAGE_REQUIRED       — message missing or blank (no upstream call)
      500 SERVICE_MISCONFIGURED  — GROQ_API_KEY not set
      500 UPSTREAM_FAILURE       — completion API failed or returned garbage
    """
    return await relay_chat(body.message, body.conversation_history, client)


@router.options("/chat")
async def chat_preflight() -> Response:
    return preflight_response()
