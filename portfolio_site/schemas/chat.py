"""Pydantic schemas for the chat endpoint."""

from __future__ import annotations

from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    """A single turn in the conversation history."""

    role: Literal["user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    """
    Body for POST /chat — sent by the chat client.

    ``message`` is optional at the schema level so a missing message is
    reported as a 400 by the relay rather than a schema error.
    """

    model_config = ConfigDict(populate_by_name=True)

    message: Optional[str] = None
    conversation_history: list[ChatMessage] = Field(
        default_factory=list, alias="conversationHistory"
    )


class ChatResponse(BaseModel):
    """Relay reply: assistant text plus the full history to echo next turn."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    conversation_history: list[ChatMessage] = Field(alias="conversationHistory")
    action: Optional[str] = None   # recognized navigation tag, if any
