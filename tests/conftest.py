"""Shared fixtures: a fake Groq upstream and a fake portfolio API."""

from __future__ import annotations

import asyncio
import json
from typing import Any, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from portfolio_site.config import settings
from portfolio_site.http_client import get_http_client
from portfolio_site.main import app
from portfolio_site.schemas.contact import ContactErrorResponse, ContactRequest
from portfolio_site.services.contact import ContactValidationError, validate_submission
from portfolio_site.utils.portfolio_data import PORTFOLIO
from portfolio_site.utils.prompts import CONTACT_SUCCESS_MESSAGE


def completion_body(content: str) -> dict[str, Any]:
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "choices": [
            {"index": 0, "message": {"role": "assistant", "content": content}, "finish_reason": "stop"}
        ],
    }


class FakeGroq:
    """MockTransport handler standing in for the Groq completions API."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.reply = "Soma has 4+ years of ML experience."
        self.status_code = 200
        self.raw_body: Optional[bytes] = None
        self.body: Optional[Any] = None
        self.error: Optional[Exception] = None

    @property
    def calls(self) -> int:
        return len(self.requests)

    def payload(self, index: int = -1) -> dict[str, Any]:
        return json.loads(self.requests[index].content)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.raw_body is not None:
            return httpx.Response(self.status_code, content=self.raw_body)
        body = self.body if self.body is not None else completion_body(self.reply)
        return httpx.Response(self.status_code, json=body)


@pytest.fixture
def groq() -> FakeGroq:
    return FakeGroq()


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setattr(settings, "groq_api_key", "test-key")
    return "test-key"


@pytest.fixture
def client(groq, api_key):
    async def _mock_http_client():
        async with httpx.AsyncClient(transport=httpx.MockTransport(groq)) as c:
            yield c

    app.dependency_overrides[get_http_client] = _mock_http_client
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


class FakePortfolioApi:
    """
    MockTransport handler that behaves like the relay: echoes history plus
    the new turn. Replies are taken from ``replies`` in order.
    """

    def __init__(self) -> None:
        self.chat_requests: list[dict[str, Any]] = []
        self.contact_requests: list[dict[str, Any]] = []
        self.replies: list[str] = []
        self.fail_chat = False
        self.fail_portfolio = False
        self.gate: Optional[asyncio.Event] = None

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        if request.url.path == "/portfolio-data":
            if self.fail_portfolio:
                return httpx.Response(500, json={"error": "Failed to fetch portfolio data"})
            return httpx.Response(200, json=PORTFOLIO)

        if request.url.path == "/chat":
            body = json.loads(request.content)
            self.chat_requests.append(body)
            if self.gate is not None:
                await self.gate.wait()
            if self.fail_chat:
                return httpx.Response(500, json={"error": "Failed to get AI response. Please try again later."})
            reply = self.replies.pop(0) if self.replies else "Happy to help!"
            history = body.get("conversationHistory", []) + [
                {"role": "user", "content": body["message"]},
                {"role": "assistant", "content": reply},
            ]
            return httpx.Response(200, json={"message": reply, "conversationHistory": history})

        if request.url.path == "/contact":
            body = json.loads(request.content)
            self.contact_requests.append(body)
            try:
                validate_submission(ContactRequest.model_validate(body))
            except ContactValidationError as exc:
                error = ContactErrorResponse(error=exc.message, fields=exc.fields)
                return httpx.Response(400, json=error.model_dump())
            return httpx.Response(
                200,
                json={"success": True, "message": CONTACT_SUCCESS_MESSAGE, "submissionId": "sub-1"},
            )

        return httpx.Response(404, json={"error": "Not Found"})


@pytest.fixture
def fake_api() -> FakePortfolioApi:
    return FakePortfolioApi()
