"""POST /chat — relay behaviour against a mocked Groq API."""

from __future__ import annotations

import httpx
import pytest

from portfolio_site.config import settings
from portfolio_site.utils.prompts import SYSTEM_PROMPT


def test_chat_appends_user_and_assistant_turns(client, groq):
    history = [
        {"role": "user", "content": "Hi"},
        {"role": "assistant", "content": "Hello! Ask me anything about Soma."},
    ]
    groq.reply = "He built an ML analytics dashboard."

    resp = client.post("/chat", json={"message": "What has he built?", "conversationHistory": history})

    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "He built an ML analytics dashboard."
    assert len(body["conversationHistory"]) == len(history) + 2
    assert body["conversationHistory"][:2] == history
    assert body["conversationHistory"][-2:] == [
        {"role": "user", "content": "What has he built?"},
        {"role": "assistant", "content": "He built an ML analytics dashboard."},
    ]
    assert body["action"] is None


def test_chat_defaults_to_empty_history(client, groq):
    resp = client.post("/chat", json={"message": "Hello"})

    assert resp.status_code == 200
    assert [turn["role"] for turn in resp.json()["conversationHistory"]] == ["user", "assistant"]


def test_chat_builds_prompt_in_order(client, groq):
    history = [{"role": "user", "content": "a"}, {"role": "assistant", "content": "b"}]

    client.post("/chat", json={"message": "c", "conversationHistory": history})

    payload = groq.payload()
    assert payload["messages"][0] == {"role": "system", "content": SYSTEM_PROMPT}
    assert payload["messages"][1:] == history + [{"role": "user", "content": "c"}]
    assert payload["model"] == settings.groq_model
    assert payload["max_tokens"] == 1000
    assert payload["temperature"] == 0.7
    assert groq.requests[0].headers["Authorization"] == "Bearer test-key"


@pytest.mark.parametrize("body", [{}, {"message": ""}, {"message": "   "}, {"message": None}])
def test_chat_rejects_missing_message_without_upstream_call(client, groq, body):
    resp = client.post("/chat", json=body)

    assert resp.status_code == 400
    assert resp.json() == {"error": "Message is required", "code": "MESSAGE_REQUIRED"}
    assert groq.calls == 0


def test_chat_without_api_key_is_misconfiguration(client, groq, monkeypatch):
    monkeypatch.setattr(settings, "groq_api_key", None)

    resp = client.post("/chat", json={"message": "Hello"})

    assert resp.status_code == 500
    assert resp.json()["code"] == "SERVICE_MISCONFIGURED"
    assert groq.calls == 0


def test_chat_upstream_error_status(client, groq):
    groq.status_code = 503

    resp = client.post("/chat", json={"message": "Hello"})

    assert resp.status_code == 500
    assert resp.json() == {
        "error": "Failed to get AI response. Please try again later.",
        "code": "UPSTREAM_FAILURE",
    }
    assert groq.calls == 1


@pytest.mark.parametrize(
    "body",
    [{"choices": []}, {"choices": [{"message": {}}]}, {"error": "nope"}, ["not", "an", "object"]],
)
def test_chat_malformed_upstream_body(client, groq, body):
    groq.body = body

    resp = client.post("/chat", json={"message": "Hello"})

    assert resp.status_code == 500
    assert resp.json()["code"] == "UPSTREAM_FAILURE"


def test_chat_non_json_upstream_body(client, groq):
    groq.raw_body = b"<html>Bad Gateway</html>"

    resp = client.post("/chat", json={"message": "Hello"})

    assert resp.status_code == 500
    assert resp.json()["code"] == "UPSTREAM_FAILURE"


def test_chat_upstream_unreachable(client, groq):
    groq.error = httpx.ConnectError("connection refused")

    resp = client.post("/chat", json={"message": "Hello"})

    assert resp.status_code == 500
    assert resp.json()["code"] == "UPSTREAM_FAILURE"
    assert groq.calls == 1


def test_chat_reports_action_tag(client, groq):
    groq.reply = "Here are his skills! [action:show_skills]"

    resp = client.post("/chat", json={"message": "Show me his skills"})

    body = resp.json()
    assert body["action"] == "show_skills"
    # history keeps the reply exactly as the model produced it
    assert body["conversationHistory"][-1]["content"] == "Here are his skills! [action:show_skills]"


def test_chat_invalid_history_role_is_bad_request(client, groq):
    resp = client.post(
        "/chat",
        json={"message": "Hi", "conversationHistory": [{"role": "system", "content": "x"}]},
    )

    assert resp.status_code == 400
    assert resp.json()["code"] == "INVALID_BODY"
    assert groq.calls == 0


def test_chat_malformed_json_is_bad_request(client, groq):
    resp = client.post("/chat", content=b"{not json", headers={"Content-Type": "application/json"})

    assert resp.status_code == 400
    assert groq.calls == 0
