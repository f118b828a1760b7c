"""Shared outbound HTTP client and its FastAPI dependency."""

from __future__ import annotations

import httpx
from fastapi import Request

from portfolio_site.config import settings


def create_http_client() -> httpx.AsyncClient:
    """Build the AsyncClient used for all calls to the completion API."""
    return httpx.AsyncClient(
        timeout=settings.upstream_timeout_seconds,
        headers={"Content-Type": "application/json"},
    )


async def get_http_client(request: Request) -> httpx.AsyncClient:
    """FastAPI dependency: the client opened in the app lifespan."""
    return request.app.state.http_client
