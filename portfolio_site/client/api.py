"""
HTTP client for the portfolio site's own endpoints.

Used by ChatSession and the terminal front-end. Every failure (transport
error, non-2xx status, unparseable body) is raised as ApiClientError.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import httpx

from portfolio_site.config import settings
from portfolio_site.schemas.chat import ChatMessage, ChatRequest, ChatResponse
from portfolio_site.schemas.contact import ContactRequest, ContactResponse
from portfolio_site.schemas.portfolio import PortfolioDocument

logger = logging.getLogger(__name__)


class ApiClientError(Exception):
    """A call to the portfolio site API did not produce a usable result."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        detail: Optional[dict] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail or {}


class PortfolioApiClient:
    """Thin async wrapper over POST /chat, POST /contact and GET /portfolio-data."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.api_base_url,
            transport=transport,
            timeout=timeout,
        )

    async def __aenter__(self) -> "PortfolioApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> dict:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            raise ApiClientError(f"{method} {path} failed: {exc}") from exc

        try:
            body = response.json()
        except ValueError:
            body = None

        if response.is_error:
            detail = body if isinstance(body, dict) else {}
            raise ApiClientError(
                detail.get("error") or f"{method} {path} returned {response.status_code}",
                status_code=response.status_code,
                detail=detail,
            )
        if body is None:
            raise ApiClientError(f"{method} {path} returned a non-JSON body")
        return body

    async def send_message(
        self,
        message: str,
        history: Sequence[ChatMessage] = (),
    ) -> ChatResponse:
        """Send one chat turn with the history returned by the previous turn."""
        request = ChatRequest(message=message, conversation_history=list(history))
        body = await self._request(
            "POST", "/chat", json=request.model_dump(mode="json", by_alias=True)
        )
        try:
            return ChatResponse.model_validate(body)
        except ValueError as exc:
            raise ApiClientError("Malformed chat response") from exc

    async def get_portfolio_data(self) -> PortfolioDocument:
        body = await self._request("GET", "/portfolio-data")
        try:
            return PortfolioDocument.model_validate(body)
        except ValueError as exc:
            raise ApiClientError("Malformed portfolio document") from exc

    async def submit_contact(
        self,
        name: str,
        email: str,
        subject: str,
        message: str,
    ) -> ContactResponse:
        """Submit the contact form; a 400 surfaces as ApiClientError with ``detail["fields"]``."""
        request = ContactRequest(name=name, email=email, subject=subject, message=message)
        body = await self._request("POST", "/contact", json=request.model_dump())
        try:
            return ContactResponse.model_validate(body)
        except ValueError as exc:
            raise ApiClientError("Malformed contact response") from exc
