"""Pydantic schemas package."""

from portfolio_site.schemas.chat import ChatMessage, ChatRequest, ChatResponse
from portfolio_site.schemas.contact import (
    ContactErrorResponse,
    ContactRequest,
    ContactResponse,
    ContactSubmission,
)
from portfolio_site.schemas.portfolio import (
    Certificate,
    Experience,
    PortfolioDocument,
    Project,
    Skill,
    TimelineEntry,
)

__all__ = [
    "ChatMessage", "ChatRequest", "ChatResponse",
    "ContactRequest", "ContactSubmission", "ContactResponse", "ContactErrorResponse",
    "Project", "Skill", "TimelineEntry", "Experience", "Certificate",
    "PortfolioDocument",
]
