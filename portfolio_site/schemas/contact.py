"""Pydantic schemas for the contact form endpoint."""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class ContactRequest(BaseModel):
    """Body for POST /contact. Presence is checked by the handler, not here."""

    name: Optional[str] = None
    email: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None


class ContactSubmission(BaseModel):
    """An accepted submission, as written to the log."""

    id: str
    name: str
    email: str
    subject: str
    message: str
    timestamp: datetime
    status: Literal["received"] = "received"


class ContactResponse(BaseModel):
    """Success body for POST /contact."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str
    submission_id: str = Field(alias="submissionId")


class ContactErrorResponse(BaseModel):
    """Failure body for POST /contact."""

    success: bool = False
    error: str
    fields: list[str] = Field(default_factory=list)
