"""
Contact form handling.

A submission is validated, stamped with an id and a UTC timestamp, and
written to the log. Nothing is emailed or stored: the id returned to the
visitor is the only durable trace of the submission.
"""

from __future__ import annotations

import logging
import re
import uuid
from datetime import datetime, timezone

from portfolio_site.errors import InvalidRequestError
from portfolio_site.schemas.contact import ContactRequest, ContactSubmission

logger = logging.getLogger(__name__)

# local-part "@" domain "." tld, no whitespace
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

REQUIRED_FIELDS = ("name", "email", "subject", "message")


class ContactValidationError(InvalidRequestError):
    """A contact submission failed validation; ``fields`` names the culprits."""

    def __init__(self, message: str, *, code: str, fields: list[str]) -> None:
        super().__init__(message, code=code)
        self.fields = fields


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_submission(body: ContactRequest) -> None:
    """
    Raise ContactValidationError if the submission is unusable.

    A malformed email is reported first, so it is always cited even when
    other fields are also missing.
    """
    if not _blank(body.email) and not EMAIL_PATTERN.match(body.email.strip()):
        raise ContactValidationError(
            "Invalid email format", code="INVALID_EMAIL", fields=["email"]
        )

    missing = [name for name in REQUIRED_FIELDS if _blank(getattr(body, name))]
    if missing:
        raise ContactValidationError(
            "All fields are required", code="MISSING_FIELDS", fields=missing
        )


def record_submission(body: ContactRequest) -> ContactSubmission:
    """Validate, stamp and log a submission; return the accepted record."""
    validate_submission(body)

    submission = ContactSubmission(
        id=uuid.uuid4().hex,
        name=body.name.strip(),
        email=body.email.strip(),
        subject=body.subject.strip(),
        message=body.message.strip(),
        timestamp=datetime.now(timezone.utc),
    )
    logger.info(
        "New contact form submission %s from %s <%s>: %s",
        submission.id,
        submission.name,
        submission.email,
        submission.subject,
    )
    return submission
