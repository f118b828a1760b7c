"""Contact form endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse, Response

from portfolio_site.schemas.contact import (
    ContactErrorResponse,
    ContactRequest,
    ContactResponse,
)
from portfolio_site.services.contact import ContactValidationError, record_submission
from portfolio_site.utils.cors import preflight_response
from portfolio_site.utils.prompts import CONTACT_SUCCESS_MESSAGE

logger = logging.getLogger(__name__)

CONTACT_PATH = "/contact"

router = APIRouter(tags=["contact"])


@router.post(
    CONTACT_PATH,
    response_model=ContactResponse,
    responses={400: {"model": ContactErrorResponse}, 500: {"model": ContactErrorResponse}},
)
async def contact(body: ContactRequest):
    """
    Accept a contact form submission.

    Validation failures return 400 with the failing category and fields;
    the visitor never sees internals on a 500.
    """
    try:
        submission = record_submission(body)
    except ContactValidationError as exc:
        logger.info("Contact submission rejected (%s): %s", exc.code, exc.fields)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ContactErrorResponse(error=exc.message, fields=exc.fields).model_dump(),
            headers={"X-Error-Code": exc.code},
        )
    except Exception:
        logger.exception("Contact form error")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ContactErrorResponse(
                error="Internal server error. Please try again later."
            ).model_dump(exclude={"fields"}),
        )

    return ContactResponse(message=CONTACT_SUCCESS_MESSAGE, submission_id=submission.id)


@router.options(CONTACT_PATH)
async def contact_preflight() -> Response:
    return preflight_response()
