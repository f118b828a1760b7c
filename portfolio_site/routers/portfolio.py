"""Portfolio data and placeholder image endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, status
from fastapi.responses import RedirectResponse, Response

from portfolio_site.schemas.portfolio import PortfolioDocument
from portfolio_site.services.portfolio import get_portfolio_document, placeholder_image_url
from portfolio_site.utils.cors import preflight_response

logger = logging.getLogger(__name__)

router = APIRouter(tags=["portfolio"])


@router.get("/portfolio-data", response_model=PortfolioDocument)
async def portfolio_data() -> PortfolioDocument:
    """Return the full portfolio document (profile, projects, skills, experience, certificates)."""
    return get_portfolio_document()


@router.options("/portfolio-data")
async def portfolio_data_preflight() -> Response:
    return preflight_response()


@router.get("/placeholder-image/{image_id}")
async def placeholder_image(image_id: str) -> RedirectResponse:
    """Redirect to the stock image for a project; unknown ids get project1's."""
    return RedirectResponse(
        url=placeholder_image_url(image_id), status_code=status.HTTP_302_FOUND
    )


@router.options("/placeholder-image/{image_id}")
async def placeholder_image_preflight(image_id: str) -> Response:
    return preflight_response()
