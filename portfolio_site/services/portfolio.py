"""Portfolio data provider — validates the static document once and caches it."""

from __future__ import annotations

import logging
from functools import lru_cache

from portfolio_site.schemas.portfolio import PortfolioDocument
from portfolio_site.utils.portfolio_data import (
    DEFAULT_PLACEHOLDER_ID,
    PLACEHOLDER_IMAGES,
    PORTFOLIO,
)

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_portfolio_document() -> PortfolioDocument:
    """Return the validated portfolio document (parsed on first call only)."""
    document = PortfolioDocument.model_validate(PORTFOLIO)
    logger.info(
        "Loaded portfolio document: %d projects, %d skills, %d certificates",
        len(document.projects),
        len(document.skills),
        len(document.certificates),
    )
    return document


def placeholder_image_url(image_id: str) -> str:
    """Map a placeholder id to its image URL; unknown ids get the default image."""
    return PLACEHOLDER_IMAGES.get(image_id, PLACEHOLDER_IMAGES[DEFAULT_PLACEHOLDER_ID])
