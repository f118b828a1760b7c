"""Exception types surfaced by the HTTP handlers as JSON error bodies."""

from __future__ import annotations


class PortfolioSiteError(Exception):
    """
    Base class for errors that map to a JSON response.

    ``message`` is safe to show to the caller; anything more detailed belongs
    in the server log.
    """

    status_code: int = 500
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class InvalidRequestError(PortfolioSiteError):
    """Client input failed validation (HTTP 400)."""

    status_code = 400
    code = "INVALID_REQUEST"


class ServiceMisconfiguredError(PortfolioSiteError):
    """A required credential or setting is missing on the server."""

    status_code = 500
    code = "SERVICE_MISCONFIGURED"


class UpstreamError(PortfolioSiteError):
    """The external completion service failed or returned garbage."""

    status_code = 500
    code = "UPSTREAM_FAILURE"
