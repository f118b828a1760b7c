"""
Portfolio Site — FastAPI application entry point.
Lifespan: validate portfolio document → open the shared outbound HTTP client.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from portfolio_site.config import settings
from portfolio_site.errors import PortfolioSiteError
from portfolio_site.http_client import create_http_client
from portfolio_site.routers import chat, contact, health, portfolio
from portfolio_site.routers.contact import CONTACT_PATH
from portfolio_site.schemas.contact import ContactErrorResponse
from portfolio_site.services.contact import REQUIRED_FIELDS
from portfolio_site.services.portfolio import get_portfolio_document
from portfolio_site.utils.cors import CORS_ALLOW_HEADERS, CORS_ALLOW_METHODS

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan handler.
    1. Parse the portfolio document so a broken data module fails at boot.
    2. Open the AsyncClient shared by all chat relay calls.
    """
    logger.info("Starting Portfolio Site (env=%s)", settings.app_env)

    get_portfolio_document()
    if not settings.groq_api_key:
        logger.warning("GROQ_API_KEY is not set; /chat will answer 500 until it is.")

    app.state.http_client = create_http_client()

    yield

    logger.info("Shutting down Portfolio Site.")
    await app.state.http_client.aclose()


app = FastAPI(
    title="Portfolio Site",
    description="Chat relay, contact form and portfolio data for the personal portfolio site.",
    version="1.0.0",
    lifespan=lifespan,
)

# ── CORS ─────────────────────────────────────────────────────────────────────

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=False,
    allow_methods=CORS_ALLOW_METHODS,
    allow_headers=CORS_ALLOW_HEADERS,
)

# ── Routers ──────────────────────────────────────────────────────────────────

app.include_router(health.router)
app.include_router(chat.router)
app.include_router(contact.router)
app.include_router(portfolio.router)


# ── Exception handlers ───────────────────────────────────────────────────────

def _error_response(status_code: int, message: str, code: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": message, "code": code},
        headers={"X-Error-Code": code},
    )


@app.exception_handler(PortfolioSiteError)
async def portfolio_site_error_handler(request: Request, exc: PortfolioSiteError) -> JSONResponse:
    """Render domain errors as {"error", "code"} with their own status."""
    if exc.status_code >= 500:
        logger.error("%s on %s %s: %s", exc.code, request.method, request.url.path, exc.message)
    return _error_response(exc.status_code, exc.message, exc.code)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Malformed JSON or wrongly-typed fields are a 400, not FastAPI's default 422.
    /contact keeps its own {"success": false, "error"} shape.
    """
    logger.info("Invalid body on %s %s: %s", request.method, request.url.path, exc.errors())
    if request.url.path.rstrip("/") == CONTACT_PATH:
        fields = sorted({
            str(err["loc"][1]) for err in exc.errors()
            if len(err.get("loc", ())) > 1 and err["loc"][0] == "body"
            and err["loc"][1] in REQUIRED_FIELDS
        })
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ContactErrorResponse(error="Invalid request body", fields=fields).model_dump(),
            headers={"X-Error-Code": "INVALID_BODY"},
        )
    return _error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body", "INVALID_BODY")


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Keep routing errors (404, 405) in the same {"error"} shape as everything else."""
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        response = _error_response(exc.status_code, "Method not allowed", "METHOD_NOT_ALLOWED")
    else:
        response = _error_response(exc.status_code, str(exc.detail), f"HTTP_{exc.status_code}")
    if exc.headers:
        response.headers.update(exc.headers)
    return response


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return a machine-readable error for any unhandled exception."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url)
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", "INTERNAL_ERROR"
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("portfolio_site.main:app", host="0.0.0.0", port=8000, reload=settings.app_env == "development")
