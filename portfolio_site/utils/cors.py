"""Permissive CORS policy shared by every public route."""

from fastapi.responses import Response

CORS_ALLOW_METHODS = ["POST", "GET", "OPTIONS"]
CORS_ALLOW_HEADERS = ["Content-Type"]

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": ", ".join(CORS_ALLOW_METHODS),
    "Access-Control-Allow-Headers": ", ".join(CORS_ALLOW_HEADERS),
}


def preflight_response() -> Response:
    """Empty 200 with the CORS headers, for plain OPTIONS requests."""
    return Response(status_code=200, headers=CORS_HEADERS)
