"""
CORS preflight responder.

Browsers check CORS headers on BOTH the preflight and the actual
request, so a preflight must always be answered. Whether a request is
a preflight is decided by the router (OPTIONS), not here.
"""

import re

from starlette.requests import Request
from starlette.responses import Response

from hyperactive.domain.cors import CorsHeadersMode, CorsPolicy

HTTP_204 = 204

ALLOW_ORIGIN = "Access-Control-Allow-Origin"
ALLOW_METHODS = "Access-Control-Allow-Methods"
ALLOW_HEADERS = "Access-Control-Allow-Headers"
MAX_AGE = "Access-Control-Max-Age"
REQUEST_HEADERS = "Access-Control-Request-Headers"


# RFC 9110 field-name token
TOKEN_PATTERN = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")


def _requested_headers(request: Request) -> str | None:
    """Return the requested header names normalized, or None if unusable."""
    raw = request.headers.get(REQUEST_HEADERS, "")
    names = [name.strip() for name in raw.split(",") if name.strip()]
    if not names or not all(TOKEN_PATTERN.fullmatch(name) for name in names):
        return None
    return ", ".join(names)


def _allowed_headers(request: Request, policy: CorsPolicy) -> str:
    if policy.headers_mode is CorsHeadersMode.ECHO_REQUESTED:
        requested = _requested_headers(request)
        if requested is not None:
            return requested
    return policy.allow_headers


def preflight(request: Request, policy: CorsPolicy) -> Response:
    """Answer a CORS preflight request.

    Never fails and never reads the request body.

    Example:
        if request.method == "OPTIONS":
            return preflight(request, request.app.state.cors_policy)

    Args:
        request: The OPTIONS request.
        policy: The process-wide CORS policy.

    Returns:
        An empty 204 response carrying the CORS headers.
    """
    response = Response(status_code=HTTP_204)
    response.headers[ALLOW_ORIGIN] = policy.allow_origin
    response.headers[ALLOW_HEADERS] = _allowed_headers(request, policy)
    response.headers[ALLOW_METHODS] = policy.allow_methods
    if policy.max_age is not None:
        response.headers[MAX_AGE] = str(policy.max_age)
    return response
