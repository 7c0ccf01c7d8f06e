"""
Centralized error handlers for FastAPI.

Maps every HyperError kind to exactly one HTTP status and a JSON body.
Client-input errors (missing or malformed parameters) echo their message;
internal and upstream failures are logged and answered generically.
All error responses use the {"error": ..., "detail": ...} shape.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from hyperactive.domain.errors import ErrorKind, HyperError

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_500 = 500
HTTP_502 = 502

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.MISSING_PARAMETER: HTTP_400,
    ErrorKind.INVALID_PARAMETER_FORMAT: HTTP_400,
    ErrorKind.INVALID_PAYLOAD: HTTP_400,
    ErrorKind.SERIALIZATION_FAILURE: HTTP_500,
    ErrorKind.UPSTREAM_IO_FAILURE: HTTP_502,
}

ERROR_BY_KIND: dict[ErrorKind, str] = {
    ErrorKind.MISSING_PARAMETER: "Missing query parameter",
    ErrorKind.INVALID_PARAMETER_FORMAT: "Invalid query parameter",
    ErrorKind.INVALID_PAYLOAD: "Invalid request body",
    ErrorKind.SERIALIZATION_FAILURE: "Internal server error",
    ErrorKind.UPSTREAM_IO_FAILURE: "Upstream service failure",
}

# Only these kinds describe client input, so only these echo their message.
_ECHOED_KINDS = frozenset(
    {ErrorKind.MISSING_PARAMETER, ErrorKind.INVALID_PARAMETER_FORMAT}
)


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def into_response(exc: HyperError) -> JSONResponse:
    """Render a HyperError as an HTTP response.

    Total over HyperError: every kind has one fixed status code, and an
    error without a known kind (the bare base class, or a subclass that
    never set one) is answered as a generic 500.

    Args:
        exc: The error raised by a helper or handler.

    Returns:
        A JSON error response.
    """
    kind = getattr(exc, "kind", None)
    if kind not in STATUS_BY_KIND:
        logger.error("Untagged %s: %s", type(exc).__name__, exc)
        return _error_response(HTTP_500, "Internal server error")

    status_code = STATUS_BY_KIND[kind]
    if kind in _ECHOED_KINDS:
        logger.warning("%s: %s", kind.value, exc.message)
        return _error_response(status_code, ERROR_BY_KIND[kind], exc.message)

    if status_code >= HTTP_500:
        logger.error("%s: %s", kind.value, exc.message)
    else:
        logger.warning("%s: %s", kind.value, exc.message)
    return _error_response(status_code, ERROR_BY_KIND[kind])


def register_error_handlers(app: FastAPI) -> None:
    """Register the helper error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(HyperError)
    async def handle_hyper_error(_request: Request, exc: HyperError) -> JSONResponse:
        """Convert any helper failure into its response."""
        return into_response(exc)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
