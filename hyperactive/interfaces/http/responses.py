"""
Response builders.

JSON bodies are always produced through JSONResponse so the body and
the application/json content type never disagree. Builders return a
200; callers needing another success status set ``status_code`` on the
returned response before handing it back.
"""

import logging
from typing import Any

from fastapi.encoders import jsonable_encoder
from starlette.responses import JSONResponse, PlainTextResponse, Response

from hyperactive.domain.cors import CorsPolicy
from hyperactive.domain.errors import SerializationFailureError
from hyperactive.interfaces.http.cors import ALLOW_ORIGIN

logger = logging.getLogger(__name__)

HTTP_200 = 200
HTTP_404 = 404

MSG_NOT_FOUND = "Item not found"


def build_response_json(value: Any) -> Response:
    """Build a 200 JSON response out of any serializable value.

    Pydantic models, dataclasses, dates and UUIDs are accepted; they are
    encoded with FastAPI's jsonable_encoder first. The body is compact
    RFC 8259 JSON.

    Args:
        value: The value to encode.

    Returns:
        A response with ``Content-Type: application/json``.

    Raises:
        SerializationFailureError: If the value holds a non-finite float,
            a reference cycle or anything else JSON cannot represent.
    """
    try:
        return JSONResponse(content=jsonable_encoder(value), status_code=HTTP_200)
    except (TypeError, ValueError, RecursionError) as exc:
        logger.debug("Could not encode %s as JSON", type(value).__name__)
        raise SerializationFailureError(exc) from exc


def build_response_json_404(value: Any | None) -> Response:
    """Build a JSON response, or a 404 JSON error if value is None."""
    if value is None:
        return JSONResponse(content={"error": MSG_NOT_FOUND}, status_code=HTTP_404)
    return build_response_json(value)


def build_response_json_cors(value: Any, policy: CorsPolicy) -> Response:
    """Build a JSON response carrying Access-Control-Allow-Origin.

    Browsers look for the CORS headers on the actual response as well as
    on the preflight.
    """
    response = build_response_json(value)
    response.headers[ALLOW_ORIGIN] = policy.allow_origin
    return response


def build_response_200_message(message: str) -> Response:
    """Send a simple 200 response with a plain-text message."""
    return PlainTextResponse(content=message, status_code=HTTP_200)
