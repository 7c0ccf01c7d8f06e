"""
Outbound JSON client.

Thin wrappers over httpx for calling other JSON services. Every call
sends ``Accept: application/json`` and an ``X-Api-Key`` header. The key
is the ``api_key`` argument when given, otherwise the X_API_KEY setting,
otherwise an empty string.

Failures surface as HyperErrors so a handler can let them propagate:
- payload encoding problems raise SerializationFailureError
- transport errors, non-2xx statuses and undecodable bodies raise
  UpstreamIoFailureError
"""

import json
import logging
from typing import Any, TypeVar

import httpx
from fastapi.encoders import jsonable_encoder
from pydantic import TypeAdapter, ValidationError

from hyperactive.core.config import settings
from hyperactive.domain.errors import SerializationFailureError, UpstreamIoFailureError

logger = logging.getLogger(__name__)

T = TypeVar("T")

APPLICATION_JSON = "application/json"
JSON_UTF8 = "application/json; charset=UTF-8"


def _api_key(api_key: str | None) -> str:
    if api_key is not None:
        return api_key
    return settings.x_api_key


def _encode(payload: Any) -> bytes:
    try:
        return json.dumps(
            jsonable_encoder(payload), allow_nan=False, separators=(",", ":")
        ).encode("utf-8")
    except (TypeError, ValueError, RecursionError) as exc:
        raise SerializationFailureError(exc) from exc


def _decode(response: httpx.Response, response_type: type[T]) -> T:
    try:
        return TypeAdapter(response_type).validate_json(response.content)
    except ValidationError as exc:
        logger.error("Undecodable response from %s: %s", response.request.url, exc)
        raise UpstreamIoFailureError(exc) from exc


async def _send(
    method: str,
    url: str,
    api_key: str | None,
    body: bytes | None,
    client: httpx.AsyncClient | None,
) -> httpx.Response:
    headers = {"Accept": APPLICATION_JSON, "X-Api-Key": _api_key(api_key)}
    if body is not None:
        headers["Content-Type"] = JSON_UTF8

    try:
        if client is not None:
            response = await client.request(method, url, headers=headers, content=body)
        else:
            async with httpx.AsyncClient(
                timeout=settings.upstream_timeout_seconds
            ) as owned_client:
                response = await owned_client.request(
                    method, url, headers=headers, content=body
                )
        response.raise_for_status()
    except httpx.HTTPError as exc:
        logger.error("%s %s failed: %s", method, url, exc)
        raise UpstreamIoFailureError(exc) from exc
    return response


async def get(
    url: str,
    response_type: type[T],
    api_key: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> T:
    """GET ``url`` and decode the JSON response into ``response_type``.

    Args:
        url: Absolute URL to call.
        response_type: A pydantic model or any type pydantic can validate.
        api_key: X-Api-Key to send. Falls back to the X_API_KEY setting.
        client: Optional shared client. A short-lived one is used otherwise.

    Returns:
        The decoded response body.
    """
    response = await _send("GET", url, api_key, None, client)
    return _decode(response, response_type)


async def post(
    url: str,
    payload: Any,
    response_type: type[T],
    api_key: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> T:
    """POST ``payload`` as JSON and decode the response into ``response_type``."""
    body = _encode(payload)
    response = await _send("POST", url, api_key, body, client)
    return _decode(response, response_type)


async def post_noback(
    url: str,
    payload: Any,
    api_key: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> None:
    """POST ``payload`` as JSON, expecting nothing back."""
    body = _encode(payload)
    await _send("POST", url, api_key, body, client)


async def put(
    url: str,
    response_type: type[T],
    api_key: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> T:
    """PUT with an empty body and decode the response into ``response_type``."""
    response = await _send("PUT", url, api_key, None, client)
    return _decode(response, response_type)
