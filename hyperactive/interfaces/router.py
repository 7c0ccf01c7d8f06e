"""
Example request router.

Dispatches on (method, path) and answers with the helpers. Mounted by
create_app() as a catch-all endpoint; FastAPI and uvicorn own the
connection, the router only borrows the request.

    GET http://127.0.0.1:8080/
    GET http://127.0.0.1:8080/users?user_id=5
    GET http://127.0.0.1:8080/health
"""

import logging

from pydantic import BaseModel
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

from hyperactive import __version__
from hyperactive.interfaces.http import (
    build_response_json,
    get_query_param,
    inspect_headers,
    preflight,
)

logger = logging.getLogger(__name__)

INDEX = "Hello from the uvicorn -> Starlette -> FastAPI -> Hyperactive stack!"
NOT_FOUND = "Not Found"

HTTP_404 = 404


class User(BaseModel):
    """User returned by the /users endpoint."""

    id: int
    name: str


async def request_router(request: Request) -> Response:
    """Route a request to its handler.

    HyperErrors raised by the helpers propagate to the registered error
    handlers.
    """
    method = request.method
    path = request.url.path
    headers = inspect_headers(request)
    # Authorization and X-Api-Key stay out of the logs
    logger.debug("%s %s user-agent=%s", method, path, headers.get("User-Agent"))

    if method == "OPTIONS":
        return preflight(request, request.app.state.cors_policy)
    if method == "GET" and path in ("/", "/index.html"):
        return PlainTextResponse(INDEX)
    if method == "GET" and path == "/health":
        return build_response_json({"status": "ok", "version": __version__})
    if path == "/users":
        user_id = get_query_param(request, "user_id", int)
        user = User(id=user_id, name="Some Body")
        return build_response_json(user)
    return PlainTextResponse(NOT_FOUND, status_code=HTTP_404)
