"""
Shared test fixtures.

Requests are built from raw ASGI scopes so the helpers can be tested
without a running application.
"""

from collections.abc import Callable

import pytest
from starlette.requests import Request

RequestFactory = Callable[..., Request]


def build_request(
    method: str = "GET",
    path: str = "/",
    query_string: str = "",
    headers: list[tuple[str, str]] | None = None,
    body: bytes = b"",
) -> Request:
    """Build a Starlette request from its parts."""
    scope = {
        "type": "http",
        "http_version": "1.1",
        "method": method,
        "scheme": "http",
        "path": path,
        "raw_path": path.encode("latin-1"),
        "query_string": query_string.encode("latin-1"),
        "headers": [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in (headers or [])
        ],
        "server": ("testserver", 80),
        "client": ("testclient", 50000),
    }

    async def receive() -> dict:
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, receive)


@pytest.fixture
def make_request() -> RequestFactory:
    """Factory fixture returning build_request."""
    return build_request
