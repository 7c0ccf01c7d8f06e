"""
Request/response helpers for route handlers.

Each helper borrows the Starlette request read-only and either returns
a value/response or raises a HyperError for the error handlers to render.
"""

from hyperactive.interfaces.http.cors import preflight
from hyperactive.interfaces.http.headers import (
    COMMON_HEADERS,
    CommonHeaders,
    get_common_headers,
    get_header,
    inspect_headers,
    nginx_get_ip,
    nginx_real_ip_only,
)
from hyperactive.interfaces.http.payload import get_payload
from hyperactive.interfaces.http.query import get_query, get_query_opt_param, get_query_param
from hyperactive.interfaces.http.responses import (
    build_response_200_message,
    build_response_json,
    build_response_json_404,
    build_response_json_cors,
)

__all__ = [
    "COMMON_HEADERS",
    "CommonHeaders",
    "build_response_200_message",
    "build_response_json",
    "build_response_json_404",
    "build_response_json_cors",
    "get_common_headers",
    "get_header",
    "get_payload",
    "get_query",
    "get_query_opt_param",
    "get_query_param",
    "inspect_headers",
    "nginx_get_ip",
    "nginx_real_ip_only",
    "preflight",
]
