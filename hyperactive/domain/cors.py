"""
CORS policy value object.

Built once at startup from settings and shared read-only by every
request. No framework imports allowed.
"""

from dataclasses import dataclass
from enum import Enum


class CorsHeadersMode(str, Enum):
    """How Access-Control-Allow-Headers is filled in on a preflight."""

    FIXED_LIST = "fixed-list"
    ECHO_REQUESTED = "echo-requested"


@dataclass(frozen=True)
class CorsPolicy:
    """CORS headers answered to browsers.

    Attributes:
        allow_origin: Value for Access-Control-Allow-Origin.
        allow_methods: Value for Access-Control-Allow-Methods.
        allow_headers: Value for Access-Control-Allow-Headers in fixed-list
            mode, and the fallback in echo-requested mode.
        headers_mode: Whether to answer the fixed list or echo the
            Access-Control-Request-Headers sent by the browser.
        max_age: Seconds a browser may cache the preflight. Omitted when None.
    """

    allow_origin: str = "*"
    allow_methods: str = "POST, GET, OPTIONS"
    allow_headers: str = "*"
    headers_mode: CorsHeadersMode = CorsHeadersMode.FIXED_LIST
    max_age: int | None = None
