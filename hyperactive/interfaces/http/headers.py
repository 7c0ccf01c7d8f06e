"""
Request header inspection.

Reads well-known headers into read-only snapshots for logging and
handler decisions. A missing header is never an error.
"""

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict
from starlette.requests import Request

COMMON_HEADERS: tuple[str, ...] = (
    "User-Agent",
    "Content-Type",
    "Authorization",
    "Accept",
    "Host",
    "X-Api-Key",
)

# Used when the caller needs a string but no client address is known.
UNKNOWN_IP = "?.?.?.?"

DOCKER_NETWORK_PREFIX = "172."


class CommonHeaders(BaseModel):
    """The most frequently used request headers."""

    model_config = ConfigDict(frozen=True)

    user_agent: str | None = None
    x_api_key: str | None = None
    host: str | None = None
    accept: str | None = None


def get_header(request: Request, name: str) -> str | None:
    """Return the value of a header, or None if it is missing or empty.

    Lookup is case-insensitive. When a header is repeated, the first
    value is returned.
    """
    value = request.headers.get(name)
    if not value:
        return None
    return value


def inspect_headers(request: Request) -> Mapping[str, str]:
    """Snapshot the headers listed in COMMON_HEADERS.

    Args:
        request: The incoming request.

    Returns:
        A read-only mapping from canonical header name to value. Headers
        that are absent or empty are left out.
    """
    found: dict[str, str] = {}
    for name in COMMON_HEADERS:
        value = get_header(request, name)
        if value is not None:
            found[name] = value
    return MappingProxyType(found)


def get_common_headers(request: Request) -> CommonHeaders:
    """Return the CommonHeaders of a request."""
    return CommonHeaders(
        user_agent=get_header(request, "User-Agent"),
        x_api_key=get_header(request, "X-Api-Key"),
        host=get_header(request, "Host"),
        accept=get_header(request, "Accept"),
    )


def nginx_real_ip_only(ip_addresses: str) -> str | None:
    """Pick the client address out of an X-Forwarded-For value.

    Behind nginx running in docker with
    ``proxy_set_header X-Forwarded-For $proxy_add_x_forwarded_for;``
    the header reads like ``"104.218.65.97, 172.69.59.58"``. The docker
    bridge addresses (172.*) are dropped and the first remaining entry
    is returned.

    Args:
        ip_addresses: The raw header value, entries separated by ", ".

    Returns:
        The first non-docker address, or None if there is none.
    """
    for ip in ip_addresses.split(", "):
        if not ip.startswith(DOCKER_NETWORK_PREFIX):
            return ip
    return None


def nginx_get_ip(request: Request) -> str:
    """Return the real client IP forwarded by nginx, or UNKNOWN_IP."""
    ip_addresses = get_header(request, "X-Forwarded-For") or UNKNOWN_IP
    return nginx_real_ip_only(ip_addresses) or UNKNOWN_IP
