"""
Tests for the CORS preflight responder.
"""

import pytest

from hyperactive.domain.cors import CorsHeadersMode, CorsPolicy
from hyperactive.interfaces.http.cors import preflight

FIXED = CorsPolicy()
ECHO = CorsPolicy(
    allow_origin="https://app.example.com",
    allow_methods="GET, OPTIONS",
    allow_headers="Content-Type",
    headers_mode=CorsHeadersMode.ECHO_REQUESTED,
    max_age=600,
)


class TestPreflightFixedList:
    """Preflight with the default fixed-list policy."""

    def test_status_and_headers(self, make_request) -> None:
        response = preflight(make_request(method="OPTIONS", path="/users"), FIXED)
        assert response.status_code == 204
        assert response.headers["access-control-allow-origin"] == "*"
        assert response.headers["access-control-allow-methods"] == "POST, GET, OPTIONS"
        assert response.headers["access-control-allow-headers"] == "*"
        assert "access-control-max-age" not in response.headers

    def test_empty_body(self, make_request) -> None:
        response = preflight(make_request(method="OPTIONS"), FIXED)
        assert response.body == b""
        assert "content-type" not in response.headers

    def test_ignores_requested_headers(self, make_request) -> None:
        request = make_request(
            method="OPTIONS",
            headers=[("Access-Control-Request-Headers", "X-Api-Key")],
        )
        assert preflight(request, FIXED).headers["access-control-allow-headers"] == "*"

    @pytest.mark.parametrize(
        "headers",
        [
            [("Origin", "")],
            [("Access-Control-Request-Headers", "\x00\x01;;,,")],
            [("Access-Control-Request-Method", "NOT A METHOD")],
            [("Content-Length", "not-a-number")],
        ],
    )
    def test_malformed_headers_still_succeed(self, make_request, headers) -> None:
        response = preflight(make_request(method="OPTIONS", headers=headers), FIXED)
        assert response.status_code == 204

    def test_body_is_not_read(self, make_request) -> None:
        request = make_request(method="OPTIONS", body=b"{not json")
        assert preflight(request, FIXED).status_code == 204


class TestPreflightEchoRequested:
    """Preflight with the echo-requested policy."""

    def test_echoes_requested_headers(self, make_request) -> None:
        request = make_request(
            method="OPTIONS",
            headers=[("Access-Control-Request-Headers", "X-Api-Key, Content-Type")],
        )
        response = preflight(request, ECHO)
        assert response.status_code == 204
        assert response.headers["access-control-allow-headers"] == "X-Api-Key, Content-Type"
        assert response.headers["access-control-allow-origin"] == "https://app.example.com"
        assert response.headers["access-control-allow-methods"] == "GET, OPTIONS"
        assert response.headers["access-control-max-age"] == "600"

    def test_falls_back_to_fixed_list(self, make_request) -> None:
        """Without a requested list the configured list is answered."""
        response = preflight(make_request(method="OPTIONS"), ECHO)
        assert response.headers["access-control-allow-headers"] == "Content-Type"

    def test_normalizes_requested_list(self, make_request) -> None:
        request = make_request(
            method="OPTIONS",
            headers=[("Access-Control-Request-Headers", "x-api-key,content-type ,")],
        )
        response = preflight(request, ECHO)
        assert response.headers["access-control-allow-headers"] == "x-api-key, content-type"

    def test_malformed_request_falls_back(self, make_request) -> None:
        """Names that are not header tokens are never echoed."""
        request = make_request(
            method="OPTIONS",
            headers=[("Access-Control-Request-Headers", "X-Api-Key, bad header\x01")],
        )
        response = preflight(request, ECHO)
        assert response.status_code == 204
        assert response.headers["access-control-allow-headers"] == "Content-Type"

    def test_deterministic(self, make_request) -> None:
        request = make_request(
            method="OPTIONS",
            headers=[("Access-Control-Request-Headers", "X-Api-Key")],
        )
        first = preflight(request, ECHO)
        second = preflight(request, ECHO)
        assert first.headers.items() == second.headers.items()
