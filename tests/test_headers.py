"""
Tests for request header inspection and nginx client address helpers.
"""

import pytest

from hyperactive.interfaces.http.headers import (
    UNKNOWN_IP,
    CommonHeaders,
    get_common_headers,
    get_header,
    inspect_headers,
    nginx_get_ip,
    nginx_real_ip_only,
)


class TestGetHeader:
    """Tests for get_header."""

    def test_case_insensitive(self, make_request) -> None:
        request = make_request(headers=[("X-Api-Key", "secret")])
        assert get_header(request, "x-api-key") == "secret"
        assert get_header(request, "X-API-KEY") == "secret"

    def test_missing_is_none(self, make_request) -> None:
        assert get_header(make_request(), "Accept") is None

    def test_empty_is_none(self, make_request) -> None:
        """An empty header value counts as absent."""
        request = make_request(headers=[("Accept", "")])
        assert get_header(request, "Accept") is None


class TestInspectHeaders:
    """Tests for inspect_headers."""

    def test_collects_known_headers(self, make_request) -> None:
        request = make_request(
            headers=[
                ("User-Agent", "curl/8.0"),
                ("Content-Type", "application/json"),
                ("Authorization", "Bearer abc"),
                ("X-Custom", "ignored"),
            ]
        )
        headers = inspect_headers(request)
        assert dict(headers) == {
            "User-Agent": "curl/8.0",
            "Content-Type": "application/json",
            "Authorization": "Bearer abc",
        }

    def test_missing_headers_are_absent(self, make_request) -> None:
        """Missing headers are simply left out, never an error."""
        headers = inspect_headers(make_request())
        assert len(headers) == 0
        assert "User-Agent" not in headers

    def test_snapshot_is_read_only(self, make_request) -> None:
        headers = inspect_headers(make_request(headers=[("Host", "example.com")]))
        with pytest.raises(TypeError):
            headers["Host"] = "other"  # type: ignore[index]


class TestCommonHeaders:
    """Tests for get_common_headers."""

    def test_fields(self, make_request) -> None:
        request = make_request(
            headers=[
                ("User-Agent", "ua"),
                ("X-Api-Key", "key"),
                ("Host", "example.com"),
                ("Accept", "application/json"),
            ]
        )
        assert get_common_headers(request) == CommonHeaders(
            user_agent="ua", x_api_key="key", host="example.com", accept="application/json"
        )

    def test_missing_fields_are_none(self, make_request) -> None:
        common = get_common_headers(make_request(headers=[("Host", "example.com")]))
        assert common.host == "example.com"
        assert common.user_agent is None
        assert common.x_api_key is None
        assert common.accept is None


class TestNginxRealIp:
    """Tests for the X-Forwarded-For helpers."""

    def test_skips_docker_address(self) -> None:
        assert nginx_real_ip_only("104.218.65.97, 172.69.59.58") == "104.218.65.97"

    def test_docker_first(self) -> None:
        assert nginx_real_ip_only("172.17.0.1, 104.218.65.97") == "104.218.65.97"

    def test_only_docker_addresses(self) -> None:
        assert nginx_real_ip_only("172.17.0.1, 172.18.0.2") is None

    def test_from_request(self, make_request) -> None:
        request = make_request(headers=[("X-Forwarded-For", "104.218.65.97, 172.69.59.58")])
        assert nginx_get_ip(request) == "104.218.65.97"

    def test_unknown_without_header(self, make_request) -> None:
        assert nginx_get_ip(make_request()) == UNKNOWN_IP

    def test_unknown_with_only_docker(self, make_request) -> None:
        request = make_request(headers=[("X-Forwarded-For", "172.69.59.58")])
        assert nginx_get_ip(request) == UNKNOWN_IP
