import pytest

from core.utils.cors import allowed_cors_origin, get_header


class TestGetHeader:
    def test_case_insensitive_lookup(self) -> None:
        assert get_header({"origin": "https://a.example.com"}, "Origin") == "https://a.example.com"

    @pytest.mark.parametrize("headers", [None, {}])
    def test_missing_headers(self, headers) -> None:
        assert get_header(headers, "Origin") is None


class TestAllowedCorsOrigin:
    def test_subdomain_origin_is_echoed(self) -> None:
        headers = {"Origin": "https://cdn.example.com", "Host": "example.com"}

        assert allowed_cors_origin(headers) == "https://cdn.example.com"

    def test_same_host_origin_is_echoed(self) -> None:
        headers = {"origin": "https://example.com", "host": "example.com"}

        assert allowed_cors_origin(headers) == "https://example.com"

    def test_unrelated_origin_is_refused(self) -> None:
        headers = {"Origin": "https://other.org", "Host": "example.com"}

        assert allowed_cors_origin(headers) is None

    def test_missing_origin(self) -> None:
        assert allowed_cors_origin({"Host": "example.com"}) is None

    def test_missing_host(self) -> None:
        assert allowed_cors_origin({"Origin": "https://cdn.example.com"}) is None

    def test_containment_is_not_a_suffix_match(self) -> None:
        headers = {"Origin": "https://notexample.com", "Host": "example.com"}

        assert allowed_cors_origin(headers) == "https://notexample.com"
