"""Tests for feed/http.py - HTTP client abstraction."""

from __future__ import annotations

from atlpkg.core.errors import FetchError
from atlpkg.core.result import Err, Ok
from atlpkg.feed.http import HttpClient, MockHttpClient, RealHttpClient


class TestMockHttpClient:
    def test_returns_configured_bytes(self) -> None:
        client = MockHttpClient()
        client.set_response("https://example.com/feed.json", b"[]")

        assert client.get_bytes("https://example.com/feed.json") == Ok(b"[]")
        assert client.calls == ["https://example.com/feed.json"]

    def test_unknown_url_is_404(self) -> None:
        client = MockHttpClient()

        result = client.get_bytes("https://example.com/missing")

        assert isinstance(result, Err)
        assert result.error.status == 404

    def test_configured_error(self) -> None:
        error = FetchError(url="https://example.com", status=0, reason="Connection refused")
        client = MockHttpClient()
        client.set_response("https://example.com", error)

        assert client.get_bytes("https://example.com") == Err(error)


class TestRealHttpClient:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(RealHttpClient(), HttpClient)
        assert isinstance(MockHttpClient(), HttpClient)

    def test_defaults(self) -> None:
        client = RealHttpClient()
        assert client.timeout == 30.0
        assert client.user_agent.startswith("atlpkg/")

    def test_invalid_url_is_error(self) -> None:
        result = RealHttpClient().get_bytes("not a url")

        assert isinstance(result, Err)
        assert result.error.status == 0
        assert result.error.url == "not a url"
