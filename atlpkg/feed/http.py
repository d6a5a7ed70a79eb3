"""HTTP client abstraction for version feeds.

This module provides:
- HttpClient: Protocol for fetching raw bytes (injectable for tests)
- RealHttpClient: Real implementation using urllib
- MockHttpClient: Mock implementation for testing
"""

from __future__ import annotations

import logging
import ssl
import urllib.error
import urllib.request
from typing import Protocol, runtime_checkable

from atlpkg import __version__
from atlpkg.core.errors import FetchError
from atlpkg.core.result import Err, Ok, Result

__all__ = ["HttpClient", "RealHttpClient", "MockHttpClient"]

logger = logging.getLogger(__name__)


@runtime_checkable
class HttpClient(Protocol):
    """Fetches a URL. Callers never retry."""

    def get_bytes(self, url: str) -> Result[bytes, FetchError]:
        """Fetch URL and return the raw response body.

        Args:
            url: URL to fetch

        Returns:
            Ok with response bytes, or Err with FetchError
        """
        ...


class RealHttpClient:
    """HTTP client using urllib with system certificates."""

    def __init__(self, timeout: float = 30.0, user_agent: str = f"atlpkg/{__version__}") -> None:
        """Initialize HTTP client.

        Args:
            timeout: Request timeout in seconds
            user_agent: User-Agent header value
        """
        self.timeout = timeout
        self.user_agent = user_agent
        self._ssl_context = ssl.create_default_context()

    def get_bytes(self, url: str) -> Result[bytes, FetchError]:
        logger.debug("GET %s", url)
        try:
            req = urllib.request.Request(url, headers={"User-Agent": self.user_agent})
            with urllib.request.urlopen(
                req,
                timeout=self.timeout,
                context=self._ssl_context,
            ) as response:
                return Ok(response.read())
        except urllib.error.HTTPError as e:
            return Err(FetchError(url=url, status=e.code, reason=str(e.reason)))
        except urllib.error.URLError as e:
            return Err(FetchError(url=url, status=0, reason=str(e.reason)))
        except TimeoutError:
            return Err(FetchError(url=url, status=0, reason="request timed out"))
        except ValueError as e:
            return Err(FetchError(url=url, status=0, reason=str(e)))
        except OSError as e:
            return Err(FetchError(url=url, status=0, reason=str(e)))


class MockHttpClient:
    """Mock HTTP client for testing.

    Usage:
        client = MockHttpClient()
        client.set_response("https://example.com/feed.json", b"[]")
        result = client.get_bytes("https://example.com/feed.json")
        assert result == Ok(b"[]")
    """

    def __init__(self) -> None:
        self._responses: dict[str, bytes | FetchError] = {}
        self.calls: list[str] = []

    def set_response(self, url: str, response: bytes | FetchError) -> None:
        self._responses[url] = response

    def get_bytes(self, url: str) -> Result[bytes, FetchError]:
        self.calls.append(url)

        if url not in self._responses:
            return Err(FetchError(url=url, status=404, reason="Not found (mock)"))

        response = self._responses[url]
        if isinstance(response, FetchError):
            return Err(response)
        return Ok(response)
