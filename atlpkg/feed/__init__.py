"""Remote version feeds."""

from .http import HttpClient, MockHttpClient, RealHttpClient
from .versions import VersionInfo, latest_version, parse_feed, version_informations

__all__ = [
    "HttpClient",
    "MockHttpClient",
    "RealHttpClient",
    "VersionInfo",
    "latest_version",
    "parse_feed",
    "version_informations",
]
