"""Latest released version of a product."""

from __future__ import annotations

from typing import TYPE_CHECKING

from atlpkg.core.errors import FetchError, SelectionError
from atlpkg.core.result import Err, Result
from atlpkg.feed.versions import latest_version, version_informations

if TYPE_CHECKING:
    from atlpkg.feed.http import HttpClient


def query_latest_version(http: HttpClient, url: str) -> Result[str, FetchError | SelectionError]:
    """Fetch the feed at url and select its latest version.

    Errors from either step are relayed unchanged.
    """
    infos = version_informations(http, url)
    if isinstance(infos, Err):
        return infos
    return latest_version(infos.value)
