"""Version information from Atlassian download feeds.

The feeds under ``my.atlassian.com/download/feeds`` are JSONP documents,
``downloads([...])``, listing one entry per downloadable artifact. Several
entries usually share a version (one per platform or archive type).
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

from atlpkg.core.errors import FetchError, SelectionError
from atlpkg.core.result import Err, Ok, Result
from atlpkg.core.structured import as_str_dict

if TYPE_CHECKING:
    from atlpkg.feed.http import HttpClient

__all__ = [
    "VersionInfo",
    "parse_feed",
    "version_informations",
    "version_key",
    "latest_version",
]

logger = logging.getLogger(__name__)

_JSONP_RE = re.compile(r"^\s*[A-Za-z_$][\w$]*\s*\((?P<body>.*)\)\s*;?\s*$", re.DOTALL)
_COMPONENT_RE = re.compile(r"[.\-]")


@dataclass(frozen=True, slots=True)
class VersionInfo:
    """One downloadable artifact listed in a feed."""

    version: str
    released: str = ""
    edition: str = ""
    download_url: str = ""


def parse_feed(raw: bytes) -> Result[list[VersionInfo], str]:
    """Parse feed bytes into version records.

    Accepts the JSONP wrapper or a bare JSON array. Entries without a
    version are skipped.
    """
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        return Err(f"feed is not UTF-8: {e}")

    m = _JSONP_RE.match(text)
    if m is not None:
        text = m.group("body")

    try:
        data: object = json.loads(text)
    except json.JSONDecodeError as e:
        return Err(f"JSON parse error: {e}")

    if not isinstance(data, list):
        return Err("expected a JSON array of downloads")

    infos: list[VersionInfo] = []
    for item in cast(list[object], data):
        entry = as_str_dict(item)
        if entry is None:
            return Err("expected download entries to be JSON objects")
        version = entry.get("version")
        if not isinstance(version, str) or not version.strip():
            logger.debug("skipping feed entry without version: %r", entry)
            continue
        infos.append(
            VersionInfo(
                version=version.strip(),
                released=_str_field(entry, "released"),
                edition=_str_field(entry, "edition"),
                download_url=_str_field(entry, "zipUrl"),
            )
        )
    return Ok(infos)


def _str_field(entry: dict[str, object], key: str) -> str:
    value = entry.get(key)
    return value if isinstance(value, str) else ""


def version_informations(http: HttpClient, url: str) -> Result[list[VersionInfo], FetchError]:
    """Fetch and parse the feed at url."""
    fetched = http.get_bytes(url)
    if isinstance(fetched, Err):
        return fetched

    parsed = parse_feed(fetched.value)
    if isinstance(parsed, Err):
        return Err(FetchError(url=url, status=0, reason=parsed.error))

    logger.debug("feed %s lists %d downloads", url, len(parsed.value))
    return parsed


def version_key(version: str) -> tuple[tuple[int, int | str], ...]:
    """Sort key for dotted versions.

    Numeric components compare numerically and rank above textual ones,
    so ``3.10.0 > 3.9.1`` and ``3.4.0 > 3.4.0-rc``.
    """
    key: list[tuple[int, int | str]] = []
    for part in _COMPONENT_RE.split(version):
        if part.isdigit():
            key.append((1, int(part)))
        else:
            key.append((0, part))
    # end marker: ranks above a textual suffix, below any further number
    key.append((1, -1))
    return tuple(key)


def latest_version(infos: list[VersionInfo]) -> Result[str, SelectionError]:
    """Select the most recent version from infos."""
    if not infos:
        return Err(SelectionError("feed lists no versions"))
    latest = max(infos, key=lambda info: version_key(info.version))
    return Ok(latest.version)
