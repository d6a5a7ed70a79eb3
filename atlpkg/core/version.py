"""Version derivation and validated version overrides.

Package versions are compound: ``<upstream>-<packaging suffix>``, e.g.
``6.1.2-1`` packages upstream Confluence ``6.1.2``. The suffix is optional.
"""

from __future__ import annotations

import dataclasses
import re

from .config import PackageConfig
from .errors import ConfigBuildError
from .result import Err, Ok, Result

__all__ = ["SEPARATOR", "derive_upstream", "validate_version", "with_version"]

SEPARATOR = "-"

_EPOCH_RE = re.compile(r"^(0|[1-9]\d*)$")
_REVISION_RE = re.compile(r"^[A-Za-z0-9.+~]+$")


def derive_upstream(version: str) -> str:
    """Return the upstream part of a compound version.

    Everything before the first separator; the whole input when there is
    none. A leading separator yields an empty string, callers that need a
    non-empty upstream check for it themselves.
    """
    upstream, _, _ = version.partition(SEPARATOR)
    return upstream


def validate_version(version: str) -> Result[str, ConfigBuildError]:
    """Check a Debian version string: ``[epoch:]upstream[-revision]``."""

    def fail(reason: str) -> Err[ConfigBuildError]:
        return Err(ConfigBuildError(field="version", value=version, reason=reason))

    if not version:
        return fail("must not be empty")
    if any(c.isspace() for c in version):
        return fail("must not contain whitespace")

    rest = version
    has_epoch = ":" in rest
    if has_epoch:
        epoch, _, rest = rest.partition(":")
        if not _EPOCH_RE.match(epoch):
            return fail("epoch must be an unsigned integer")

    has_revision = SEPARATOR in rest
    upstream = rest
    if has_revision:
        upstream, _, revision = rest.rpartition(SEPARATOR)
        if not _REVISION_RE.match(revision):
            return fail("revision may only contain alphanumerics and . + ~")

    if not upstream or not upstream[0].isdigit():
        return fail("upstream version must start with a digit")

    allowed = ".+~"
    if has_epoch:
        allowed += ":"
    if has_revision:
        allowed += SEPARATOR
    for c in upstream:
        if not (c.isascii() and c.isalnum()) and c not in allowed:
            return fail(f"unexpected character '{c}'")

    return Ok(version)


def with_version(config: PackageConfig, version: str) -> Result[PackageConfig, ConfigBuildError]:
    """Return a copy of config with a validated version override."""
    checked = validate_version(version)
    if isinstance(checked, Err):
        return checked
    return Ok(dataclasses.replace(config, version=checked.value))
