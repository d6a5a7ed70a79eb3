"""Configuration resolution: default, then file overlay, then version flag.

Precedence is strictly increasing: a non-empty version flag beats the file,
the file beats the default. The first failing stage ends resolution.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .config import PackageConfig, parse_file_to_config
from .errors import ConfigBuildError, ConfigParseError, MissingParameter
from .result import Err, Ok, Result
from .version import with_version

__all__ = ["PARAMETER_VERSION", "ResolveError", "resolve_config"]

logger = logging.getLogger(__name__)

PARAMETER_VERSION = "version"

ResolveError = MissingParameter | ConfigParseError | ConfigBuildError


def resolve_config(
    default: PackageConfig,
    config_path: str | Path | None,
    version: str | None,
) -> Result[PackageConfig, ResolveError]:
    """Merge the default config, an optional file and an optional version.

    Args:
        default: Caller-constructed default configuration.
        config_path: TOML overlay file; empty or None skips the overlay.
        version: Explicit version; empty or None skips the override.

    Returns:
        Ok(PackageConfig) with a non-empty version, or the first error.
    """
    config = default

    if config_path:
        parsed = parse_file_to_config(config, Path(config_path))
        if isinstance(parsed, Err):
            return parsed
        config = parsed.value

    if version:
        built = with_version(config, version)
        if isinstance(built, Err):
            return built
        config = built.value

    if not config.version:
        return Err(MissingParameter(PARAMETER_VERSION))

    logger.debug("resolved %s version %s", config.name, config.version)
    return Ok(config)
