"""Package build orchestration.

Checks the archive path, resolves the package configuration, picks the
upstream version that names the archive's source directory, and hands
everything to the assembler exactly once.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from atlpkg.core.errors import MissingParameter, PackagingError
from atlpkg.core.resolver import PARAMETER_VERSION, resolve_config
from atlpkg.core.result import Err, Result
from atlpkg.core.version import derive_upstream

if TYPE_CHECKING:
    from atlpkg.packaging.assembler import PackageAssembler
    from atlpkg.products import Product

__all__ = [
    "PARAMETER_CONFIG",
    "PARAMETER_PATH",
    "PARAMETER_VERSION",
    "PARAMETER_UPSTREAM_VERSION",
    "PARAMETER_TARGET",
    "upstream_version_for",
    "create_package",
]

logger = logging.getLogger(__name__)

PARAMETER_CONFIG = "config"
PARAMETER_PATH = "path"
PARAMETER_UPSTREAM_VERSION = "atlassian-version"
PARAMETER_TARGET = "target"


def upstream_version_for(version: str | None, upstream_version: str | None) -> str:
    """An explicit upstream version wins; otherwise derive it from version."""
    if upstream_version:
        return upstream_version
    return derive_upstream(version or "")


def create_package(
    assembler: PackageAssembler,
    product: Product,
    *,
    archive_path: str | None,
    config_path: str | None = None,
    version: str | None = None,
    upstream_version: str | None = None,
    target_dir: str | None = None,
) -> Result[Path, PackagingError]:
    """Build a package for product from an upstream archive.

    Args:
        assembler: Collaborator that writes the package file.
        product: Supplies the default config and source directory prefix.
        archive_path: Upstream archive (required).
        config_path: Optional TOML overlay.
        version: Optional compound package version, e.g. ``6.1.2-1``.
        upstream_version: Optional upstream version override.
        target_dir: Output directory, defaults to the product's.

    Returns:
        Ok with the package path, or the first error encountered.
    """
    if not archive_path:
        return Err(MissingParameter(PARAMETER_PATH))

    upstream = upstream_version_for(version, upstream_version)

    resolved = resolve_config(product.default_config(), config_path, version)
    if isinstance(resolved, Err):
        return resolved
    config = resolved.value

    if not upstream:
        return Err(MissingParameter(PARAMETER_UPSTREAM_VERSION))

    source_dir = product.source_dir(upstream)
    target = target_dir or product.target_dir
    logger.info("packaging %s %s from %s/%s", config.name, config.version, archive_path, source_dir)
    return assembler.create_package(archive_path, config, source_dir, target)
