"""Package assembly: upstream archive plus config into a ``.deb`` file.

The orchestrator only depends on the PackageAssembler protocol. DebAssembler
is the production implementation; it stages the package tree itself and
delegates writing the ``.deb`` to ``dpkg-deb``.
"""

from __future__ import annotations

import logging
import shutil
import tarfile
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from atlpkg.core.config import PackageConfig
from atlpkg.core.errors import AssemblyError
from atlpkg.core.result import Err, Ok, Result
from atlpkg.platform.process import ProcessRunner, run

__all__ = [
    "PackageAssembler",
    "DebAssembler",
    "MockAssembler",
    "AssembleCall",
    "render_control",
    "deb_filename",
]

logger = logging.getLogger(__name__)


class PackageAssembler(Protocol):
    """Turns an upstream archive and a resolved config into a package file."""

    def create_package(
        self,
        archive_path: str,
        config: PackageConfig,
        source_dir: str,
        target_dir: str,
    ) -> Result[Path, AssemblyError]:
        """Build the package.

        Args:
            archive_path: Upstream ``.tar.gz`` archive.
            config: Fully resolved package configuration.
            source_dir: Top-level directory inside the archive to package.
            target_dir: Directory the package file is written to.

        Returns:
            Ok with the written package path, or Err(AssemblyError).
        """
        ...


def deb_filename(config: PackageConfig) -> str:
    # dpkg strips the epoch from file names
    version = config.version.split(":", 1)[-1]
    return f"{config.name}_{version}_{config.architecture}.deb"


def render_control(config: PackageConfig, installed_size_kib: int | None = None) -> str:
    """Render a DEBIAN/control file for config."""
    summary, *body = (config.description or config.name).strip().splitlines()
    lines = [
        f"Package: {config.name}",
        f"Version: {config.version}",
        f"Section: {config.section}",
        f"Priority: {config.priority}",
        f"Architecture: {config.architecture}",
    ]
    if config.maintainer:
        lines.append(f"Maintainer: {config.maintainer}")
    if config.depends:
        lines.append(f"Depends: {', '.join(config.depends)}")
    if installed_size_kib is not None:
        lines.append(f"Installed-Size: {installed_size_kib}")
    lines.append(f"Description: {summary.strip()}")
    for line in body:
        lines.append(f" {line.strip()}" if line.strip() else " .")
    return "\n".join(lines) + "\n"


def _tree_size_kib(root: Path) -> int:
    total = sum(p.stat().st_size for p in root.rglob("*") if p.is_file() and not p.is_symlink())
    return (total + 1023) // 1024


class DebAssembler:
    """Builds Debian packages from upstream tarballs.

    The archive is extracted into a temporary staging directory, the
    requested source directory is copied under install_prefix, extra file
    mappings and the control file are added, then ``dpkg-deb --build``
    writes the package. The staging directory is always removed; a partly
    written package in target_dir is left for the caller.
    """

    def __init__(self, install_prefix: str, runner: ProcessRunner = run) -> None:
        self._install_prefix = install_prefix
        self._run = runner

    @property
    def install_prefix(self) -> str:
        return self._install_prefix

    def create_package(
        self,
        archive_path: str,
        config: PackageConfig,
        source_dir: str,
        target_dir: str,
    ) -> Result[Path, AssemblyError]:
        archive = Path(archive_path)
        if not archive.is_file():
            return Err(AssemblyError(f"archive not found: {archive}"))

        with tempfile.TemporaryDirectory(prefix="atlpkg-") as tmp:
            work = Path(tmp)
            extracted = self._extract(archive, work / "extract")
            if isinstance(extracted, Err):
                return extracted

            source = extracted.value / source_dir
            if not source.is_dir():
                return Err(AssemblyError(f"directory {source_dir} not found in {archive}"))

            root = work / "root"
            staged = self._stage(source, root, config)
            if isinstance(staged, Err):
                return staged

            out_dir = Path(target_dir)
            try:
                out_dir.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                return Err(AssemblyError(f"cannot create {out_dir}", cause=str(e)))

            deb = out_dir / deb_filename(config)
            logger.info("building %s", deb)
            built = self._run(
                ["dpkg-deb", "--root-owner-group", "--build", str(root), str(deb.resolve())],
                work,
            )
            if isinstance(built, Err):
                return Err(AssemblyError("dpkg-deb failed", cause=str(built.error)))

        return Ok(deb)

    def _extract(self, archive: Path, dest: Path) -> Result[Path, AssemblyError]:
        logger.debug("extracting %s", archive)
        try:
            dest.mkdir(parents=True)
            with tarfile.open(archive, "r:*") as tf:
                tf.extractall(dest, filter="data")
        except (tarfile.TarError, OSError) as e:
            return Err(AssemblyError(f"cannot extract {archive}", cause=str(e)))
        return Ok(dest)

    def _stage(self, source: Path, root: Path, config: PackageConfig) -> Result[None, AssemblyError]:
        install_dir = root / self._install_prefix.lstrip("/")
        try:
            shutil.copytree(source, install_dir, symlinks=True)
            for mapping in config.files:
                dest = root / mapping.target.lstrip("/")
                dest.parent.mkdir(parents=True, exist_ok=True)
                shutil.copy2(mapping.source, dest)

            size = _tree_size_kib(root)
            control = root / "DEBIAN" / "control"
            control.parent.mkdir(parents=True)
            control.write_text(render_control(config, size), encoding="utf-8")
        except OSError as e:
            return Err(AssemblyError("cannot stage package tree", cause=str(e)))
        return Ok(None)


@dataclass(frozen=True, slots=True)
class AssembleCall:
    archive_path: str
    config: PackageConfig
    source_dir: str
    target_dir: str


def _empty_calls() -> list[AssembleCall]:
    return []


@dataclass
class MockAssembler:
    """Assembler that records calls instead of building anything.

    Returns the would-be package path, or ``error`` when set.
    """

    error: AssemblyError | None = None
    calls: list[AssembleCall] = field(default_factory=_empty_calls)

    def create_package(
        self,
        archive_path: str,
        config: PackageConfig,
        source_dir: str,
        target_dir: str,
    ) -> Result[Path, AssemblyError]:
        self.calls.append(AssembleCall(archive_path, config, source_dir, target_dir))
        if self.error is not None:
            return Err(self.error)
        return Ok(Path(target_dir) / deb_filename(config))
