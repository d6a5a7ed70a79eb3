"""Package configuration and the config file overlay.

A PackageConfig is built fresh for every invocation: the caller constructs
the default (name and architecture are fixed there), an optional TOML file
is overlaid on top, and finally the version flag is applied by the resolver.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .errors import ConfigParseError
from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, opt_str, opt_str_list, opt_table_list

__all__ = [
    "PackageConfig",
    "FileMapping",
    "ConfigOverlay",
    "default_config",
    "parse_overlay",
    "parse_file_to_config",
]

logger = logging.getLogger(__name__)

# Keys owned by the calling context; a file may not change them.
CALLER_OWNED_KEYS = frozenset({"name", "architecture"})


@dataclass(frozen=True, slots=True)
class FileMapping:
    """Extra file copied into the package tree.

    Attributes:
        source: Path on the build host.
        target: Absolute path inside the installed package.
    """

    source: str
    target: str


@dataclass(frozen=True, slots=True)
class PackageConfig:
    """Everything the assembler needs to describe a package."""

    name: str
    architecture: str
    version: str = ""
    maintainer: str = ""
    description: str = ""
    section: str = "base"
    priority: str = "optional"
    depends: tuple[str, ...] = ()
    files: tuple[FileMapping, ...] = ()


@dataclass(frozen=True, slots=True)
class ConfigOverlay:
    """Partial configuration parsed from a file.

    A field left as None was not present in the file and leaves the
    underlying value untouched.
    """

    version: str | None = None
    maintainer: str | None = None
    description: str | None = None
    section: str | None = None
    priority: str | None = None
    depends: tuple[str, ...] | None = None
    files: tuple[FileMapping, ...] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> ConfigOverlay:
        """Build an overlay from a parsed TOML mapping.

        Raises:
            TypeError: A present key has the wrong type.
            ValueError: A file mapping lacks source or target.
        """
        files: tuple[FileMapping, ...] | None = None
        tables = opt_table_list(data, "files")
        if tables is not None:
            files = tuple(_file_mapping(t) for t in tables)

        return cls(
            version=opt_str(data, "version"),
            maintainer=opt_str(data, "maintainer"),
            description=opt_str(data, "description"),
            section=opt_str(data, "section"),
            priority=opt_str(data, "priority"),
            depends=opt_str_list(data, "depends"),
            files=files,
        )

    def apply(self, base: PackageConfig) -> PackageConfig:
        """Return base with every field set in this overlay replaced."""
        changes = {
            f.name: getattr(self, f.name)
            for f in dataclasses.fields(self)
            if getattr(self, f.name) is not None
        }
        return dataclasses.replace(base, **changes)


def _file_mapping(table: StrDict) -> FileMapping:
    source = opt_str(table, "source")
    target = opt_str(table, "target")
    if not source or not target:
        raise ValueError("each [[files]] entry needs 'source' and 'target'")
    return FileMapping(source=source, target=target)


def default_config(
    name: str,
    architecture: str,
    *,
    maintainer: str = "",
    description: str = "",
) -> PackageConfig:
    """Create the caller-owned default configuration.

    Raises:
        ValueError: name or architecture is empty.
    """
    if not name or not architecture:
        raise ValueError("default config needs a name and an architecture")
    return PackageConfig(
        name=name,
        architecture=architecture,
        maintainer=maintainer,
        description=description,
    )


def parse_overlay(data: Mapping[str, object], path: Path) -> Result[ConfigOverlay, ConfigParseError]:
    """Validate a parsed TOML mapping into an overlay."""
    for key in sorted(CALLER_OWNED_KEYS & data.keys()):
        logger.warning("ignoring '%s' in %s, it is fixed by the product", key, path)
    try:
        return Ok(ConfigOverlay.from_dict(data))
    except (TypeError, ValueError) as e:
        return Err(ConfigParseError(path=path, reason=str(e)))


def _parse_toml(path: Path) -> Result[StrDict, ConfigParseError]:
    import tomllib

    try:
        content = path.read_bytes()
        data = as_str_dict(tomllib.loads(content.decode("utf-8")))
        if data is None:
            return Err(ConfigParseError(path=path, reason="root must be a TOML table"))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigParseError(path=path, reason="file not found"))
    except PermissionError:
        return Err(ConfigParseError(path=path, reason="permission denied"))
    except IsADirectoryError:
        return Err(ConfigParseError(path=path, reason="is a directory"))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigParseError(path=path, reason=f"invalid TOML syntax: {e}"))
    except UnicodeDecodeError as e:
        return Err(ConfigParseError(path=path, reason=f"not UTF-8: {e}"))


def parse_file_to_config(
    base: PackageConfig, path: Path
) -> Result[PackageConfig, ConfigParseError]:
    """Overlay the fields declared in a TOML file onto base.

    Fields absent from the file pass through unchanged. Any failure aborts
    the overlay; no partially applied config is returned.
    """
    parsed = _parse_toml(path)
    if isinstance(parsed, Err):
        return parsed

    overlay = parse_overlay(parsed.value, path)
    if isinstance(overlay, Err):
        return overlay

    logger.debug("applying config overlay from %s", path)
    return Ok(overlay.value.apply(base))
