"""Exit codes and the closed set of packaging error variants.

Each failure is a small frozen dataclass carrying structured fields, so
callers branch on the variant instead of parsing message text. The CLI maps
every variant to the same non-zero exit code.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

__all__ = [
    "ErrorCode",
    "MissingParameter",
    "ConfigParseError",
    "ConfigBuildError",
    "AssemblyError",
    "FetchError",
    "SelectionError",
    "PackagingError",
    "describe",
]


class ErrorCode(IntEnum):
    """Process exit codes.

    Both entry points only distinguish success from failure.
    """

    OK = 0
    FAILURE = 1


@dataclass(frozen=True, slots=True)
class MissingParameter:
    """A required flag or field is absent or empty after resolution."""

    parameter: str

    @property
    def message(self) -> str:
        return f"parameter {self.parameter} missing"


@dataclass(frozen=True, slots=True)
class ConfigParseError:
    """The config file overlay could not be read or parsed."""

    path: Path
    reason: str

    @property
    def message(self) -> str:
        return f"invalid config {self.path}: {self.reason}"


@dataclass(frozen=True, slots=True)
class ConfigBuildError:
    """An explicit override failed validation."""

    field: str
    value: str
    reason: str

    @property
    def message(self) -> str:
        return f"invalid {self.field} '{self.value}': {self.reason}"


@dataclass(frozen=True, slots=True)
class AssemblyError:
    """Opaque failure from the package assembler."""

    message: str
    cause: str | None = None


@dataclass(frozen=True, slots=True)
class FetchError:
    """The version feed could not be fetched or decoded."""

    url: str
    status: int
    reason: str

    @property
    def message(self) -> str:
        if self.status:
            return f"HTTP {self.status}: {self.reason} ({self.url})"
        return f"{self.reason} ({self.url})"


@dataclass(frozen=True, slots=True)
class SelectionError:
    """No latest version could be selected from the feed."""

    message: str


PackagingError = (
    MissingParameter
    | ConfigParseError
    | ConfigBuildError
    | AssemblyError
    | FetchError
    | SelectionError
)


def describe(error: PackagingError) -> str:
    """Render any error variant as a single line."""
    match error:
        case AssemblyError(message=message, cause=cause) if cause:
            return f"{message}: {cause}"
        case _:
            return error.message
