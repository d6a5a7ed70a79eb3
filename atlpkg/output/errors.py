"""Error presentation utilities.

Centralized error formatting and exit code mapping for both commands.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from atlpkg.core.errors import (
    ConfigBuildError,
    ErrorCode,
    MissingParameter,
    PackagingError,
    describe,
)
from atlpkg.output.console import Style

if TYPE_CHECKING:
    from atlpkg.output.console import ConsoleProtocol

__all__ = ["print_error", "error_exit_code"]


def print_error(error: PackagingError, console: ConsoleProtocol) -> None:
    """Print an error with a hint where one helps."""
    console.error(describe(error))
    match error:
        case MissingParameter(parameter=parameter):
            console.print(f"hint: pass --{parameter}", Style.DIM)
        case ConfigBuildError(field="version"):
            console.print("hint: expected [epoch:]upstream[-revision], e.g. 6.1.2-1", Style.DIM)


def error_exit_code(error: PackagingError) -> int:
    """Every error variant is terminal with the same exit status."""
    return int(ErrorCode.FAILURE)
