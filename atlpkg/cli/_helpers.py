"""Shared helpers for CLI commands."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NoReturn, TypeVar

import typer

from atlpkg.core.errors import ErrorCode
from atlpkg.core.result import Err, Result
from atlpkg.output.errors import error_exit_code, print_error

if TYPE_CHECKING:
    from atlpkg.core.errors import PackagingError
    from atlpkg.output.console import ConsoleProtocol

T = TypeVar("T")

LOG_FORMAT = "%(levelname)s %(name)s - %(message)s"
LOG_LEVELS = ("debug", "info", "warning", "error")


def configure_logging(level: str, console: ConsoleProtocol) -> None:
    """Configure root logging once per process.

    An unknown level is reported like any other error and exits with
    ErrorCode.FAILURE.
    """
    if level.lower() not in LOG_LEVELS:
        console.error(f"unknown log level '{level}', expected one of: {', '.join(LOG_LEVELS)}")
        exit_with_code(int(ErrorCode.FAILURE))
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, force=True)
    logging.getLogger(__name__).debug("set log level to %s", level)


def exit_on_error(result: Result[T, PackagingError], console: ConsoleProtocol) -> T:
    """Return the value of an Ok result, or report the error and exit.

    Replaces the common pattern:
        match result:
            case Err(e):
                print_error(e, console)
                raise typer.Exit(code=1)
            case Ok(value):
                ...
    """
    if isinstance(result, Err):
        print_error(result.error, console)
        exit_with_code(error_exit_code(result.error))
    return result.value


def exit_with_code(code: int) -> NoReturn:
    """Exit with given code. Explicit helper for clarity."""
    raise typer.Exit(code=code)
