"""Subprocess execution returning a Result.

The assembler shells out to ``dpkg-deb``; a failed or missing binary comes
back as a ProcessError value instead of an exception.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from atlpkg.core.result import Err, Ok, Result

__all__ = ["ProcessError", "ProcessRunner", "run"]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """A command that could not be started or exited non-zero.

    Attributes:
        command: The command that was executed.
        returncode: Exit code, -1 if the process never ran.
        stderr: Captured standard error.
    """

    command: tuple[str, ...]
    returncode: int
    stderr: str

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        detail = self.stderr.strip()
        if detail:
            return f"{cmd_str} failed (exit {self.returncode}): {detail}"
        return f"{cmd_str} failed (exit {self.returncode})"


class ProcessRunner(Protocol):
    def __call__(self, cmd: list[str], cwd: Path) -> Result[str, ProcessError]: ...


def run(cmd: list[str], cwd: Path) -> Result[str, ProcessError]:
    """Execute a command and return its stdout or a ProcessError."""
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), returncode=-1, stderr=str(e)))

    if proc.returncode != 0:
        return Err(
            ProcessError(command=tuple(cmd), returncode=proc.returncode, stderr=proc.stderr)
        )

    return Ok(proc.stdout)
