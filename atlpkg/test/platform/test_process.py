"""Tests for atlpkg.platform.process."""

from __future__ import annotations

import sys
from pathlib import Path

from atlpkg.core.result import Err, Ok
from atlpkg.platform.process import ProcessError, run


def test_run_success(tmp_path: Path) -> None:
    result = run([sys.executable, "-c", "print('hello')"], cwd=tmp_path)
    assert result == Ok("hello\n")


def test_run_non_zero_exit(tmp_path: Path) -> None:
    result = run(
        [sys.executable, "-c", "import sys; sys.stderr.write('bad'); sys.exit(3)"], cwd=tmp_path
    )

    assert isinstance(result, Err)
    assert result.error.returncode == 3
    assert result.error.stderr == "bad"


def test_run_missing_binary(tmp_path: Path) -> None:
    result = run(["definitely-not-a-real-binary-xyz"], cwd=tmp_path)

    assert isinstance(result, Err)
    assert result.error.returncode == -1


def test_process_error_str() -> None:
    error = ProcessError(command=("dpkg-deb", "--build", "root", "out.deb"), returncode=2, stderr="oops\n")
    assert str(error) == "dpkg-deb --build root ... failed (exit 2): oops"
    assert str(ProcessError(("true",), 1, "")) == "true failed (exit 1)"
