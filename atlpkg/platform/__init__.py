"""Host platform helpers."""

from .process import ProcessError, ProcessRunner, run

__all__ = ["ProcessError", "ProcessRunner", "run"]
