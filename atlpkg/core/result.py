"""Result type for explicit error handling.

Every fallible step of configuration resolution returns a Result instead of
raising, so a caller sees the failure variant as a value:

    match resolve_config(default, path, version):
        case Ok(config):
            ...
        case Err(error):
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result carrying a value."""

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed result carrying an error variant."""

    error: E


Result: TypeAlias = Union[Ok[T], Err[E]]
