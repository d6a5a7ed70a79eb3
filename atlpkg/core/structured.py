"""Helpers for reading untyped TOML tables.

Used at the boundary where a package config file is ingested. Lookups
return None for absent keys and raise TypeError for present keys of the
wrong type, so a malformed file is never silently half-applied.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    """Return obj as StrDict if it matches, else None."""
    if is_str_dict(obj):
        return obj
    return None


def opt_str(table: Mapping[str, object], key: str) -> str | None:
    """Get an optional string value, stripped of surrounding whitespace."""
    if key not in table:
        return None
    value = table[key]
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string")
    return value.strip()


def opt_str_list(table: Mapping[str, object], key: str) -> tuple[str, ...] | None:
    """Get an optional list of strings."""
    if key not in table:
        return None
    value = table[key]
    if not isinstance(value, list):
        raise TypeError(f"'{key}' must be a list of strings")
    items = cast(list[object], value)
    out: list[str] = []
    for item in items:
        if not isinstance(item, str):
            raise TypeError(f"'{key}' must be a list of strings")
        out.append(item.strip())
    return tuple(out)


def opt_table_list(table: Mapping[str, object], key: str) -> list[StrDict] | None:
    """Get an optional array of tables (``[[key]]`` in TOML)."""
    if key not in table:
        return None
    value = table[key]
    if not isinstance(value, list):
        raise TypeError(f"'{key}' must be an array of tables")
    out: list[StrDict] = []
    for item in cast(list[object], value):
        d = as_str_dict(item)
        if d is None:
            raise TypeError(f"'{key}' must be an array of tables")
        out.append(d)
    return out
