"""Tests for configuration resolution precedence."""

from __future__ import annotations

from pathlib import Path

import pytest

from atlpkg.core import resolver
from atlpkg.core.config import PackageConfig
from atlpkg.core.errors import ConfigBuildError, ConfigParseError, MissingParameter
from atlpkg.core.resolver import resolve_config
from atlpkg.core.result import Err, Ok


def _default(version: str = "") -> PackageConfig:
    return PackageConfig(name="atlassian-confluence", architecture="all", version=version)


def _config_file(tmp_path: Path, version: str | None) -> Path:
    path = tmp_path / "package.toml"
    body = f'version = "{version}"\n' if version is not None else 'section = "web"\n'
    path.write_text(body, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    ("default_version", "file_version", "flag_version", "expected"),
    [
        ("1.0", None, "", "1.0"),
        ("1.0", "2.0", "", "2.0"),
        ("1.0", "2.0", "3.0-1", "3.0-1"),
        ("1.0", None, "3.0-1", "3.0-1"),
        ("", "2.0", "", "2.0"),
        ("", None, "3.0-1", "3.0-1"),
    ],
)
def test_precedence_flag_over_file_over_default(
    tmp_path: Path,
    default_version: str,
    file_version: str | None,
    flag_version: str,
    expected: str,
) -> None:
    path = _config_file(tmp_path, file_version)

    result = resolve_config(_default(default_version), str(path), flag_version)

    assert isinstance(result, Ok)
    assert result.value.version == expected


def test_without_file_or_flag_keeps_default() -> None:
    result = resolve_config(_default("1.0"), "", "")
    assert result == Ok(_default("1.0"))


def test_empty_version_is_missing_parameter() -> None:
    result = resolve_config(_default(""), None, "")
    assert result == Err(MissingParameter("version"))


def test_file_setting_empty_version_is_missing_parameter(tmp_path: Path) -> None:
    path = _config_file(tmp_path, "")

    result = resolve_config(_default("1.0"), path, None)

    assert result == Err(MissingParameter("version"))


def test_invalid_flag_version_is_build_error() -> None:
    result = resolve_config(_default("1.0"), None, "not a version")

    assert isinstance(result, Err)
    assert isinstance(result.error, ConfigBuildError)


def test_parse_failure_skips_builder(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[str] = []

    def fake_with_version(config: PackageConfig, version: str) -> Ok[PackageConfig]:
        calls.append(version)
        return Ok(config)

    monkeypatch.setattr(resolver, "with_version", fake_with_version)

    result = resolve_config(_default("1.0"), tmp_path / "missing.toml", "6.1.2-1")

    assert isinstance(result, Err)
    assert isinstance(result.error, ConfigParseError)
    assert calls == []


def test_deterministic(tmp_path: Path) -> None:
    path = _config_file(tmp_path, "2.0")
    first = resolve_config(_default("1.0"), path, "6.1.2-1")
    second = resolve_config(_default("1.0"), path, "6.1.2-1")
    assert first == second
