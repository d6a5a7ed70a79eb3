"""Tests for the package build orchestrator."""

from __future__ import annotations

from pathlib import Path

import pytest

from atlpkg.core import resolver
from atlpkg.core.errors import AssemblyError, ConfigParseError, MissingParameter
from atlpkg.core.result import Err, Ok
from atlpkg.packaging.assembler import MockAssembler
from atlpkg.products import CONFLUENCE
from atlpkg.services.build import create_package, upstream_version_for


def test_end_to_end_single_assembler_call() -> None:
    assembler = MockAssembler()

    result = create_package(
        assembler,
        CONFLUENCE,
        archive_path="/tmp/app.tar.gz",
        config_path="",
        version="6.1.2-1",
        target_dir="/out",
    )

    assert result == Ok(Path("/out/atlassian-confluence_6.1.2-1_all.deb"))
    assert len(assembler.calls) == 1
    call = assembler.calls[0]
    assert call.archive_path == "/tmp/app.tar.gz"
    assert call.source_dir == "atlassian-confluence-6.1.2"
    assert call.target_dir == "/out"
    assert call.config.name == "atlassian-confluence"
    assert call.config.architecture == "all"
    assert call.config.version == "6.1.2-1"


def test_missing_archive_path_makes_no_calls(monkeypatch: pytest.MonkeyPatch) -> None:
    assembler = MockAssembler()
    resolved: list[object] = []
    monkeypatch.setattr(
        "atlpkg.services.build.resolve_config", lambda *a: resolved.append(a) or Err(None)
    )

    result = create_package(assembler, CONFLUENCE, archive_path="", version="6.1.2-1")

    assert result == Err(MissingParameter("path"))
    assert assembler.calls == []
    assert resolved == []


def test_upstream_override_wins() -> None:
    assembler = MockAssembler()

    result = create_package(
        assembler,
        CONFLUENCE,
        archive_path="/tmp/app.tar.gz",
        version="6.1.2-1",
        upstream_version="6.1.3",
    )

    assert isinstance(result, Ok)
    assert assembler.calls[0].source_dir == "atlassian-confluence-6.1.3"


def test_default_target_dir() -> None:
    assembler = MockAssembler()

    create_package(assembler, CONFLUENCE, archive_path="/tmp/app.tar.gz", version="6.1.2")

    assert assembler.calls[0].target_dir == CONFLUENCE.target_dir


def test_version_from_config_file(tmp_path: Path) -> None:
    config = tmp_path / "confluence.toml"
    config.write_text('version = "6.1.2-2"\n', encoding="utf-8")
    assembler = MockAssembler()

    result = create_package(
        assembler,
        CONFLUENCE,
        archive_path="/tmp/app.tar.gz",
        config_path=str(config),
        upstream_version="6.1.2",
    )

    assert isinstance(result, Ok)
    assert assembler.calls[0].config.version == "6.1.2-2"
    assert assembler.calls[0].source_dir == "atlassian-confluence-6.1.2"


def test_missing_version() -> None:
    assembler = MockAssembler()

    result = create_package(
        assembler, CONFLUENCE, archive_path="/tmp/app.tar.gz", upstream_version="6.1.2"
    )

    assert result == Err(MissingParameter("version"))
    assert assembler.calls == []


def test_file_version_alone_needs_upstream_version(tmp_path: Path) -> None:
    config = tmp_path / "confluence.toml"
    config.write_text('version = "6.1.2-2"\n', encoding="utf-8")
    assembler = MockAssembler()

    result = create_package(
        assembler, CONFLUENCE, archive_path="/tmp/app.tar.gz", config_path=str(config)
    )

    assert result == Err(MissingParameter("atlassian-version"))
    assert assembler.calls == []


def test_config_parse_failure_short_circuits(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    builder_calls: list[str] = []
    monkeypatch.setattr(
        resolver, "with_version", lambda config, version: builder_calls.append(version)
    )
    assembler = MockAssembler()

    result = create_package(
        assembler,
        CONFLUENCE,
        archive_path="/tmp/app.tar.gz",
        config_path=str(tmp_path / "missing.toml"),
        version="6.1.2-1",
    )

    assert isinstance(result, Err)
    assert isinstance(result.error, ConfigParseError)
    assert builder_calls == []
    assert assembler.calls == []


def test_assembler_error_relayed() -> None:
    error = AssemblyError("directory atlassian-confluence-6.1.2 not found in /tmp/app.tar.gz")
    assembler = MockAssembler(error=error)

    result = create_package(assembler, CONFLUENCE, archive_path="/tmp/app.tar.gz", version="6.1.2-1")

    assert result == Err(error)
    assert len(assembler.calls) == 1


@pytest.mark.parametrize(
    ("version", "upstream", "expected"),
    [
        ("6.1.2-1", "", "6.1.2"),
        ("6.1.2-1", "6.0.0", "6.0.0"),
        ("", "6.0.0", "6.0.0"),
        (None, None, ""),
    ],
)
def test_upstream_version_for(version: str | None, upstream: str | None, expected: str) -> None:
    assert upstream_version_for(version, upstream) == expected
