"""``confluence-create-deb``: build a Debian package from a Confluence tarball."""

from __future__ import annotations

import typer

from atlpkg.cli._helpers import configure_logging, exit_on_error
from atlpkg.cli.context import build_context
from atlpkg.products import CONFLUENCE
from atlpkg.services.build import (
    PARAMETER_CONFIG,
    PARAMETER_PATH,
    PARAMETER_TARGET,
    PARAMETER_UPSTREAM_VERSION,
    PARAMETER_VERSION,
    create_package,
)

app = typer.Typer(add_completion=False, no_args_is_help=False)


@app.command()
def create_deb(
    path: str = typer.Option("", f"--{PARAMETER_PATH}", help="Path to the upstream tar.gz"),
    config: str = typer.Option("", f"--{PARAMETER_CONFIG}", help="Path to a TOML package config"),
    version: str = typer.Option("", f"--{PARAMETER_VERSION}", help="Package version, e.g. 6.1.2-1"),
    atlassian_version: str = typer.Option(
        "",
        f"--{PARAMETER_UPSTREAM_VERSION}",
        help="Upstream version (default: --version up to the first '-')",
    ),
    target: str = typer.Option(
        CONFLUENCE.target_dir, f"--{PARAMETER_TARGET}", help="Output directory for the package"
    ),
) -> None:
    """Create a Debian package for Atlassian Confluence."""
    ctx = build_context(CONFLUENCE)
    configure_logging("info", ctx.console)
    deb = exit_on_error(
        create_package(
            ctx.assembler,
            ctx.product,
            archive_path=path,
            config_path=config,
            version=version,
            upstream_version=atlassian_version,
            target_dir=target,
        ),
        ctx.console,
    )
    ctx.console.success(str(deb))


def main() -> None:
    app()
