"""``jira-servicedesk-latest-version``: print the latest Service Desk release."""

from __future__ import annotations

import typer

from atlpkg.cli._helpers import configure_logging, exit_on_error
from atlpkg.cli.context import query_context
from atlpkg.products import JIRA_SERVICEDESK
from atlpkg.services.latest import query_latest_version

PARAMETER_LOGLEVEL = "loglevel"

app = typer.Typer(add_completion=False, no_args_is_help=False)


@app.command()
def latest_version(
    loglevel: str = typer.Option(
        "info", f"--{PARAMETER_LOGLEVEL}", help="debug, info, warning or error"
    ),
) -> None:
    """Print the latest released version of Jira Service Desk."""
    ctx = query_context(JIRA_SERVICEDESK)
    configure_logging(loglevel, ctx.console)
    version = exit_on_error(query_latest_version(ctx.http, ctx.product.feed_url), ctx.console)
    ctx.console.print(version)


def main() -> None:
    app()
