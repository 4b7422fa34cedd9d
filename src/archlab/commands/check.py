"""Command: validate a domain graph."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from archlab.commands._base import ArchCommand

if TYPE_CHECKING:
    from archlab.commands._context import AppContext


@click.command(
    cls=ArchCommand,
    examples=(
        "check ride-sharing",
        "check graph.json",
        "check graph.json --errors-only",
        "--json check graph.json --min-severity error",
    ),
)
@click.argument("source")
@click.option(
    "--min-severity",
    type=click.Choice(["warning", "error"]),
    default=None,
    help="Hide findings below this severity (default from [check] config).",
)
@click.option("--errors-only", is_flag=True, help="Shortcut for --min-severity error.")
@click.pass_obj
def check(app: AppContext, source: str, min_severity: str | None, errors_only: bool) -> None:
    """Validate SOURCE (a snapshot file or stored project name)."""
    from archlab.services.check import CheckService

    threshold = "error" if errors_only else (min_severity or app.settings.check.min_severity)
    app.emit(app.service(CheckService).check_source(source, min_severity=threshold))
