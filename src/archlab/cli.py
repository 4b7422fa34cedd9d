"""The ``archlab`` root command: global flags, settings and logging."""

from __future__ import annotations

import click

from archlab import __version__
from archlab.commands import register_commands
from archlab.commands._base import ArchGroup
from archlab.commands._context import AppContext
from archlab.config.settings import ArchSettings


@click.group(
    name="archlab",
    cls=ArchGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
    examples=(
        "project init ride-sharing --starter",
        "check ride-sharing --errors-only",
        "generate ride-sharing --output ./src",
        "--json generate graph.json --print",
    ),
)
@click.version_option(version=__version__, prog_name="archlab")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only ids or paths.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and full result detail.")
@click.option("--log-json", is_flag=True, help="Write log lines to stderr as JSON.")
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    help="Use this archlab.toml instead of searching upward from the CWD.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """Validate domain graphs and generate Clean Architecture C# code.

    SOURCE arguments take a snapshot JSON file or the name of a stored
    project.
    """
    settings = ArchSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
