"""Command: generate C# source files from a domain graph."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from archlab.commands._base import ArchCommand

if TYPE_CHECKING:
    from archlab.commands._context import AppContext


@click.command(
    cls=ArchCommand,
    examples=(
        "generate ride-sharing",
        "generate graph.json --output ./src",
        "generate graph.json --print",
    ),
)
@click.argument("source")
@click.option(
    "--output",
    "output_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Write the generated files under this directory.",
)
@click.option("--print", "include_content", is_flag=True, help="Print the generated sources.")
@click.pass_obj
def generate(
    app: AppContext,
    source: str,
    output_dir: Path | None,
    include_content: bool,
) -> None:
    """Generate source files for every node of SOURCE."""
    from archlab.services.generate import GenerateService

    app.emit(
        app.service(GenerateService).generate_source(
            source,
            output_dir=output_dir,
            include_content=include_content,
        )
    )
