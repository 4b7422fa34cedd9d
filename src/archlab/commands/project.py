"""Command group: stored projects (init, list, show, delete, export, import)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from archlab.commands._base import ArchGroup

if TYPE_CHECKING:
    from archlab.commands._context import AppContext

_PROJECT_EXAMPLES = (
    "project init ride-sharing --starter",
    "project list",
    "project export ride-sharing --output ride.json",
    "project import ride.json --name rides-v2",
)


@click.group(cls=ArchGroup, examples=_PROJECT_EXAMPLES)
def project() -> None:
    """Manage stored domain graph projects."""


@project.command(
    "init",
    examples=(
        "project init shop",
        "project init ride-sharing --starter",
        "project init shop --force",
    ),
)
@click.argument("name")
@click.option("--starter", is_flag=True, help="Start from the ride-sharing sample graph.")
@click.option("--force", is_flag=True, help="Replace an existing project of the same name.")
@click.pass_obj
def init_cmd(app: AppContext, name: str, starter: bool, force: bool) -> None:
    """Create project NAME."""
    from archlab.services.project import ProjectService

    app.emit(app.service(ProjectService).init(name, starter=starter, force=force))


@project.command("list", examples=("project list",))
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List stored projects."""
    from archlab.services.project import ProjectService

    app.emit(app.service(ProjectService).list_projects())


@project.command(examples=("project show ride-sharing",))
@click.argument("name")
@click.pass_obj
def show(app: AppContext, name: str) -> None:
    """Show a summary of project NAME."""
    from archlab.services.project import ProjectService

    app.emit(app.service(ProjectService).load(name))


@project.command(examples=("project delete ride-sharing",))
@click.argument("name")
@click.pass_obj
def delete(app: AppContext, name: str) -> None:
    """Delete project NAME."""
    from archlab.services.project import ProjectService

    app.emit(app.service(ProjectService).delete(name))


@project.command(
    examples=(
        "project export ride-sharing",
        "project export ride-sharing --output ride.json",
    )
)
@click.argument("name")
@click.option(
    "--output",
    "output_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output file (omit to print to stdout).",
)
@click.pass_obj
def export(app: AppContext, name: str, output_file: Path | None) -> None:
    """Export project NAME as snapshot JSON."""
    from archlab.services.project import ProjectService
    from archlab.services.result import ServiceResult

    result = app.service(ProjectService).export(name)
    if not result.ok:
        app.emit(result)
        return

    if output_file:
        output_file.write_text(result.data["content"], encoding="utf-8")
        app.emit(
            ServiceResult(
                ok=True,
                op="export",
                data={"name": name, "output_file": str(output_file)},
            )
        )
    else:
        # Pipe-friendly: raw snapshot to stdout
        click.echo(result.data["content"])


@project.command(
    "import",
    examples=(
        "project import ride.json",
        "project import ride.json --name rides-v2",
    ),
)
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--name", default=None, help="Store under this name instead of meta.name.")
@click.pass_obj
def import_cmd(app: AppContext, file: Path, name: str | None) -> None:
    """Import snapshot FILE into the project store."""
    from archlab.services.project import ProjectService

    app.emit(app.service(ProjectService).import_file(file, name=name))
