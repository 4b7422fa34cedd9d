"""AppContext: state shared by every archlab command.

The root group builds one from the parsed global flags and stores it as
``ctx.obj``; commands receive it with ``@click.pass_obj``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import click

from archlab.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from archlab.config.settings import ArchSettings
    from archlab.infrastructure.workspace import Workspace
    from archlab.services.base import BaseService
    from archlab.services.result import ServiceResult

S = TypeVar("S", bound="BaseService")


class AppContext:
    """Settings, a lazily opened workspace, and result output."""

    def __init__(self, settings: ArchSettings) -> None:
        self.settings = settings
        self._workspace: Workspace | None = None

        from archlab.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def workspace(self) -> Workspace:
        """Created on first access, so ``--help`` never reads the config paths."""
        if self._workspace is None:
            from archlab.infrastructure.workspace import Workspace

            self._workspace = Workspace.from_settings(self.settings)
        return self._workspace

    def service(self, service_cls: type[S]) -> S:
        """Instantiate *service_cls* against this context's workspace."""
        return service_cls(self.workspace)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; exit with status 1 when it failed.

        Successful output goes to stdout and warnings to stderr (except in
        JSON mode, where they are part of the payload), so
        ``archlab -q generate g.json | xargs ...`` sees only paths.
        Failures go to stderr.
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if not result.ok:
            click.echo(output, err=True)
            raise SystemExit(1)

        click.echo(output)
        if not settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
