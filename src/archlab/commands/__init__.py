"""archlab subcommands.

Command modules are imported inside :func:`register_commands` so that
importing :mod:`archlab.cli` stays cheap; services are imported inside
each command body for the same reason.
"""

from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click

# (module, attribute) for every top-level command, in help order.
COMMANDS: tuple[tuple[str, str], ...] = (
    ("archlab.commands.check", "check"),
    ("archlab.commands.generate", "generate"),
    ("archlab.commands.project", "project"),
)


def register_commands(cli: click.Group) -> None:
    for module_name, attr in COMMANDS:
        cli.add_command(getattr(import_module(module_name), attr))
