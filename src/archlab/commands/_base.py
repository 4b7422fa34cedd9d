"""Click base classes that add an ``--examples`` flag.

``examples`` is a sequence of invocations (without the leading program
name). ``--examples`` prints them one per line and exits before any
argument validation, so ``archlab check --examples`` works without a
SOURCE.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import click


def _examples_option(examples: Sequence[str]) -> click.Option:
    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        for line in examples:
            click.echo(f"  archlab {line}")
        ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show_examples,
        help="Show usage examples and exit.",
    )


class ArchCommand(click.Command):
    """Command accepting ``examples=(...)`` in its decorator."""

    def __init__(self, *args: Any, examples: Sequence[str] = (), **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = tuple(examples)
        if self.examples:
            self.params.append(_examples_option(self.examples))


class ArchGroup(click.Group):
    """Group whose subcommands default to :class:`ArchCommand`."""

    command_class = ArchCommand

    def __init__(self, *args: Any, examples: Sequence[str] = (), **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = tuple(examples)
        if self.examples:
            self.params.append(_examples_option(self.examples))
