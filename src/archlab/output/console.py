"""Rich console plumbing for archlab output.

Renderers draw into a Console backed by a StringIO and hand the text back,
so ``format_result`` stays a pure ``ServiceResult -> str`` function and
the command layer decides where the text goes. Rich drops colour codes by
itself when the target is not a terminal (pipes, CliRunner).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

ARCH_THEME = Theme(
    {
        "arch.ok": "bold green",
        "arch.op": "bold cyan",
        "arch.key": "dim",
        "arch.node": "bold blue",
        "arch.path": "dim",
        "arch.severity.error": "bold red",
        "arch.severity.warning": "bold yellow",
    }
)

DEFAULT_WIDTH = 120


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Console writing to an in-memory buffer (see :func:`get_output`)."""
    return Console(
        file=StringIO(),
        theme=ARCH_THEME,
        no_color=no_color,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    """Text rendered so far by a console from :func:`create_console`."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def severity_text(severity: str) -> Text:
    """Severity label styled by level; unknown levels are left plain."""
    style = f"arch.severity.{severity}"
    return Text(severity, style=style if style in ARCH_THEME.styles else "")
