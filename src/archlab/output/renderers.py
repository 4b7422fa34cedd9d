"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from archlab.output.console import create_console, get_output, severity_text

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from archlab.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"

    if result.op == "generate":
        return "\n".join(f["path"] for f in result.data.get("files", []))

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item.get("id", "")) for item in items if isinstance(item, dict))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="arch.ok")
    op = Text(f"  {result.op}", style="arch.op")
    console.print(label, op, end="")
    console.print()


def _format_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


# ── Renderers ─────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Key-value fallback for ops without a dedicated renderer."""
    _status_line(console, result)
    for key, value in result.data.items():
        if key == "graph" and not verbose:
            continue
        console.print(Text(f"  {key}: ", style="arch.key"), Text(_format_value(value)), sep="")


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _status_line(console, result)
    issues = data.get("issues", [])
    if issues:
        table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
        table.add_column("Severity")
        table.add_column("Node", style="arch.node")
        table.add_column("Message")
        for issue in issues:
            table.add_row(
                severity_text(issue["severity"]),
                Text(issue["nodeId"]),
                Text(issue["message"]),
            )
        console.print(table)

    if data.get("healthy"):
        verdict = Text("healthy", style="arch.ok")
    else:
        verdict = Text("unhealthy", style="arch.severity.error")
    counts = f" ({data.get('error_count', 0)} error(s), {data.get('warning_count', 0)} warning(s))"
    console.print(
        Text(f"  {data.get('project', '')}: "),
        verdict,
        Text(counts),
        sep="",
    )


def _render_generate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _status_line(console, result)
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Path", style="arch.path")
    table.add_column("Lines", justify="right")
    for entry in data.get("files", []):
        table.add_row(Text(entry["path"]), str(entry["lines"]))
    if data.get("files"):
        console.print(table)

    summary = f"  {data.get('count', 0)} file(s)"
    if "output_dir" in data:
        summary += f" written to {data['output_dir']}"
    console.print(summary)

    for entry in data.get("files", []):
        if "content" in entry:
            console.print()
            console.print(Text(f"// {entry['path']}", style="arch.path"))
            console.print(Text(entry["content"].rstrip("\n")))


def _render_list_projects(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    _status_line(console, result)
    items = result.data.get("items", [])
    if not items:
        console.print("  No projects stored.")
        return
    for item in items:
        console.print(Text(f"  {item['id']}", style="arch.node"))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    label = Text("ERROR", style="arch.severity.error")
    op = Text(f"  {result.op}", style="arch.op")
    console.print(label, op, end="")
    console.print()
    if result.error is None:
        console.print("  Unknown error")
        return
    console.print(Text(f"  {result.error.message}"))
    if verbose:
        console.print(Text(f"  code: {result.error.code}", style="arch.key"))
        for key, value in result.error.detail.items():
            console.print(Text(f"  {key}: {_format_value(value)}", style="arch.key"))


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "check": _render_check,
    "generate": _render_generate,
    "list_projects": _render_list_projects,
}
