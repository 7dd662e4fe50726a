"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from issuelink.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from issuelink.services.result import ServiceResult


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
    """Render minimal output for ``--quiet`` mode.

    Only the value a script would want: the URL, the issue ID, or the
    linkified text.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    for key in ("url", "text", "issue"):
        if key in result.data:
            return str(result.data[key])

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(f"{item['pattern']}\t{item['template']}" for item in items)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="il.ok")
    op = Text(f"  {result.op}", style="il.op")
    console.print(Text.assemble(label, op))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="il.key")
    if key == "issue":
        v = Text(str(value), style="il.issue")
    elif key == "url":
        v = Text(str(value), style="il.url")
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v), soft_wrap=True)


# ── Per-op renderers ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_get_link(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "issue", result.data.get("issue", ""))
    _field(console, "url", result.data.get("url", ""))
    if verbose:
        _field(console, "source", result.data.get("source", ""))
        _field(console, "issue_from", result.data.get("issue_from", ""))


def _render_linkify(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    # Written raw: Rich would expand tabs and wrap long lines.
    console.file.write(result.data.get("text", ""))
    if verbose:
        console.print()
        console.print(Text(f"  linked: {result.data.get('count', 0)}", style="il.key"))


def _render_list_rules(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "default_pattern", result.data.get("default_pattern", ""))
    items = result.data.get("items") or []
    if not items:
        console.print(Text("  no rules configured", style="il.key"))
        return
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("#", justify="right")
    table.add_column("pattern", style="il.pattern")
    table.add_column("template")
    for item in items:
        table.add_row(
            Text(str(item["index"])),
            Text(item["pattern"]),
            Text(item["template"]),
        )
    console.print(table)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    label = Text("ERROR", style="il.error")
    op = Text(f"  {result.op}", style="il.op")
    console.print(Text.assemble(label, op))
    message = result.error.message if result.error else "Unknown error"
    console.print(Text(f"  {message}"))
    if verbose and result.error and result.error.detail:
        for key, value in result.error.detail.items():
            _field(console, key, value)


_OP_RENDERERS = {
    "get_link": _render_get_link,
    "linkify": _render_linkify,
    "list_rules": _render_list_rules,
}
