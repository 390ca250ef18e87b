"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from nagrange.output.console import create_console, get_output, style_for_alert

if TYPE_CHECKING:
    from rich.console import Console

    from nagrange.services.result import ServiceResult


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

    A check prints one ``ALERT``/``OK`` word per value; anything else
    prints the status line only.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if result.op == "check_range" and isinstance(items, list):
        return "\n".join("ALERT" if item.get("alert") else "OK" for item in items)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="range.ok")
    op = Text(f"  {result.op}", style="range.op")
    console.print(label, op)


def _field(console: Console, key: str, value: Any) -> None:
    console.print(Text(f"  {key}: ", style="range.key"), Text(str(value)), sep="")


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="range.error")
    op = Text(f"  {result.op}", style="range.op")
    dash = Text(" — ")
    console.print(label, op, dash, Text(msg), sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Range renderers ───────────────────────────────────────────────────


def _render_parse(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    data = result.data
    spec = Text(data["spec"] or '""', style="range.spec")
    console.print(Text("  spec: ", style="range.key"), spec, sep="")
    for key in ("start", "end", "invert", "violation"):
        _field(console, key, data[key])


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    data = result.data
    _field(console, "range", data["violation"])

    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Value", justify="right")
    table.add_column("Result")
    for item in data["items"]:
        alert = bool(item["alert"])
        label = Text("ALERT" if alert else "OK", style=style_for_alert(alert))
        table.add_row(str(item["value"]), label)
    console.print(table)

    _field(console, "alerts", f"{data['alert_count']}/{data['count']}")
    if verbose:
        _field(console, "bounds", _json.dumps(data["range"], separators=(",", ":")))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "parse_range": _render_parse,
    "check_range": _render_check,
}
