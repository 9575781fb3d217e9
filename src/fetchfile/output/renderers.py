"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from fetchfile.output.console import create_console, get_output, style_for_state

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from fetchfile.services.result import ServiceResult


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
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if result.op == "fetch":
        return "default" if data.get("is_default") else "loaded"
    if result.op == "check":
        return str(data.get("state", ""))
    if result.op == "init":
        return str(data.get("path", ""))
    if result.op == "codecs":
        return "\n".join(item["name"] for item in data.get("items", []))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="ff.ok")
    op = Text(f"  {result.op}", style="ff.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="ff.key")
    if not style:
        style = {"path": "ff.path", "codec": "ff.codec"}.get(key, "")
    console.print(k, Text(str(value), style=style), sep="", end="")
    console.print()


def _format_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def _value_table(values: dict[str, Any]) -> Table:
    """Build a two-column table of config field values."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Field", style="bold", no_wrap=True)
    table.add_column("Value")
    for key, value in values.items():
        table.add_row(Text(key), Text(_format_value(value)))
    return table


def _render_value(console: Console, result: ServiceResult) -> None:
    values = result.data.get("value")
    if isinstance(values, dict) and values:
        console.print()
        console.print(_value_table(values))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="ff.error")
    op = Text(f"  {result.op}", style="ff.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if err and err.detail:
        state = err.detail.get("state")
        if state:
            _field(console, "state", state, style_for_state(str(state)))
        if verbose:
            console.print(Text("  detail:", style="dim"))
            for k, v in err.detail.items():
                console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_fetch(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "path", data.get("path", ""))
    _field(console, "codec", data.get("codec", ""))
    if data.get("is_default"):
        source = "default (saved)" if data.get("saved") else "default"
        _field(console, "source", source, "ff.default")
    else:
        _field(console, "source", "file", "ff.loaded")
    if verbose:
        _field(console, "target", data.get("target", ""))
    _render_value(console, result)


def _render_init(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "path", data.get("path", ""))
    _field(console, "codec", data.get("codec", ""))
    _field(console, "size", f"{data.get('size', 0)} bytes")
    if data.get("overwritten"):
        _field(console, "overwritten", "yes", "ff.default")
    if verbose:
        _field(console, "target", data.get("target", ""))
        _render_value(console, result)


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    state = str(data.get("state", ""))
    _status_line(console, result)
    _field(console, "path", data.get("path", ""))
    _field(console, "codec", data.get("codec", ""))
    _field(console, "state", state, style_for_state(state))
    if state == "absent" and verbose:
        _field(console, "reason", data.get("reason", ""))
    if state == "valid":
        _field(console, "matches_default", "yes" if data.get("matches_default") else "no")
        _render_value(console, result)


def _render_codecs(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Codec", style="ff.codec", no_wrap=True)
    table.add_column("Suffix", style="dim")
    table.add_column("Description")
    for item in result.data.get("items", []):
        table.add_row(item["name"], item["suffix"], item["description"])
    console.print(table)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, _format_value(value))


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "fetch": _render_fetch,
    "init": _render_init,
    "check": _render_check,
    "codecs": _render_codecs,
}
