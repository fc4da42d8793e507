"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from jsonrec.output.console import create_console, get_output, style_for_variant

if TYPE_CHECKING:
    from rich.console import Console

    from jsonrec.services.result import ServiceResult

Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    no_color: bool = False,
    width: int | None = None,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console(no_color=no_color, width=width)

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
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="jr.ok")
    op = Text(f"  {result.op}", style="jr.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="jr.key")
    if key == "variant":
        v = Text(str(value), style=style_for_variant(str(value)))
    elif key == "path":
        v = Text(str(value), style="jr.path")
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))


def _render_schema_violations(console: Console, violations: list[dict[str, Any]]) -> None:
    if not violations:
        return
    console.print(Text(f"  schema violations ({len(violations)}):", style="jr.warning"))
    for v in violations:
        console.print(f"    {v.get('path', '$')}: {v.get('message', '')}", markup=False)


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {name}"
    annotations = span_data.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{ak}={av}" for ak, av in annotations.items()) + ")"

    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="jr.error")
    op = Text(f"  {result.op}", style="jr.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if not verbose or err is None or not err.detail:
        return
    detail = err.detail
    for decode_err in detail.get("errors", []):
        console.print(f"    {decode_err['location']}: {decode_err['message']}", markup=False)
    _render_schema_violations(console, detail.get("schema_violations", []))
    _render_meta(console, result)


# ── Operation renderers ───────────────────────────────────────────────


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a passing validation outcome."""
    d = result.data
    _status_line(console, result)
    _field(console, "variant", d.get("variant", ""))
    _field(console, "records", d.get("record_count", 0))
    console.print(Text("  valid", style="jr.valid"))
    if d.get("schema_gating"):
        _field(console, "schema_gating", "on")
    if verbose:
        _render_schema_violations(console, d.get("schema_violations", []))
        _render_meta(console, result)


def _render_decode(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render decoded records as a name/value table."""
    d = result.data
    _status_line(console, result)
    _field(console, "variant", d.get("variant", ""))
    _field(console, "count", d.get("count", 0))

    items = d.get("items", [])
    if items:
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("#", justify="right", style="dim")
        table.add_column("name", style="bold")
        table.add_column("value")
        for idx, item in enumerate(items):
            table.add_row(str(idx), Text(item["name"]), Text(item["value"]))
        console.print(table)
    if verbose:
        _render_meta(console, result)


def _render_schema(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render both schema documents as indented JSON."""
    d = result.data
    _status_line(console, result)
    _field(console, "variant", d.get("variant", ""))
    for key in ("document", "records"):
        console.print(Text(f"  {key}:", style="jr.key"))
        console.print(_json.dumps(d.get(key, {}), indent=2), markup=False)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Renderer] = {
    "validate": _render_validate,
    "decode": _render_decode,
    "schema": _render_schema,
}
