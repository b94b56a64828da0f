"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from storefront.output.console import create_console, get_output, style_for_field

if TYPE_CHECKING:
    from rich.console import Console

    from storefront.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console, verbose=verbose)

    if verbose:
        _render_meta(console, result)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="store.ok")
    op = Text(f"  {result.op}", style="store.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="store.key")
    v = Text(str(value), style=style_for_field(key))
    console.print(k, v, end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including the telemetry span tree."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(console: Console, span_data: dict[str, Any], indent: int = 4) -> None:
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)
    style = "yellow" if duration > 100 else "dim"
    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {name}"
    annotations = span_data.get("annotations")
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="store.error")
    op = Text(f"  {result.op}", style="store.op")
    console.print(label, op, Text(" — "), msg)

    if err:
        console.print(Text(f"  code: {err.code}", style="dim"))
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_message(result: ServiceResult, console: Console) -> None:
    """Operations whose payload carries a sentence for the customer."""
    _status_line(console, result)
    console.print(f"  {result.data.get('message', '')}")


def _render_status(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    online = bool(result.data.get("online"))
    if online:
        label = Text("online", style="store.online")
    else:
        label = Text("offline", style="store.offline")
    hours = f"{result.data.get('open_hour')}:00-{result.data.get('close_hour')}:00"
    console.print(
        Text.assemble("  store is ", label, f" at {result.data.get('now')} (hours {hours})")
    )


def _render_coupons(result: ServiceResult, console: Console) -> None:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Code", style="store.op", no_wrap=True)
    table.add_column("Discount", style="store.money", justify="right")
    for item in result.data.get("items", []):
        table.add_row(str(item["code"]), f"{item['discount']:.0%}")
    console.print(table)
    console.print(f"\n{result.data.get('count', 0)} coupons")


def _render_page(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    _field(console, "route", result.data.get("route", ""))
    console.print(result.data.get("content", ""), markup=False)


_OP_RENDERERS: dict[str, Any] = {
    "get_shipping_info": _render_message,
    "create_product": _render_message,
    "is_online": _render_status,
    "list_coupons": _render_coupons,
    "render_page": _render_page,
}
