"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.errors import MissingStyle
from rich.table import Table
from rich.text import Text

from valuefmt.output.console import create_console, get_output, style_for_bool

if TYPE_CHECKING:
    from rich.console import Console

    from valuefmt.services.result import ServiceResult

# The single value each op produces, printed alone in --quiet mode.
_QUIET_KEYS: dict[str, str] = {
    "date_format": "text",
    "date_parse": "value",
    "size": "text",
    "round": "result",
    "reverse": "result",
    "initials": "result",
    "phone": "result",
    "email": "valid",
    "select": "result",
    "truncate": "result",
    "digits": "text",
    "lookup": "value",
}


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

    if result.op == "measure":
        return f"{result.data['width']} {result.data['height']}"

    key = _QUIET_KEYS.get(result.op)
    if key is not None and key in result.data:
        value = result.data[key]
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="fmt.ok")
    op = Text(f"  {result.op}", style="fmt.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="fmt.key")
    if isinstance(value, bool):
        v = Text(str(value).lower(), style=style_for_bool(value))
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block (timing) in verbose mode."""
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


def _render_warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text("  warning: ", style="fmt.warning"), Text(warning), end="")
        console.print()


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="fmt.error")
    op = Text(f"  {result.op}", style="fmt.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Op renderers ──────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Status line plus every data field, the produced value last."""
    _status_line(console, result)
    primary = _QUIET_KEYS.get(result.op)
    for key, value in result.data.items():
        if key != primary:
            _field(console, key, value)
    if primary is not None and primary in result.data:
        value = result.data[primary]
        if isinstance(value, bool):
            _field(console, primary, value)
        else:
            console.print(Text(f"  {primary}: ", style="fmt.key"), Text(str(value), style="fmt.result"))
    _render_warnings(console, result)
    if verbose:
        _render_meta(console, result)


def _render_measure(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "text", d["text"])
    _field(console, "font", f"{d['font']} @ {d['size']}pt")
    console.print(
        Text("  size: ", style="fmt.key"),
        Text(f"{d['width']:.3f} x {d['height']:.3f}", style="fmt.result"),
    )
    if verbose:
        _render_meta(console, result)


def _safe_style(console: Console, style: str) -> str:
    """Return *style* if Rich can parse it, else no style."""
    if not style:
        return ""
    try:
        console.get_style(style)
    except MissingStyle:
        return ""
    return style


def _render_digits(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Show the text with its runs applied, then the run table."""
    _status_line(console, result)
    runs: list[dict[str, Any]] = result.data.get("runs", [])

    styled = Text(result.data.get("text", ""))
    for run in runs:
        style = _safe_style(console, run["style"])
        if style:
            styled.stylize(style, run["start"], run["start"] + run["length"])
    console.print(Text("  text: ", style="fmt.key"), styled)

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Start", justify="right")
    table.add_column("Length", justify="right")
    table.add_column("Text")
    table.add_column("Style", style="dim")
    for run in runs:
        table.add_row(str(run["start"]), str(run["length"]), run["text"], run["style"] or "-")
    console.print(table)

    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Any] = {
    "measure": _render_measure,
    "digits": _render_digits,
}
