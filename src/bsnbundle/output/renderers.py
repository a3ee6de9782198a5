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

from bsnbundle.output.console import create_console, get_output, style_for_mode

if TYPE_CHECKING:
    from rich.console import Console

    from bsnbundle.services.result import ServiceResult


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
    if result.op == "list_modules":
        return "\n".join(item["name"] for item in result.data.get("modules", []))
    return ""


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="bsn.error")
    op = Text(f"  {result.op}", style="bsn.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg), soft_wrap=True)

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Build renderer ────────────────────────────────────────────────────


def _render_build(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the build announcement, mode line, and included modules."""
    d = result.data
    console.print(f"Building {d.get('product', '')} {d.get('version', '')} ..")
    mode = str(d.get("mode", "unminified"))
    console.print(Text(f"{mode.capitalize()} Build", style=style_for_mode(mode)))
    console.print("Included modules:")
    for name in d.get("modules", []):
        console.print(Text(f"  {name}", style="bsn.module"))
    if verbose:
        console.print(Text(f"  bytes: {d.get('bytes', 0)}", style="bsn.key"))


# ── Module listing ────────────────────────────────────────────────────


def _render_modules(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    modules: list[dict[str, Any]] = result.data.get("modules", [])
    if not modules:
        console.print("No modules found.")
        return
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Module", style="bsn.module", no_wrap=True)
    table.add_column("File", style="bsn.path")
    for item in modules:
        table.add_row(str(item.get("name", "")), str(item.get("file", "")))
    console.print(table)


# ── Fallback ──────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print(Text("OK", style="bsn.ok"), Text(f"  {result.op}", style="bsn.op"))
    for key, value in result.data.items():
        console.print(Text(f"  {key}: ", style="bsn.key"), Text(str(value)))


_OP_RENDERERS: dict[str, Any] = {
    "build": _render_build,
    "list_modules": _render_modules,
}
