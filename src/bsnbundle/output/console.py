"""Rich Console factory and theme for bsnbundle diagnostics.

Creates Console instances that render to a StringIO buffer, so renderers
return plain strings. In non-TTY environments (tests, pipes) Rich
automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

BSN_THEME = Theme(
    {
        "bsn.ok": "bold green",
        "bsn.error": "bold red",
        "bsn.warning": "bold yellow",
        "bsn.op": "bold cyan",
        "bsn.key": "dim",
        "bsn.module": "bold blue",
        "bsn.path": "dim",
        "bsn.mode.minified": "magenta",
        "bsn.mode.unminified": "cyan",
    }
)

_MODE_STYLES: dict[str, str] = {
    "minified": "bsn.mode.minified",
    "unminified": "bsn.mode.unminified",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=BSN_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_mode(mode: str) -> str:
    """Return the Rich style name for a build mode."""
    return _MODE_STYLES.get(mode, "")
