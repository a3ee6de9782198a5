"""Rich/JSON output helpers.

The formatter layer adapts ServiceResult to the requested output mode:
Rich text for humans, JSON for machines, bare lines for ``--quiet``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from bsnbundle.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from bsnbundle.services.result import ServiceResult

# Never echoed as diagnostics; the bundle has its own stream.
_HIDDEN_KEYS = frozenset({"bundle"})


@dataclass(frozen=True)
class OutputSettings:
    """Output flags taken from the CLI root group."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        data = {k: v for k, v in result.data.items() if k not in _HIDDEN_KEYS}
        return result.model_copy(update={"data": data}).model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
