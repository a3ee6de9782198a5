"""Bundle layout — the structured input of the UMD wrapper template.

The assembler never concatenates the wrapper by hand. It builds a
:class:`BundleLayout` with every block already indented, and the template
only places those blocks.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from bsnbundle.domain.release import ReleaseInfo

# Indentation of the factory body inside the wrapper.
BODY_INDENT = "  "


@dataclass(frozen=True)
class BundleLayout:
    """Everything the wrapper template needs, in render order."""

    header: str
    utilities: str
    version: str
    modules: str
    init: str
    exports: tuple[str, ...]


def render_header(release: ReleaseInfo) -> str:
    """One-line attribution comment, newline included."""
    return (
        f"// {release.product} {release.version_tag} | © {release.copyright}"
        f" | {release.license_tag}\n"
    )


def indent_block(text: str, prefix: str = BODY_INDENT) -> str:
    """Re-indent every line after the first by *prefix*.

    The first line is placed by the template. Blank lines stay empty so the
    output carries no trailing whitespace.
    """
    lines = text.split("\n")
    return "\n".join([lines[0], *(prefix + line if line else line for line in lines[1:])])


def _terminated(source: str) -> str:
    return source if source.endswith("\n") else source + "\n"


def build_layout(
    *,
    release: ReleaseInfo,
    modules: Sequence[str],
    sources: Sequence[str],
    utilities: str,
    init: str,
) -> BundleLayout:
    """Pair the selected module names with their sources.

    *modules* is authoritative for the export table; *sources* must be in
    the same order.
    """
    if len(modules) != len(sources):
        msg = f"Got {len(sources)} sources for {len(modules)} modules"
        raise ValueError(msg)
    return BundleLayout(
        header=render_header(release),
        utilities=indent_block(utilities.strip("\n")),
        version=release.version,
        modules=indent_block("".join(_terminated(source) for source in sources).strip("\n")),
        init=indent_block(init.strip("\n")),
        exports=tuple(modules),
    )
