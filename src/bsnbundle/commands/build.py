"""Command: build a bundle and stream it to stdout."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bsnbundle.commands._base import BsnCommand

if TYPE_CHECKING:
    from bsnbundle.commands._context import AppContext

_BUILD_EXAMPLES = """\
  bsnbundle build > dist/bootstrap-native-v4.js
  bsnbundle build --minify > dist/bootstrap-native-v4.min.js
  bsnbundle build --only button,modal
  bsnbundle build --ignore tooltip --ignore popover"""


def _split_names(
    _ctx: click.Context, _param: click.Parameter, value: tuple[str, ...]
) -> list[str] | None:
    """Flatten repeated and comma-separated module names."""
    names = [name.strip() for chunk in value for name in chunk.split(",") if name.strip()]
    return names or None


@click.command(cls=BsnCommand, examples=_BUILD_EXAMPLES)
@click.option(
    "--only",
    multiple=True,
    callback=_split_names,
    help="Include only these modules (comma-separated or repeated).",
)
@click.option(
    "--ignore",
    multiple=True,
    callback=_split_names,
    help="Include every module except these (comma-separated or repeated).",
)
@click.option("--minify", is_flag=True, help="Minify the bundle body.")
@click.pass_obj
def build(
    app: AppContext,
    only: list[str] | None,
    ignore: list[str] | None,
    minify: bool,
) -> None:
    """Bundle modules into a single UMD file on stdout.

    Build information and warnings are written to stderr so the bundle
    can be redirected cleanly.
    """
    from bsnbundle.services.build import BuildOptions, BuildService

    options = BuildOptions(only=only, ignore=ignore, minify=minify, cli=True)
    app.emit(BuildService(app.settings).build(options), diagnostics=True)
