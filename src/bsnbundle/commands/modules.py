"""Command: list the modules available for bundling."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bsnbundle.commands._base import BsnCommand

if TYPE_CHECKING:
    from bsnbundle.commands._context import AppContext


@click.command(
    cls=BsnCommand,
    examples="""\
  bsnbundle modules
  bsnbundle -q modules
  bsnbundle --json modules""",
)
@click.pass_obj
def modules(app: AppContext) -> None:
    """List module names accepted by --only and --ignore."""
    from bsnbundle.services.build import BuildService

    app.emit(BuildService(app.settings).list_modules())
