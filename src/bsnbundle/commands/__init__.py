"""Subcommand modules for bsnbundle.

Provides register_commands() which uses deferred imports to keep
``bsnbundle --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from bsnbundle.commands.build import build
    from bsnbundle.commands.modules import modules

    cli.add_command(build)
    cli.add_command(modules)
