"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Centralizes result emission (stdout/stderr routing
and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bsnbundle.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from bsnbundle.config.settings import BundleSettings
    from bsnbundle.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.
    """

    def __init__(self, settings: BundleSettings) -> None:
        self.settings = settings

        from bsnbundle.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult, *, diagnostics: bool = False) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, or to stderr when
          *diagnostics* is set (stdout then belongs to the artifact).
        * Failure: writes to stderr, exits with code 1.

        Warnings always go to stderr, ahead of the error on failure.
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if result.ok:
            if output:
                click.echo(output, err=diagnostics)
            self._echo_warnings(result)
        else:
            self._echo_warnings(result)
            click.echo(output, err=True)
            raise SystemExit(1)

    def _echo_warnings(self, result: ServiceResult) -> None:
        # In JSON mode, warnings are already in the serialized payload.
        if self.settings.json_output:
            return
        for warning in result.warnings:
            click.echo(f"WARNING: {warning}", err=True)
