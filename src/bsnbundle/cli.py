"""Root CLI group for bsnbundle with global flags and command registration."""

from __future__ import annotations

import click
from pydantic import ValidationError

from bsnbundle import __version__
from bsnbundle.commands import register_commands
from bsnbundle.commands._base import BsnGroup
from bsnbundle.commands._context import AppContext
from bsnbundle.config.settings import BundleSettings
from bsnbundle.errors import ConfigurationError

_CLI_EXAMPLES = """\
  bsnbundle modules
  bsnbundle build > dist/bootstrap-native-v4.js
  bsnbundle -c release/bsnbundle.toml build --minify > dist/bootstrap-native-v4.min.js
  bsnbundle --json build --only modal 2> build.json > dist/modal.js"""


@click.group(cls=BsnGroup, invoke_without_command=True, examples=_CLI_EXAMPLES)
@click.version_option(version=__version__, prog_name="bsnbundle")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON diagnostics.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """bsnbundle — build Native Javascript for Bootstrap bundles."""
    try:
        settings = BundleSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    except (ConfigurationError, ValidationError) as exc:
        raise click.ClickException(str(exc)) from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
