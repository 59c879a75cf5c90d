"""Root CLI group for coolstore with global flags and command registration."""

from __future__ import annotations

import click

from coolstore import __version__
from coolstore.commands import register_commands
from coolstore.commands._context import AppContext
from coolstore.config.settings import CoolstoreSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="coolstore")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the added SKU on success.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
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
    """Add SKUs to the cart, one at a time or interactively."""
    flags = {
        "json_output": json_output,
        "quiet": quiet,
        "verbose": verbose,
        "log_json": log_json,
    }
    # Unset flags must not shadow env vars or the TOML file.
    settings = CoolstoreSettings.from_cli(
        config_path=config_path,
        **{name: value for name, value in flags.items() if value},
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
