"""Root CLI group for storefront with global flags and command registration."""

from __future__ import annotations

from datetime import datetime

import click

from storefront import __version__
from storefront.commands import register_commands
from storefront.commands._context import AppContext
from storefront.config.settings import StoreSettings

AT_FORMATS = ["%Y-%m-%d %H:%M", "%Y-%m-%dT%H:%M", "%Y-%m-%d"]


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="storefront")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--sync", is_flag=True, help="Force synchronous event dispatch.")
@click.option(
    "--at",
    type=click.DateTime(formats=AT_FORMATS),
    default=None,
    help="Pin the store clock to this local time.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    sync: bool,
    at: datetime | None,
) -> None:
    """storefront — pricing, shipping, checkout and account rules."""
    settings = StoreSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        sync=sync,
        at=at,
    )
    app = AppContext(settings)
    ctx.obj = app
    ctx.call_on_close(app.close)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
