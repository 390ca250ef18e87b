"""Root CLI group for nagrange with global flags and command registration."""

from __future__ import annotations

import click

from nagrange import __version__
from nagrange.commands import register_commands
from nagrange.commands._base import RangeGroup
from nagrange.commands._context import AppContext
from nagrange.config.settings import RangeSettings


@click.group(
    cls=RangeGroup,
    invoke_without_command=True,
    examples="""\
  nagrange parse @10:20
  nagrange check 10:20 5 15 25
  nagrange --json check 10 11""",
)
@click.version_option(version=__version__, prog_name="nagrange")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
) -> None:
    """nagrange — Nagios/Icinga threshold range parser and checker."""
    settings = RangeSettings.from_cli(
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
