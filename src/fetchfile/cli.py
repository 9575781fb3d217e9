"""Root CLI group for fetchfile with global flags and command registration."""

from __future__ import annotations

import click

from fetchfile import __version__
from fetchfile.commands import register_commands
from fetchfile.commands._base import FetchGroup
from fetchfile.commands._context import AppContext
from fetchfile.config.settings import FetchSettings


@click.group(
    cls=FetchGroup,
    invoke_without_command=True,
    examples="""\
  fetchfile codecs
  fetchfile fetch fetchfile.examples:Config config.bin --save-default
  fetchfile --json check fetchfile.examples:JsonConfig config.json""",
)
@click.version_option(version=__version__, prog_name="fetchfile")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--atomic", is_flag=True, help="Write files via temp-file-then-rename.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    atomic: bool,
) -> None:
    """fetchfile — load-or-default config files for pydantic models."""
    settings = FetchSettings.from_cli(
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        atomic=atomic,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)


def main() -> None:
    """Console-script entry point."""
    cli()
