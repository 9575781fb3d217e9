"""Command: load a config file or fall back to the type's default."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fetchfile.commands._base import FetchCommand
from fetchfile.commands._params import CONFIG_PATH, TARGET

if TYPE_CHECKING:
    from pathlib import Path

    from fetchfile.commands._context import AppContext
    from fetchfile.fetchable import Fetchable


@click.command(
    cls=FetchCommand,
    examples="""\
  fetchfile fetch fetchfile.examples:Config config.bin
  fetchfile fetch fetchfile.examples:Config config.bin --save-default
  fetchfile --json fetch fetchfile.examples:YamlConfig config.yaml
  fetchfile -q fetch myapp.settings:AppConfig ~/.config/myapp/config.json""",
)
@click.argument("target", type=TARGET)
@click.argument("path", type=CONFIG_PATH)
@click.option(
    "--save-default",
    is_flag=True,
    help="Write the default back to PATH when no valid file was found.",
)
@click.pass_obj
def fetch(app: AppContext, target: type[Fetchable], path: Path, save_default: bool) -> None:
    """Load TARGET from PATH, or use its default if PATH is absent or invalid."""
    app.emit(app.service(target).fetch(path, save_default=save_default))
