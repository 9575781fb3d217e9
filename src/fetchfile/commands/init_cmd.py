"""Command: write a default config file (named init_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fetchfile.commands._base import FetchCommand
from fetchfile.commands._params import CONFIG_PATH, TARGET

if TYPE_CHECKING:
    from pathlib import Path

    from fetchfile.commands._context import AppContext
    from fetchfile.fetchable import Fetchable

_INIT_EXAMPLES = """\
  fetchfile init fetchfile.examples:Config config.bin
  fetchfile init fetchfile.examples:JsonConfig config.json --force
  fetchfile --atomic init myapp.settings:AppConfig /etc/myapp/config.yaml"""


@click.command("init", cls=FetchCommand, examples=_INIT_EXAMPLES)
@click.argument("target", type=TARGET)
@click.argument("path", type=CONFIG_PATH)
@click.option("--force", is_flag=True, help="Overwrite PATH if it already exists.")
@click.pass_obj
def init_cmd(app: AppContext, target: type[Fetchable], path: Path, force: bool) -> None:
    """Write the default TARGET config to PATH."""
    app.emit(app.service(target).init(path, force=force))
