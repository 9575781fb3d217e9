"""Command: diagnose a config file as absent, corrupt or valid."""

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
  fetchfile check fetchfile.examples:Config config.bin
  fetchfile -q check fetchfile.examples:YamlConfig config.yaml
  fetchfile -v check myapp.settings:AppConfig config.json""",
)
@click.argument("target", type=TARGET)
@click.argument("path", type=CONFIG_PATH)
@click.pass_obj
def check(app: AppContext, target: type[Fetchable], path: Path) -> None:
    """Report whether PATH holds a valid TARGET config.

    Exits with status 1 when the file exists but cannot be decoded.
    """
    app.emit(app.service(target).check(path))
