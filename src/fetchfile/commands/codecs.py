"""Command: list the available codecs."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fetchfile.commands._base import FetchCommand

if TYPE_CHECKING:
    from fetchfile.commands._context import AppContext


@click.command(
    cls=FetchCommand,
    examples="""\
  fetchfile codecs
  fetchfile --json codecs""",
)
@click.pass_obj
def codecs(app: AppContext) -> None:
    """List the on-disk encodings a config type can select."""
    from fetchfile.services.config_file import list_codecs

    app.emit(list_codecs())
