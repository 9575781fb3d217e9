"""Click parameter types shared by the config file commands."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click

from fetchfile.fetchable import Fetchable


class FetchableTarget(click.ParamType):
    """A ``module:ClassName`` string resolved to a Fetchable subclass."""

    name = "TARGET"

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> type[Fetchable]:
        if isinstance(value, type) and issubclass(value, Fetchable):
            return value

        from fetchfile.services.targets import resolve_target

        try:
            return resolve_target(str(value))
        except ValueError as exc:
            self.fail(str(exc), param, ctx)


TARGET = FetchableTarget()

CONFIG_PATH = click.Path(path_type=Path)
