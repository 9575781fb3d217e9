"""Click base classes that carry per-command usage examples.

Every fetchfile command takes a TARGET and a PATH, which is easier to
show than to describe, so each command declares an ``examples`` block.
``--help`` stays short; ``--examples`` prints the block and exits.
"""

from __future__ import annotations

from typing import Any

import click


class ExamplesOption(click.Option):
    """Eager ``--examples`` flag bound to one command's example text."""

    def __init__(self, examples: str) -> None:
        self.examples = examples
        super().__init__(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=self._show,
            help="Show usage examples.",
        )

    def _show(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)


class _ExamplesMixin:
    """Accepts ``examples=`` and appends an :class:`ExamplesOption`."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(ExamplesOption(examples))


class FetchCommand(_ExamplesMixin, click.Command):
    """Click Command with an optional ``--examples`` flag."""


class FetchGroup(_ExamplesMixin, click.Group):
    """Click Group whose subcommands default to :class:`FetchCommand`."""

    command_class = FetchCommand
