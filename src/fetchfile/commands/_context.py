"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Configures logging and owns result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fetchfile.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from fetchfile.config.settings import FetchSettings
    from fetchfile.fetchable import Fetchable
    from fetchfile.services.config_file import ConfigFileService
    from fetchfile.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: FetchSettings) -> None:
        self.settings = settings

        from fetchfile.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def service(self, model_cls: type[Fetchable]) -> ConfigFileService:
        """Build a ConfigFileService for *model_cls* honoring ``--atomic``."""
        from fetchfile.services.config_file import ConfigFileService

        return ConfigFileService(model_cls, atomic=self.settings.atomic)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
