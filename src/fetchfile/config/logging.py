"""structlog setup for the fetchfile CLI.

The library never configures logging. It logs through stdlib loggers and
tags each load/save line with the record attributes named in
:data:`fetchfile.fetchable.LOG_FIELDS`. Here those records are routed
through a single structlog formatter on stderr, so ``--log-json`` turns
every fetch decision into a JSON object carrying ``config_path``,
``codec`` and ``outcome`` (absent, corrupt, loaded or saved).
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.types import Processor

from fetchfile.fetchable import LOG_FIELDS

LIBRARY_LOGGER = "fetchfile"


def _pre_chain() -> list[Processor]:
    """Processors applied to stdlib records before rendering."""
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(allow=LOG_FIELDS),
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def _renderer(log_json: bool) -> Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def _stderr_handler(log_json: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )
    return handler


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Install the stderr handler and set the library's level.

    Safe to call repeatedly: the root logger always ends up with exactly
    one handler.

    Args:
        verbose: Show the ``fetchfile`` DEBUG/INFO lines (absent and
            corrupt files). Otherwise only WARNING and above.
        log_json: Render JSON lines instead of console text.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            *_pre_chain(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers[:] = [_stderr_handler(log_json)]
    root.setLevel(logging.WARNING)

    logging.getLogger(LIBRARY_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
