"""structlog configuration for paramdeps.

The library only logs through ``logging.getLogger(__name__)`` and configures
nothing on import. :func:`configure_logging` is opt-in: it gives the
``paramdeps`` logger tree its own stderr handler and leaves the root logger
and the host application's handlers alone.

Two output modes:
- Human (default): console-rendered lines
- JSON (``log_json=True``): one JSON object per line
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "paramdeps"

_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def build_formatter(*, log_json: bool = False) -> structlog.stdlib.ProcessorFormatter:
    """Formatter that renders stdlib records through the structlog chain."""
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_PRE_CHAIN,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> logging.Logger:
    """Attach a structlog-formatted stderr handler to the ``paramdeps`` logger.

    Calling it again replaces the handler rather than adding another one.

    Args:
        verbose: Enable DEBUG output, which includes the failing predicate
            when a dependency check fails. When False, only WARNING+.
        log_json: Use the JSON renderer instead of the console renderer.

    Returns:
        The configured ``paramdeps`` logger.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(build_formatter(log_json=log_json))

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    return logger
