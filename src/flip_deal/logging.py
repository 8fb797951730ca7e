"""Structured logging setup.

structlog wraps the standard library logger; configuration happens lazily on
the first ``get_logger`` call.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

_configured: bool = False


def configure_logging(level: str | None = None, json_output: bool = False) -> None:
    """Configure structlog and the stdlib root handler.

    Args:
        level: Log level name. Defaults to env LOGLEVEL or WARNING.
        json_output: Render JSON lines instead of console key=value output.
    """
    global _configured

    log_level = (level or os.environ.get("LOGLEVEL", "WARNING")).upper()
    numeric_level = getattr(logging, log_level, logging.WARNING)

    logging.basicConfig(
        format="%(message)s",
        level=numeric_level,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    _configured = True


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a logger, configuring logging on first use."""
    if not _configured:
        configure_logging()
    logger = structlog.get_logger(name)
    if name:
        return logger.bind(logger_name=name)
    return logger
