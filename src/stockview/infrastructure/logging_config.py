"""structlog configuration for the CLI and any embedding service.

Library modules only call ``structlog.get_logger(__name__)``; output
format and level are decided once, here, by the process entry point.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(level: str = "WARNING", fmt: str = "console") -> None:
    """Route structlog events to stderr as console text or JSON lines."""
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if fmt == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    min_level = logging.getLevelName(level.strip().upper())
    known_level = isinstance(min_level, int)
    if not known_level:
        min_level = logging.WARNING

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
    if not known_level:
        structlog.get_logger(__name__).warning("unknown_log_level", level=level)
