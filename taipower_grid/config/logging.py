"""
Structured logging configuration for the taipower-grid command line tool.

The library only emits events; applications decide how they are rendered.
"""

import logging
import sys
from typing import Optional

import structlog

from .settings import GridSettings, get_settings


def configure_logging(settings: Optional[GridSettings] = None, level: Optional[str] = None) -> None:
    """
    Configure structured logging.

    Args:
        settings: Settings to read level and format from; defaults to the shared settings
        level: Overrides the configured log level
    """
    settings = settings or get_settings()
    level_name = (level or settings.log_level).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    # Log to stderr so command output on stdout stays clean
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if settings.log_format == "console":
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    else:
        processors.extend([
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ])

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
