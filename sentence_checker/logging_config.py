"""Structured logging setup.

Logs go to stderr; stdout is reserved for sentence diagnostics.
"""

import logging
import sys

import structlog

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def configure_logging(level: str = "warning", debug: bool = False) -> None:
    """Configure structlog for the process.

    Args:
        level: Minimum level name, one of LOG_LEVELS (case-insensitive)
        debug: Human-friendly console output instead of JSON lines

    Raises:
        ValueError: level is not a known level name
    """
    if level.lower() not in LOG_LEVELS:
        raise ValueError(f"Unknown log level '{level}'. Use one of: {', '.join(LOG_LEVELS)}")
    min_level = getattr(logging, level.upper())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if debug else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
