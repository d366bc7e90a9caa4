"""Logging setup for the commitpick command line.

Library modules only call ``structlog.get_logger``. The CLI calls
``configure_logging`` on every invocation, sending events such as
``commit_skipped`` to stderr so stdout carries nothing but commit output.
"""

import logging
import sys
from typing import Any

import structlog

from commitpick.config import LOG_FORMATS


def _renderer(log_format: str) -> list[Any]:
    if log_format == "json":
        return [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    return [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]


def configure_logging(log_level: str = "WARNING", log_format: str = "console") -> None:
    """Configure structlog and stdlib logging for one CLI run.

    Args:
        log_level: Logging level name; unknown names fall back to WARNING
        log_format: "console" for human-readable lines, "json" for JSON lines

    Raises:
        ValueError: If log_format is not a known format
    """
    if log_format not in LOG_FORMATS:
        raise ValueError(f"Unknown log format: {log_format}")

    numeric_level = getattr(logging, log_level.upper(), logging.WARNING)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=numeric_level,
        force=True,
    )
    # GitPython traces every git subprocess at DEBUG
    logging.getLogger("git").setLevel(max(numeric_level, logging.INFO))

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            *_renderer(log_format),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
