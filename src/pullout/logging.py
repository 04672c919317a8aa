"""Structured logging configuration using structlog.

JSON lines for production, coloured console output for development. Output
goes to stderr so scripts can keep stdout for JSON results. Modules log
snake_case event names with keyword context:

    log = get_logger(__name__)
    log.warning("schedule_descriptor_warning", reason=..., service_type=...)
"""

import logging
import sys
from typing import TextIO

import structlog
from structlog.processors import CallsiteParameter


def setup_logging(
    json_output: bool = False,
    log_level: str = "INFO",
    stream: TextIO | None = None,
) -> None:
    """Configure structlog processors and the stdlib bridge.

    Args:
        json_output: If True, render JSON lines. If False, console format.
        log_level: Logging level name; unknown names fall back to INFO.
        stream: Destination for log lines (default: sys.stderr).
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    stream = stream or sys.stderr

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        # Local wall clock, same as the schedule times being logged
        structlog.processors.TimeStamper(fmt="iso", utc=False),
    ]

    if numeric_level <= logging.DEBUG:
        processors.append(
            structlog.processors.CallsiteParameterAdder(
                [CallsiteParameter.MODULE, CallsiteParameter.FUNC_NAME]
            )
        )

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )

    # Bridge stdlib logging (pydantic-settings, dotenv) to the same stream
    root = logging.getLogger()
    root.handlers = [logging.StreamHandler(stream)]
    root.setLevel(numeric_level)


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a logger instance bound with the module name.

    Args:
        name: Logger name (typically __name__ from calling module).

    Returns:
        Configured structlog logger.
    """
    return structlog.get_logger(name)
