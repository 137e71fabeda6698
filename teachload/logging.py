"""Diagnostics for the parsing pipeline, using structlog.

Every module logs through get_logger(__name__) with an event name plus
key/value context, e.g. ``section_not_found section='IT 9Z' line=12``.
Output goes to stderr; the CLI keeps stdout for the review table.
"""

from __future__ import annotations

import logging
import sys

import structlog


def setup_logging(json_output: bool = False, log_level: str = "INFO") -> None:
    """Configure the structlog pipeline once per process (the CLI does this).

    Args:
        json_output: JSON lines instead of the colored console renderer.
        log_level: Minimum level name; unknown names fall back to INFO.
    """
    threshold = getattr(logging, log_level.upper(), logging.INFO)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    processors.append(structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer())

    # no logger caching: structlog.testing.capture_logs must still see
    # module-level loggers after the CLI has configured output
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(threshold),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a structlog logger for one module (pass __name__)."""
    return structlog.get_logger(name)
