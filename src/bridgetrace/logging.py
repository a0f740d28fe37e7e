"""Structured logging for bridgetrace.

This module provides structured logging using structlog:
- JSON-formatted logs for CI runs (machine-readable)
- Pretty console logs for local test runs (human-readable)
- Automatic context binding (recorder_id)
- Integration with standard library logging

Usage:
    from bridgetrace.logging import configure_logging, get_logger

    # Configure once, e.g. from a conftest.py
    configure_logging(level=logging.DEBUG)

    logger = get_logger("my.module")
    logger.debug("entry_recorded", event_type="callStart")

Context binding:
    logger = recorder_logger("rec-1")
    logger.debug("entry_recorded")  # recorder_id automatically included
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

_configured = False


def configure_logging(
    json_format: bool = False,
    level: int = logging.INFO,
    logger_factory: Any = None,
) -> None:
    """Configure structured logging for bridgetrace.

    Call this once before any logging occurs.

    Args:
        json_format: If True, output JSON logs.
                    If False, output pretty console logs.
        level: Minimum log level (default: INFO)
        logger_factory: Custom logger factory (for testing)
    """
    global _configured

    # Configure stdlib logging (structlog wraps it)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        stream=sys.stdout,
    )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=False,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=logger_factory or structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )

    _configured = True


def get_logger(name: str) -> Any:
    """Get a structured logger for the given name.

    Args:
        name: Logger name (typically __name__ or module path)

    Returns:
        A bound logger that supports structured logging.
    """
    if not _configured and not structlog.is_configured():
        # Leave a host suite's own structlog setup alone.
        configure_logging()
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context variables that will be included in all subsequent logs.

    Args:
        **kwargs: Context key-value pairs to bind
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


def unbind_context(*keys: str) -> None:
    """Remove specific context variables.

    Args:
        *keys: Context keys to remove
    """
    structlog.contextvars.unbind_contextvars(*keys)


def recorder_logger(recorder_id: str) -> Any:
    """Get a logger pre-bound with recorder context.

    Args:
        recorder_id: Identifier of the EventRecorder instance

    Returns:
        Logger with recorder_id bound
    """
    return get_logger("bridgetrace.recorder").bind(recorder_id=recorder_id)
