"""
Structured logging utilities.

Configures structlog for the service and provides a context manager for
structured operation logging with timing and error tracking.
"""

from __future__ import annotations

import logging
import sys
import time
from contextlib import asynccontextmanager
from typing import Any

import structlog

logger = structlog.get_logger(__name__)


def configure_logging(level: str = "INFO", fmt: str = "console") -> None:
    """
    Configure stdlib logging and structlog to share one output stream.

    Args:
        level: Logging level name (DEBUG, INFO, ...).
        fmt: ``console`` for human readable output, ``json`` for one JSON object per line.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        stream=sys.stdout,
    )

    renderer: Any = structlog.processors.JSONRenderer() if fmt == "json" else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        cache_logger_on_first_use=True,
    )


@asynccontextmanager
async def log_operation(
    operation: str,
    subject_ids: dict[str, str] | None = None,
    **context: Any,
) -> Any:  # AsyncGenerator[None, None]
    """
    Context manager for structured operation logging.

    Logs operation start, completion, and errors with timing information.

    Args:
        operation: Name of the operation being performed
        subject_ids: Dictionary of subject identifiers (e.g., {"path": "/hello"})
        **context: Additional context to include in logs

    Example:
        async with log_operation("resource_loading", file=path):
            resources = loader.get_resources()
    """
    start_time = time.time()
    log_context = {
        **(subject_ids or {}),
        **context,
    }

    logger.info("operation_started", operation=operation, **log_context)

    try:
        yield
    except Exception as e:
        latency_ms = int((time.time() - start_time) * 1000)
        logger.error(
            "operation_failed",
            operation=operation,
            error=str(e),
            latency_ms=latency_ms,
            **log_context,
        )
        raise
    else:
        latency_ms = int((time.time() - start_time) * 1000)
        logger.info("operation_completed", operation=operation, latency_ms=latency_ms, **log_context)
