"""
Shared utilities for logging configuration and operation tracing.
"""

from corsgate.core.utils.logging import configure_logging, log_operation

__all__ = [
    "configure_logging",
    "log_operation",
]
