"""Observability and logging facades."""

from .logging import (
    ContextualFormatter,
    configure_logging,
    current_log_context,
    get_logger,
    log_context,
    log_exception,
)

__all__ = [
    "ContextualFormatter",
    "configure_logging",
    "current_log_context",
    "get_logger",
    "log_context",
    "log_exception",
]
