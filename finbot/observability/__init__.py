"""
Observability module.

Provides logging configuration, structured logging helpers and request
correlation.
"""

from finbot.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from finbot.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)
from finbot.observability.logger import configure_logging

__all__ = [
    "clear_correlation_id",
    "configure_logging",
    "get_correlation_id",
    "log_exception_with_context",
    "log_with_context",
    "safe_log_value",
    "set_correlation_id",
]
