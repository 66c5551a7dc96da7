"""
Logging utilities for safe structured logging.

User utterances and profile values end up in log context; these helpers
render them without blowing up on odd types and truncate long text.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any


def safe_log_value(value: Any, max_length: int = 200) -> str:
    """
    Safely convert any value to a string for logging.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    try:
        if value is None:
            return "None"
        if isinstance(value, str):
            val_str = value
        elif isinstance(value, (set, frozenset)):
            val_str = "{" + ", ".join(sorted(str(v) for v in value)) + "}"
        elif isinstance(value, (list, tuple)):
            val_str = f"{type(value).__name__}({len(value)} items)"
        elif isinstance(value, dict):
            val_str = f"dict(keys={sorted(value)})"
        elif isinstance(value, float):
            val_str = f"{value:.4f}"
        else:
            val_str = str(value)

        if len(val_str) > max_length:
            return val_str[:max_length] + f"... (truncated, {len(val_str)} total)"
        return val_str
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"


def _render(context: dict[str, Any]) -> str:
    return " ".join(f"{key}={safe_log_value(val)}" for key, val in context.items())


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context,
) -> None:
    """
    Log a message followed by key=value context pairs.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Arbitrary key-value pairs
    """
    if not logger.isEnabledFor(level):
        return
    suffix = _render(context)
    logger.log(level, f"{message} | {suffix}" if suffix else message)


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context,
) -> None:
    """
    Log a handled exception at WARNING level with its type and context.

    Used on soft-fail paths where the request continues without the
    failed step, so no traceback is attached.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Additional context pairs
    """
    context.update({"error_type": type(exc).__name__, "error_msg": str(exc)})
    logger.warning(f"{message} | {_render(context)}")
