"""
Logger configuration.

Configures the root logger once per process for the API and the core engines.

Dependencies: logging (stdlib), finbot.configs
System role: Centralized logging configuration
"""

import logging
import sys


def configure_logging(level: str | None = None) -> None:
    """
    Configure Python logging with ISO timestamp and structured format.

    Args:
        level: Root log level name. Falls back to the configured LOG_LEVEL.
    """
    if level is None:
        from finbot.configs import get_settings

        level = get_settings().log_level

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.addHandler(handler)

    # Reduce noise from HTTP clients used by the model SDKs
    for noisy in ("httpx", "httpcore", "urllib3", "google_genai", "aiosqlite"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
