"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from finbot.configs.retrieval import AnchorRule
from finbot.configs.settings import Settings, get_settings

__all__ = ["AnchorRule", "Settings", "get_settings"]
