"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from finbot.configs.base import BaseSettings
from finbot.configs.database import DatabaseSettings
from finbot.configs.delivery import DeliverySettings
from finbot.configs.llm import LLMSettings
from finbot.configs.profiling import ProfilingSettings
from finbot.configs.retrieval import RetrievalSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    llm: LLMSettings = Field(default_factory=LLMSettings)
    retrieval: RetrievalSettings = Field(default_factory=RetrievalSettings)
    profiling: ProfilingSettings = Field(default_factory=ProfilingSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    delivery: DeliverySettings = Field(default_factory=DeliverySettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Environment variables are read once; call ``get_settings.cache_clear()``
    to pick up changes (tests do this).

    Returns:
        Settings: Application settings instance
    """
    return Settings()
