"""
Progressive profiling configuration settings.

Indicator phrases used to infer that a generated reply asked for a field.

Dependencies: pydantic, pydantic_settings
System role: Profile tracker configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ProfilingSettings(BaseSettings):
    """Indicator phrases per profile field (JSON lists in the environment)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PROFILING_",
        case_sensitive=False,
        extra="ignore",
    )

    name_indicators: list[str] = Field(
        default_factory=lambda: ["name", "call you", "handle", "who are you"],
    )
    email_indicators: list[str] = Field(
        default_factory=lambda: ["email", "e-mail", "send you", "contact"],
    )
    income_indicators: list[str] = Field(
        default_factory=lambda: [
            "income",
            "capital",
            "budget",
            "working with",
            "trading budget",
            "capital are you",
        ],
    )

    def indicator_map(self) -> dict[str, list[str]]:
        """Return indicator phrases keyed by field name."""
        return {
            "name": self.name_indicators,
            "email": self.email_indicators,
            "income": self.income_indicators,
        }
