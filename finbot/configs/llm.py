"""
Model provider configuration settings.

Credentials and model identifiers for the embedding and generation
collaborators, plus the request-scoped timeout applied to every call.

Dependencies: pydantic, pydantic_settings
System role: Generation/embedding provider configuration
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMSettings(BaseSettings):
    """Google Gemini chat and embedding configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LLM_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    google_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GOOGLE_API_KEY", "LLM_GOOGLE_API_KEY"),
        description="Google AI API key (required for chat and embeddings)",
    )
    chat_model: str = Field(
        default="gemini-2.5-flash",
        description="Gemini chat model used for replies and JSON extraction",
    )
    embedding_model: str = Field(
        default="models/gemini-embedding-001",
        description="Gemini embedding model ID",
    )
    embedding_dimension: int = Field(
        default=768,
        description="Fixed embedding dimension for chunks and queries",
    )
    request_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout applied to each embedding and generation call",
    )
    extraction_temperature: float = Field(
        default=0.1,
        description="Temperature for constrained JSON field extraction",
    )
