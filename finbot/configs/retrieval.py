"""
Retrieval configuration settings.

Knowledge source location, chunking window, ranking thresholds, the
anchor-phrase rule table and the temperature policy tied to retrieval.

Dependencies: pydantic, pydantic_settings
System role: Hybrid retrieval configuration
"""

from pydantic import AliasChoices, BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AnchorRule(BaseModel):
    """Boost chunks containing ``anchor`` when the query contains ``trigger``."""

    trigger: str = Field(description="Phrase looked up in the lower-cased query")
    anchor: str = Field(description="Phrase looked up in the lower-cased chunk")
    bonus: float = Field(default=0.3, description="Added to the key-phrase boost")


class RetrievalSettings(BaseSettings):
    """Corpus indexing and hybrid ranking configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RETRIEVAL_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    knowledge_file: str = Field(
        default="knowledge.txt",
        validation_alias=AliasChoices("RAG_FILE", "RETRIEVAL_KNOWLEDGE_FILE"),
        description="Path to the knowledge text (relative paths resolve from CWD)",
    )
    chunk_size: int = Field(default=1000, gt=0, description="Words per chunk")
    chunk_overlap: int = Field(default=200, ge=0, description="Words shared by neighbours")

    top_k: int = Field(default=7, gt=0, description="Maximum passages per query")
    min_similarity: float = Field(
        default=0.2,
        description="Minimum cosine similarity; lexical boosts cannot rescue a chunk below it",
    )
    query_cache_size: int = Field(
        default=512,
        gt=0,
        description="LRU capacity of the process-wide query embedding cache",
    )

    anchor_rules: list[AnchorRule] = Field(
        default_factory=list,
        description="JSON list of {trigger, anchor, bonus} entries",
    )
    exact_phrases: list[str] = Field(
        default_factory=list,
        description="Query phrases that call for exact reproduction of the context",
    )

    default_temperature: float = Field(default=0.6, description="No context retrieved")
    context_temperature: float = Field(default=0.3, description="Context retrieved")
    exact_temperature: float = Field(
        default=0.1,
        description="Context retrieved and the query needs exact reproduction",
    )
