"""
Model provider adapters: embeddings and chat generation.
"""

from finbot.boundary.llm.embedding_client import EmbeddingClient
from finbot.boundary.llm.embeddings_wrapper import FixedDimensionEmbeddings, build_gemini_embeddings
from finbot.boundary.llm.generation_client import (
    GenerationClient,
    build_gemini_generation_client,
    message_text,
)

__all__ = [
    "EmbeddingClient",
    "FixedDimensionEmbeddings",
    "GenerationClient",
    "build_gemini_embeddings",
    "build_gemini_generation_client",
    "message_text",
]
