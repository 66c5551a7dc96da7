"""
Google Generative AI Embeddings wrapper with fixed output dimensionality.

Wraps GoogleGenerativeAIEmbeddings so chunk and query embeddings always
share one dimension, which the corpus index relies on.

Dependencies: langchain_google_genai
System role: Embedding dimension consistency for the corpus index
"""

import logging
from typing import List

from langchain_google_genai import GoogleGenerativeAIEmbeddings

from finbot.configs.llm import LLMSettings
from finbot.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class FixedDimensionEmbeddings(GoogleGenerativeAIEmbeddings):
    """
    GoogleGenerativeAIEmbeddings wrapper with fixed output dimensionality.

    The base class ignores output_dimensionality in the constructor, so
    every embed call passes the configured dimension explicitly.
    """

    _output_dimensionality: int = 768

    def __init__(
        self,
        model: str = "models/gemini-embedding-001",
        output_dimensionality: int = 768,
        **kwargs,
    ) -> None:
        """
        Initialize embeddings with fixed output dimensionality.

        Args:
            model: Google embedding model ID
            output_dimensionality: Fixed dimension for all embeddings
            **kwargs: Additional arguments for GoogleGenerativeAIEmbeddings
        """
        super().__init__(model=model, **kwargs)
        self._output_dimensionality = output_dimensionality
        logger.info(
            f"{__name__}:__init__ - Initialized with model={model}, "
            f"output_dimensionality={output_dimensionality}"
        )

    def embed_documents(
        self,
        texts: List[str],
        *,
        batch_size: int = 100,
        task_type: str | None = None,
        titles: List[str] | None = None,
        output_dimensionality: int | None = None,
    ) -> List[List[float]]:
        """Embed documents with the configured dimension unless overridden."""
        dim = output_dimensionality or self._output_dimensionality
        return super().embed_documents(
            texts,
            batch_size=batch_size,
            task_type=task_type,
            titles=titles,
            output_dimensionality=dim,
        )

    def embed_query(
        self,
        text: str,
        task_type: str | None = None,
        title: str | None = None,
        output_dimensionality: int | None = None,
    ) -> List[float]:
        """Embed a query with the configured dimension unless overridden."""
        dim = output_dimensionality or self._output_dimensionality
        return super().embed_query(
            text,
            task_type=task_type,
            title=title,
            output_dimensionality=dim,
        )


def build_gemini_embeddings(settings: LLMSettings) -> FixedDimensionEmbeddings:
    """
    Build the Gemini embeddings model from settings.

    Raises:
        ConfigurationError: GOOGLE_API_KEY is not set
    """
    if not settings.google_api_key:
        raise ConfigurationError("GOOGLE_API_KEY is not set", setting="GOOGLE_API_KEY")
    return FixedDimensionEmbeddings(
        model=settings.embedding_model,
        output_dimensionality=settings.embedding_dimension,
        google_api_key=settings.google_api_key,
    )
