"""
Embedding collaborator.

Adapts any LangChain ``Embeddings`` model to the async batch interface the
corpus index and retriever use, with a request-scoped timeout.

Dependencies: langchain_core, fastapi.concurrency
System role: Embedding adapter
"""

import asyncio
import logging
from collections.abc import Callable, Sequence

from fastapi.concurrency import run_in_threadpool
from langchain_core.embeddings import Embeddings

from finbot.core.exceptions import ConfigurationError, EmbeddingError

logger = logging.getLogger(__name__)


class EmbeddingClient:
    """Order-preserving batch embedding over a lazily built LangChain model."""

    def __init__(
        self,
        embeddings_factory: Callable[[], Embeddings],
        timeout_seconds: float = 30.0,
    ) -> None:
        """
        Initialize client.

        Args:
            embeddings_factory: Builds the embeddings model on first use
            timeout_seconds: Upper bound for one embed call
        """
        self._factory = embeddings_factory
        self._embeddings: Embeddings | None = None
        self._timeout = timeout_seconds

    def _model(self) -> Embeddings:
        if self._embeddings is None:
            self._embeddings = self._factory()
        return self._embeddings

    async def embed(self, texts: Sequence[str]) -> list[list[float]]:
        """
        Embed texts in one call, preserving order.

        Raises:
            ConfigurationError: Credentials missing
            EmbeddingError: Call failed, timed out or returned the wrong count
        """
        if not texts:
            return []
        model = self._model()
        try:
            vectors = await asyncio.wait_for(
                run_in_threadpool(model.embed_documents, list(texts)),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError as e:
            raise EmbeddingError(
                "Embedding request timed out", {"timeout_seconds": self._timeout, "texts": len(texts)}
            ) from e
        except ConfigurationError:
            raise
        except Exception as e:
            logger.error(f"{__name__}:embed - {type(e).__name__}: {e}")
            raise EmbeddingError(f"Embedding request failed: {e}", {"texts": len(texts)}) from e

        if len(vectors) != len(texts):
            raise EmbeddingError(
                "Embedding count does not match input count",
                {"texts": len(texts), "embeddings": len(vectors)},
            )
        return [list(v) for v in vectors]
