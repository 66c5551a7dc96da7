"""
In-memory corpus index.

Loads the knowledge text, chunks it, embeds all chunks in one batch and
keeps the result for the process lifetime. Concurrent first callers share
a single build.

Dependencies: numpy, finbot.core.retrieval.chunker
System role: Corpus indexer for hybrid retrieval
"""

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

import numpy as np

from finbot.core.exceptions import EmbeddingError, IndexBuildError
from finbot.core.retrieval.chunker import Chunk, split_into_chunks

logger = logging.getLogger(__name__)


class Embedder(Protocol):
    """Embedding collaborator: order-preserving batch embedding."""

    async def embed(self, texts: Sequence[str]) -> list[list[float]]: ...


class CorpusIndex:
    """
    Lazily built, read-only chunk index.

    ``ensure_index`` is idempotent: the first successful call builds the
    chunk set, later calls return it unchanged. A failed build installs
    nothing, so the next call retries.
    """

    def __init__(
        self,
        embedder: Embedder,
        source_path: str | Path,
        chunk_size: int = 1000,
        overlap: int = 200,
    ) -> None:
        """
        Initialize index.

        Args:
            embedder: Embedding collaborator
            source_path: Knowledge text file (relative paths resolve from CWD)
            chunk_size: Words per chunk
            overlap: Words shared by consecutive chunks
        """
        self._embedder = embedder
        self._source_path = Path(source_path)
        self._chunk_size = chunk_size
        self._overlap = overlap
        self._chunks: tuple[Chunk, ...] | None = None
        self._matrix: np.ndarray | None = None
        self._lock = asyncio.Lock()

    @property
    def is_built(self) -> bool:
        return self._chunks is not None

    @property
    def chunks(self) -> tuple[Chunk, ...]:
        """Built chunks; empty before the first successful build."""
        return self._chunks or ()

    @property
    def matrix(self) -> np.ndarray | None:
        """Row-normalized embedding matrix aligned with ``chunks``."""
        return self._matrix

    @property
    def dimension(self) -> int | None:
        if self._matrix is None or self._matrix.size == 0:
            return None
        return int(self._matrix.shape[1])

    def _load_source(self) -> str:
        path = self._source_path
        if not path.is_file():
            logger.warning(f"{__name__}:_load_source - Knowledge source not found: {path}")
            return ""
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise IndexBuildError(
                f"Cannot read knowledge source: {e}", source=str(path)
            ) from e

    async def ensure_index(self) -> tuple[Chunk, ...]:
        """
        Build the index once per process.

        Returns:
            tuple[Chunk, ...]: Indexed chunks (empty when the source is absent)

        Raises:
            IndexBuildError: Source unreadable or chunk embedding failed
        """
        if self._chunks is not None:
            return self._chunks

        async with self._lock:
            if self._chunks is not None:
                return self._chunks

            text = self._load_source()
            if not text.strip():
                logger.info(f"{__name__}:ensure_index - Empty knowledge source, index is empty")
                self._matrix = np.empty((0, 0))
                self._chunks = ()
                return self._chunks

            parts = split_into_chunks(text, self._chunk_size, self._overlap)
            logger.info(
                f"{__name__}:ensure_index - Embedding {len(parts)} chunks from {self._source_path}"
            )
            try:
                vectors = await self._embedder.embed(parts)
            except EmbeddingError as e:
                raise IndexBuildError(
                    "Chunk embedding failed", source=str(self._source_path), details={"cause": str(e)}
                ) from e

            if len(vectors) != len(parts):
                raise IndexBuildError(
                    "Embedding count does not match chunk count",
                    source=str(self._source_path),
                    details={"chunks": len(parts), "embeddings": len(vectors)},
                )
            dims = {len(v) for v in vectors}
            if len(dims) != 1 or 0 in dims:
                raise IndexBuildError(
                    "Chunk embeddings have inconsistent dimensionality",
                    source=str(self._source_path),
                    details={"dimensions": sorted(dims)},
                )

            matrix = np.asarray(vectors, dtype=np.float64)
            norms = np.linalg.norm(matrix, axis=1, keepdims=True)
            norms[norms == 0] = 1.0
            self._matrix = matrix / norms
            self._chunks = tuple(
                Chunk(id=f"c{i}", text=part, embedding=tuple(vec))
                for i, (part, vec) in enumerate(zip(parts, vectors))
            )
            logger.info(
                f"{__name__}:ensure_index - Index built: chunks={len(self._chunks)} dim={self.dimension}"
            )
            return self._chunks
