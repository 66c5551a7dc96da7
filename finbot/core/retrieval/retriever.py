"""
Hybrid retriever.

Scores every indexed chunk by cosine similarity to the query plus lexical
boosts (exact phrase, key-phrase shingles, anchor rules, keyword overlap).
Chunks below the semantic floor are dropped whatever their boosts.

Dependencies: numpy, finbot.core.retrieval
System role: RAG retrieval business logic
"""

import logging
import string
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from finbot.configs.retrieval import AnchorRule
from finbot.core.exceptions import EmbeddingError, FinbotException, RetrievalError
from finbot.core.retrieval.chunker import Chunk
from finbot.core.retrieval.corpus_index import CorpusIndex, Embedder
from finbot.core.retrieval.query_cache import QueryEmbeddingCache
from finbot.observability import log_exception_with_context

logger = logging.getLogger(__name__)

EXACT_PHRASE_BOOST = 0.4
KEY_PHRASE_BOOST = 0.25
KEYWORD_BOOST_WEIGHT = 0.15

TRIVIAL_BIGRAMS = frozenset({"what is", "about the", "is the"})

CONTEXT_HEADER = "Context from knowledge file:"
CONTEXT_SEPARATOR = "---"


@dataclass(frozen=True)
class ScoredChunk:
    """A chunk with its score breakdown for one query."""

    chunk: Chunk
    semantic_score: float
    exact_phrase_boost: float = 0.0
    key_phrase_boost: float = 0.0
    keyword_boost: float = 0.0

    @property
    def final_score(self) -> float:
        return (
            self.semantic_score
            + self.exact_phrase_boost
            + self.key_phrase_boost
            + self.keyword_boost
        )


def _words(text: str) -> list[str]:
    """Whitespace tokens with surrounding punctuation removed."""
    words = (w.strip(string.punctuation) for w in text.split())
    return [w for w in words if w]


def query_shingles(query_lower: str) -> list[str]:
    """
    Distinct key phrases of the query.

    3-word shingles longer than 10 characters, then 2-word shingles longer
    than 8 characters that are not trivial bigrams.
    """
    words = _words(query_lower)
    phrases: list[str] = []
    for i in range(len(words) - 2):
        phrase = " ".join(words[i : i + 3])
        if len(phrase) > 10:
            phrases.append(phrase)
    for i in range(len(words) - 1):
        phrase = " ".join(words[i : i + 2])
        if len(phrase) > 8 and phrase not in TRIVIAL_BIGRAMS:
            phrases.append(phrase)
    return list(dict.fromkeys(phrases))


def query_terms(query_lower: str) -> list[str]:
    """Distinct query terms longer than two characters."""
    return list(dict.fromkeys(w for w in _words(query_lower) if len(w) > 2))


def format_context(passages: Sequence[str]) -> str:
    """
    Render retrieved passages as a delimited context block.

    Returns:
        str: The block, or "" when there is nothing to show
    """
    snippets = [p for p in passages if p and p.strip()]
    if not snippets:
        return ""
    body = f"\n{CONTEXT_SEPARATOR}\n".join(snippets)
    return f"\n{CONTEXT_HEADER}\n{CONTEXT_SEPARATOR}\n{body}\n{CONTEXT_SEPARATOR}\n"


class HybridRetriever:
    """Semantic + lexical ranking over a CorpusIndex."""

    def __init__(
        self,
        index: CorpusIndex,
        embedder: Embedder,
        cache: QueryEmbeddingCache,
        anchor_rules: Sequence[AnchorRule] = (),
        top_k: int = 7,
        min_similarity: float = 0.2,
    ) -> None:
        """
        Initialize retriever.

        Args:
            index: Corpus index (built on first retrieval)
            embedder: Embedding collaborator for queries
            cache: Process-wide query embedding cache
            anchor_rules: Configured trigger/anchor/bonus rules
            top_k: Default maximum number of passages
            min_similarity: Default semantic floor
        """
        self._index = index
        self._embedder = embedder
        self._cache = cache
        self._anchor_rules = [
            AnchorRule(trigger=r.trigger.lower(), anchor=r.anchor.lower(), bonus=r.bonus)
            for r in anchor_rules
        ]
        self.top_k = top_k
        self.min_similarity = min_similarity

    @property
    def index(self) -> CorpusIndex:
        return self._index

    async def embed_query(self, query: str) -> np.ndarray:
        """
        Return the unit-normalized embedding of the exact query string.

        Raises:
            EmbeddingError: Embedding call failed or dimension mismatches the index
        """
        vector = self._cache.get(query)
        if vector is None:
            vectors = await self._embedder.embed([query])
            if not vectors:
                raise EmbeddingError("Embedding collaborator returned no vector for query")
            vector = tuple(vectors[0])
            self._cache.put(query, vector)
        else:
            logger.debug(f"{__name__}:embed_query - Cache hit")

        arr = np.asarray(vector, dtype=np.float64)
        dim = self._index.dimension
        if dim is not None and arr.shape[0] != dim:
            raise EmbeddingError(
                "Query embedding dimension does not match index",
                {"query_dim": int(arr.shape[0]), "index_dim": dim},
            )
        norm = np.linalg.norm(arr)
        return arr / norm if norm > 0 else arr

    def score_chunks(self, query: str, query_vector: np.ndarray) -> list[ScoredChunk]:
        """Score every indexed chunk against the query, in index order."""
        chunks = self._index.chunks
        matrix = self._index.matrix
        if not chunks or matrix is None:
            return []

        semantic = matrix @ query_vector
        query_lower = query.lower()
        shingles = query_shingles(query_lower)
        terms = query_terms(query_lower)
        rules = [r for r in self._anchor_rules if r.trigger in query_lower]

        scored = []
        for chunk, sem in zip(chunks, semantic):
            chunk_lower = chunk.text.lower()
            exact = EXACT_PHRASE_BOOST if query_lower and query_lower in chunk_lower else 0.0
            key_phrase = KEY_PHRASE_BOOST * sum(1 for p in shingles if p in chunk_lower)
            key_phrase += sum(r.bonus for r in rules if r.anchor in chunk_lower)
            keyword = 0.0
            if terms:
                matched = sum(1 for t in terms if t in chunk_lower)
                keyword = matched / len(terms) * KEYWORD_BOOST_WEIGHT
            scored.append(
                ScoredChunk(
                    chunk=chunk,
                    semantic_score=float(sem),
                    exact_phrase_boost=exact,
                    key_phrase_boost=key_phrase,
                    keyword_boost=keyword,
                )
            )
        return scored

    async def rank(
        self,
        query: str,
        k: int | None = None,
        min_similarity: float | None = None,
    ) -> list[ScoredChunk]:
        """
        Rank chunks for a query.

        Returns:
            list[ScoredChunk]: At most ``k`` chunks, best first; ties keep index order

        Raises:
            IndexBuildError: Index could not be built
            EmbeddingError: Query could not be embedded
            RetrievalError: Scoring failed
        """
        k = self.top_k if k is None else k
        floor = self.min_similarity if min_similarity is None else min_similarity

        chunks = await self._index.ensure_index()
        if not chunks or k <= 0 or not query.strip():
            return []

        query_vector = await self.embed_query(query)
        try:
            scored = self.score_chunks(query, query_vector)
        except ValueError as e:
            raise RetrievalError(f"Scoring failed: {e}") from e
        candidates = [s for s in scored if s.semantic_score >= floor]
        # sorted() is stable, including with reverse=True
        ranked = sorted(candidates, key=lambda s: s.final_score, reverse=True)[:k]
        logger.info(
            f"{__name__}:rank - chunks={len(chunks)} above_floor={len(candidates)} returned={len(ranked)}"
        )
        return ranked

    async def retrieve(
        self,
        query: str,
        k: int | None = None,
        min_similarity: float | None = None,
    ) -> list[str]:
        """Return the texts of the top-ranked passages."""
        return [s.chunk.text for s in await self.rank(query, k, min_similarity)]

    async def retrieve_safely(
        self,
        query: str,
        k: int | None = None,
        min_similarity: float | None = None,
    ) -> list[str]:
        """Like ``retrieve`` but index/embedding failures yield no context."""
        try:
            return await self.retrieve(query, k, min_similarity)
        except FinbotException as e:
            log_exception_with_context(
                logger,
                f"{__name__}:retrieve_safely - Retrieval failed, continuing without context",
                e,
            )
            return []
