"""
Knowledge retrieval: chunking, indexing and hybrid ranking.
"""

from finbot.core.retrieval.chunker import Chunk, split_into_chunks
from finbot.core.retrieval.corpus_index import CorpusIndex, Embedder
from finbot.core.retrieval.query_cache import QueryEmbeddingCache
from finbot.core.retrieval.retriever import HybridRetriever, ScoredChunk, format_context

__all__ = [
    "Chunk",
    "CorpusIndex",
    "Embedder",
    "HybridRetriever",
    "QueryEmbeddingCache",
    "ScoredChunk",
    "format_context",
    "split_into_chunks",
]
