"""
Process-wide query embedding cache.

Exact query string -> embedding, bounded with least-recently-used eviction.

Dependencies: collections (stdlib)
System role: Avoids re-embedding repeated queries
"""

from collections import OrderedDict


class QueryEmbeddingCache:
    """LRU mapping from exact query text to its embedding vector."""

    def __init__(self, max_size: int = 512) -> None:
        if max_size <= 0:
            raise ValueError("max_size must be positive")
        self.max_size = max_size
        self._entries: OrderedDict[str, tuple[float, ...]] = OrderedDict()
        self.hits = 0
        self.misses = 0

    def get(self, query: str) -> tuple[float, ...] | None:
        vector = self._entries.get(query)
        if vector is None:
            self.misses += 1
            return None
        self._entries.move_to_end(query)
        self.hits += 1
        return vector

    def put(self, query: str, vector: list[float] | tuple[float, ...]) -> None:
        self._entries[query] = tuple(vector)
        self._entries.move_to_end(query)
        while len(self._entries) > self.max_size:
            self._entries.popitem(last=False)

    def __contains__(self, query: object) -> bool:
        return query in self._entries

    def __len__(self) -> int:
        return len(self._entries)
