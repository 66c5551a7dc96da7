"""
Test suite for the query embedding LRU cache.

System role: Verification of process-wide query cache bounds
"""

import pytest

from finbot.core.retrieval.query_cache import QueryEmbeddingCache


class TestQueryEmbeddingCache:
    """Test suite for QueryEmbeddingCache."""

    def test_put_then_get_should_return_vector(self) -> None:
        # Arrange
        cache = QueryEmbeddingCache(max_size=4)

        # Act
        cache.put("earnings", [0.1, 0.2])

        # Assert
        assert cache.get("earnings") == (0.1, 0.2)
        assert "earnings" in cache
        assert cache.hits == 1

    def test_get_missing_should_count_miss(self) -> None:
        cache = QueryEmbeddingCache()

        assert cache.get("nothing") is None
        assert cache.misses == 1

    def test_keys_should_be_exact_strings(self) -> None:
        """Test no normalization of query text."""
        cache = QueryEmbeddingCache()
        cache.put("Earnings", [1.0])

        assert cache.get("earnings") is None
        assert cache.get("Earnings ") is None

    def test_should_evict_least_recently_used(self) -> None:
        """Test capacity bound with LRU order."""
        # Arrange
        cache = QueryEmbeddingCache(max_size=2)
        cache.put("a", [1.0])
        cache.put("b", [2.0])
        cache.get("a")

        # Act
        cache.put("c", [3.0])

        # Assert
        assert len(cache) == 2
        assert "a" in cache
        assert "b" not in cache
        assert "c" in cache

    def test_non_positive_size_should_raise(self) -> None:
        with pytest.raises(ValueError):
            QueryEmbeddingCache(max_size=0)
