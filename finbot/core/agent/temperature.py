"""
Generation temperature policy.

Dependencies: None
System role: Sampling parameter selection per turn
"""

from collections.abc import Iterable


class TemperaturePolicy:
    """Lower temperature when answering from retrieved context."""

    def __init__(
        self,
        default: float = 0.6,
        with_context: float = 0.3,
        exact: float = 0.1,
        exact_phrases: Iterable[str] = (),
    ) -> None:
        """
        Initialize policy.

        Args:
            default: Temperature with no retrieved context
            with_context: Temperature when context was retrieved
            exact: Temperature when the query calls for exact reproduction
            exact_phrases: Query phrases that call for exact reproduction
        """
        self.default = default
        self.with_context = with_context
        self.exact = exact
        self._exact_phrases = [p.lower() for p in exact_phrases if p.strip()]

    def needs_exact_answer(self, query: str) -> bool:
        query_lower = query.lower()
        return any(p in query_lower for p in self._exact_phrases)

    def select(self, query: str, has_context: bool) -> float:
        if not has_context:
            return self.default
        if self.needs_exact_answer(query):
            return self.exact
        return self.with_context
