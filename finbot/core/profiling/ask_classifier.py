"""
Reply classifiers deciding whether a generated reply solicits a field.

The tracker does not control generation, so it infers intent from the
reply text. Any object with an ``asks_for`` method can replace the keyword
matcher without touching the tracker.

Dependencies: None
System role: Pluggable mark-asked heuristic
"""

from collections.abc import Mapping, Sequence
from typing import Protocol, runtime_checkable

from finbot.core.profiling.profile import ProfileField


@runtime_checkable
class AskClassifier(Protocol):
    """Decides whether ``reply`` asks the user for ``field``."""

    def asks_for(self, field: ProfileField, reply: str) -> bool: ...


class KeywordAskClassifier:
    """Matches lower-cased indicator phrases configured per field."""

    def __init__(self, indicators: Mapping[str, Sequence[str]]) -> None:
        self._indicators = {
            field: tuple(p.lower() for p in phrases if p)
            for field, phrases in indicators.items()
        }

    def asks_for(self, field: ProfileField, reply: str) -> bool:
        text = (reply or "").lower()
        return any(phrase in text for phrase in self._indicators.get(field, ()))
