"""
Core business logic module.

Contains the retrieval engine, the profiling engine, the turn pipeline and
the exception hierarchy. All business rules and domain-specific logic
reside here.
"""

from finbot.core.exceptions import (
    ConfigurationError,
    DeliveryError,
    EmbeddingError,
    ExtractionError,
    FinbotException,
    GenerationError,
    GenerationTimeoutError,
    IndexBuildError,
    RetrievalError,
    SessionNotFoundError,
    ValidationError,
)

__all__ = [
    "ConfigurationError",
    "DeliveryError",
    "EmbeddingError",
    "ExtractionError",
    "FinbotException",
    "GenerationError",
    "GenerationTimeoutError",
    "IndexBuildError",
    "RetrievalError",
    "SessionNotFoundError",
    "ValidationError",
]
