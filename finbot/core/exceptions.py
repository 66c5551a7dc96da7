"""
Exception hierarchy for the finbot application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class FinbotException(Exception):
    """Base exception for all finbot application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(FinbotException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class ConfigurationError(FinbotException):
    """Raised when a required external credential or setting is missing."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message
            setting: Environment variable or setting that is missing
            details: Additional context
        """
        details = details or {}
        if setting:
            details["setting"] = setting
        super().__init__(message, details)


class SessionNotFoundError(FinbotException):
    """Raised when a session cannot be found."""

    def __init__(self, session_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize session not found error.

        Args:
            session_id: ID of the missing session
            details: Additional context
        """
        details = details or {}
        details["session_id"] = session_id
        super().__init__(f"Session not found: {session_id}", details)


class EmbeddingError(FinbotException):
    """Raised when the embedding collaborator fails or returns bad vectors."""

    pass


class IndexBuildError(FinbotException):
    """Raised when the corpus index cannot be built."""

    def __init__(
        self,
        message: str,
        source: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize index build error.

        Args:
            message: Error message
            source: Knowledge source path
            details: Additional context
        """
        details = details or {}
        if source:
            details["source"] = source
        super().__init__(message, details)


class RetrievalError(FinbotException):
    """Raised when retrieval operations fail."""

    pass


class ExtractionError(FinbotException):
    """Raised when model-based field extraction produces unusable output."""

    pass


class GenerationError(FinbotException):
    """Raised when the generation collaborator fails."""

    def __init__(
        self,
        message: str,
        model: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if model:
            details["model"] = model
        super().__init__(message, details)


class GenerationTimeoutError(GenerationError):
    """Raised when a generation call exceeds its request timeout."""

    pass


class DeliveryError(FinbotException):
    """Raised when session data cannot be handed off."""

    pass
