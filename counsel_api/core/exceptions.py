"""
Exception hierarchy for the counseling chat API.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class CounselApiException(Exception):
    """Base exception for all counseling chat API errors."""

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
        """Return the bare message; details are for logs, not clients."""
        return self.message


class ValidationError(CounselApiException):
    """Raised when request input is missing or malformed."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message returned to the client
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class CompletionError(CounselApiException):
    """Raised when the completion service call fails."""

    def __init__(
        self,
        message: str,
        model: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize completion error.

        Args:
            message: Provider error message, passed through unchanged
            model: Model identifier that was called
            details: Additional context
        """
        details = details or {}
        if model:
            details["model"] = model
        super().__init__(message, details)


class MessagePersistenceError(CounselApiException):
    """Raised when the message-post flow fails part way through."""

    def __init__(
        self,
        message: str,
        step: str,
        user_message_id: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize message persistence error.

        Args:
            message: Underlying error message, passed through unchanged
            step: Flow step that failed (store_user, completion, store_counselor)
            user_message_id: Id of the already committed user message, if any
            details: Additional context
        """
        details = details or {}
        details["step"] = step
        if user_message_id is not None:
            details["user_message_id"] = user_message_id
        self.step = step
        self.user_message_id = user_message_id
        super().__init__(message, details)
