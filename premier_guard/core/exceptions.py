"""
Exception hierarchy for the Premier League classifier.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class PremierGuardException(Exception):
    """Base exception for all classifier application errors."""

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


class RequestValidationError(PremierGuardException):
    """
    Raised when an incoming request is rejected before classification.

    Carries the HTTP status code and the message returned to the caller.
    These errors are user-correctable and safe to expose.
    """

    status_code: int = 400

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message returned to the caller
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class InvalidContentTypeError(RequestValidationError):
    """Raised when the request body is not JSON."""

    status_code = 406

    def __init__(self, content_type: str | None = None) -> None:
        super().__init__(
            "JSON body expected!",
            details={"content_type": content_type},
        )


class MissingArgumentError(RequestValidationError):
    """Raised when the message field is absent or empty."""

    status_code = 400

    def __init__(self, field: str = "message") -> None:
        super().__init__("Message argument is required!!", field=field)


class PayloadTooLargeError(RequestValidationError):
    """Raised when the message exceeds the configured maximum length."""

    status_code = 413

    def __init__(self, length: int, max_length: int) -> None:
        super().__init__(
            f"Message can only be at most {max_length} characters!!!",
            field="message",
            details={"length": length, "max_length": max_length},
        )


class VectorStoreError(PremierGuardException):
    """Raised when vector store operations fail."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize vector store error.

        Args:
            message: Error message
            operation: Operation that failed (upsert, query)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class SeedDataError(PremierGuardException):
    """Raised when the seeding CSV cannot be read or is malformed."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if path:
            details["path"] = path
        super().__init__(message, details)
