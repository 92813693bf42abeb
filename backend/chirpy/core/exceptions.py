"""Custom exceptions for chirpy."""

from typing import Optional


class ChirpyError(Exception):
    """Base exception for all chirpy errors."""


class PersistenceError(ChirpyError):
    """Raised when the persistence gateway fails to complete an operation.

    The HTTP layer maps this to a 500 response with a generic message; the
    detail carried here is for server-side logs only.

    Attributes:
        operation: Name of the gateway operation that failed.
        original_error: The original exception raised by the backend.
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message.
            operation: Gateway operation that failed (e.g. "create_user").
            original_error: Original exception that caused this error.
        """
        self.operation = operation
        self.original_error = original_error
        super().__init__(message)

        if original_error is not None:
            self.__cause__ = original_error

    def __str__(self) -> str:
        """Return detailed error message with context."""
        parts = [super().__str__()]

        if self.operation:
            parts.append(f"Operation: {self.operation}")

        if self.original_error:
            parts.append(
                f"Original error: {type(self.original_error).__name__}: {self.original_error}"
            )

        return " | ".join(parts)
