"""
Custom exceptions for the standard options package.

These exceptions provide structured error handling for calendar, strike,
and symbol failures.
"""


class StandardOptionsError(Exception):
    """Base exception for all standard options errors."""

    def __init__(self, message: str, code: str = "UNKNOWN_ERROR") -> None:
        """
        Initialize exception with message and error code.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (SNAKE_CASE)
        """
        self.message = message
        self.code = code
        super().__init__(message)


class InvalidArgumentError(StandardOptionsError):
    """Raised when an argument is rejected at the boundary."""

    def __init__(self, message: str, code: str = "INVALID_ARGUMENT") -> None:
        super().__init__(message, code=code)


class OutOfRangeError(StandardOptionsError):
    """Raised when a requested expiration lies beyond the built calendar."""

    def __init__(
        self, message: str = "Requested expiration is beyond the calendar horizon"
    ) -> None:
        super().__init__(message, code="OUT_OF_RANGE")
