"""Custom exception classes for the application.

Defines the domain exceptions raised by the analytics services and handled
consistently by the API exception handlers.
"""

from typing import Optional, Any, Dict


class AppException(Exception):
    """Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code to return.
        details: Optional additional error details.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        """Initialize application exception.

        Args:
            message: Error message.
            status_code: HTTP status code (default: 500).
            details: Optional dictionary with additional error context.
        """
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(AppException):
    """Exception raised when input validation fails."""

    def __init__(self, message: str, field: Optional[str] = None):
        """Initialize validation error.

        Args:
            message: Validation error message.
            field: Optional field name that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, status_code=400, details=details)


class InvalidInputError(ValidationError):
    """Raised when a required numeric input is missing or out of range.

    This is the only error the nutrition and activity calculations raise.
    """

    def __init__(self, field: str, value: Any = None, reason: str = "must be a positive number"):
        """Initialize invalid input error.

        Args:
            field: Name of the offending input field (e.g., 'weight').
            value: The rejected value, echoed back in the message.
            reason: Short description of the violated constraint.
        """
        super().__init__(f"Invalid {field}: {reason} (got {value!r})", field=field)
        self.field = field
        self.value = value
