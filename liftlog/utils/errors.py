"""
LiftLog API - Custom Exception Classes.

Exception hierarchy for application error handling.
"""

from typing import Optional


class LiftLogException(Exception):
    """
    Base exception class for LiftLog application.

    All custom exceptions should inherit from this class.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code for the error.
        detail: Additional error details.
    """

    def __init__(
        self,
        message: str = "An error occurred",
        status_code: int = 500,
        detail: Optional[str] = None
    ):
        """
        Initialize LiftLogException.

        Args:
            message: Human-readable error message.
            status_code: HTTP status code (default 500).
            detail: Additional error details.
        """
        self.message = message
        self.status_code = status_code
        self.detail = detail or message
        super().__init__(self.message)


class AuthenticationError(LiftLogException):
    """
    Exception raised for authentication failures.

    Used when:
    - Invalid credentials
    - Expired tokens
    - Missing authentication
    """

    def __init__(
        self,
        message: str = "Authentication failed",
        detail: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=401,
            detail=detail
        )


class NotFoundError(LiftLogException):
    """
    Exception raised when a resource is not found.

    Used when:
    - User not found
    - Workout not found for the requesting owner
    """

    def __init__(
        self,
        message: str = "Resource not found",
        detail: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=404,
            detail=detail
        )


class ValidationError(LiftLogException):
    """
    Exception raised for input validation failures.

    Used when:
    - Unparseable date parameters
    - Incomplete date ranges
    - Unknown timezone names
    """

    def __init__(
        self,
        message: str = "Validation error",
        detail: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=400,
            detail=detail
        )


class ConflictError(LiftLogException):
    """
    Exception raised for resource conflicts.

    Used when:
    - Duplicate entry
    - Resource already exists
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        detail: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=409,
            detail=detail
        )


class StorageError(LiftLogException):
    """
    Exception raised when the document store fails.

    The message is deliberately generic; the underlying driver error is
    kept in ``detail`` for logging only and never sent to clients.
    """

    def __init__(
        self,
        message: str = "Server error",
        detail: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=500,
            detail=detail
        )
