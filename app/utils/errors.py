"""
GetUs.Fit API - Custom Exception Classes.

Exception hierarchy for application error handling. Every class carries a
stable ``kind`` that is rendered alongside the message in error responses.
"""

from typing import Optional


class GetUsFitException(Exception):
    """
    Base exception class for GetUs.Fit application.

    All custom exceptions should inherit from this class.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code for the error.
        detail: Additional error details.
    """

    kind = "error"

    def __init__(
        self,
        message: str = "An error occurred",
        status_code: int = 500,
        detail: Optional[str] = None
    ):
        """
        Initialize GetUsFitException.

        Args:
            message: Human-readable error message.
            status_code: HTTP status code (default 500).
            detail: Additional error details.
        """
        self.message = message
        self.status_code = status_code
        self.detail = detail or message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Render the error as a response payload."""
        payload = {"error": self.message, "kind": self.kind}
        if self.detail != self.message:
            payload["detail"] = self.detail
        return payload


class AuthenticationError(GetUsFitException):
    """
    Exception raised for authentication failures.

    Used when:
    - Invalid credentials
    - Expired tokens
    - Missing authentication
    """

    kind = "authentication"

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


class NotFoundError(GetUsFitException):
    """
    Exception raised when a resource is not found.

    Also raised in place of ForbiddenError when admitting the resource
    exists would disclose it to an unrelated caller.
    """

    kind = "not_found"

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


class ValidationError(GetUsFitException):
    """
    Exception raised for input validation failures.

    Used when:
    - Invalid input format
    - Missing required fields
    - Business rule violations
    """

    kind = "validation"

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


class ForbiddenError(GetUsFitException):
    """
    Exception raised for authorization failures.

    Used when:
    - User lacks the required role
    - Trainer is not assigned to the user
    """

    kind = "forbidden"

    def __init__(
        self,
        message: str = "Access denied",
        detail: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=403,
            detail=detail
        )


class ConflictError(GetUsFitException):
    """
    Exception raised for resource conflicts.

    Used when:
    - Duplicate entry
    - Resource already exists
    """

    kind = "conflict"

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


class UpstreamError(GetUsFitException):
    """Exception raised when an external dependency is unavailable."""

    kind = "upstream_unavailable"

    def __init__(
        self,
        message: str = "Service temporarily unavailable",
        detail: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=503,
            detail=detail
        )
