"""Domain exceptions for the portfolio API.

Defines domain-level exceptions independent of infrastructure concerns.
The presentation layer maps them to HTTP responses in exception handlers
(see portfolio_api.core.exception_handlers).
"""

from typing import Any


class PortfolioException(Exception):
    """Base exception for all portfolio API errors.

    All custom exceptions inherit from this class so they can be rendered
    into the {"success": false, "error": message} envelope consistently.

    Attributes:
        message: Human-readable error description (sent to the client).
        error_code: Machine-readable error code (selects the HTTP status).
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the error envelope sent to clients."""
        return {"success": False, "error": self.message}


class ValidationException(PortfolioException):
    """Raised when input validation fails (missing required field, bad format)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(PortfolioException):
    """Raised when authentication fails (missing, invalid or expired token)."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(PortfolioException):
    """Raised when a verified identity does not pass the admin predicate."""

    def __init__(self, message: str = "Access denied", email: str | None = None) -> None:
        """Initialize with message and the rejected identity's email.

        Args:
            message: Human-readable message.
            email: Optional email of the rejected identity (logged, not returned).
        """
        details = {"email": email} if email else {}
        super().__init__(message, "AUTHORIZATION_ERROR", details)


class ResourceNotFoundException(PortfolioException):
    """Raised when a requested document does not exist."""

    def __init__(self, resource_type: str, resource_id: str | None = None) -> None:
        """Initialize with resource type and ID.

        Args:
            resource_type: Display name of the resource (e.g. 'Project').
            resource_id: Document ID that was not found.
        """
        details: dict[str, Any] = {"resource_type": resource_type}
        if resource_id is not None:
            details["resource_id"] = resource_id
        super().__init__(f"{resource_type} not found", "RESOURCE_NOT_FOUND", details)


class PersistenceException(PortfolioException):
    """Raised when the document store fails; rendered as a generic 500."""

    def __init__(self, message: str, reason: str | None = None) -> None:
        details = {"reason": reason} if reason else {}
        super().__init__(message, "PERSISTENCE_ERROR", details)


class ServiceUnavailableException(PortfolioException):
    """Raised when a required backend (e.g. Firestore) is not configured."""

    def __init__(self, message: str = "Service unavailable") -> None:
        super().__init__(message, "SERVICE_UNAVAILABLE")
