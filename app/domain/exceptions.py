"""Domain exceptions for the permit admin application.

Presentation layer maps them to HTTP responses in exception handlers
(app.core.exception_handlers). Every response body carries an ``error`` field
with the human-readable message so API clients can surface it.
"""

from typing import Any


class PermitAdminException(Exception):
    """Base exception for all permit admin errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
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
        """Response body: error message, code, and details."""
        return {"error": self.message, "code": self.error_code, "details": self.details}


class ValidationException(PermitAdminException):
    """Raised when input validation fails outside of request schema parsing."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(PermitAdminException):
    """Raised when the caller's identity cannot be established (missing or bad token)."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(PermitAdminException):
    """Raised when an authenticated identity is not on the admin allow-list."""

    def __init__(self, email: str | None = None, message: str = "Not an admin") -> None:
        """Initialize with the rejected email (kept in details, not in the message).

        Args:
            email: Email address that failed the allow-list check.
            message: Human-readable message.
        """
        details = {"email": email} if email else {}
        super().__init__(message, "AUTHORIZATION_ERROR", details)


class ResourceNotFoundException(PermitAdminException):
    """Raised when a requested row is not found."""

    def __init__(self, resource_type: str, resource_id: int | str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'permit_rule').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class StoreUnavailableException(PermitAdminException):
    """Raised when the entity store is not configured (no DATABASE_URL)."""

    def __init__(self) -> None:
        super().__init__(
            message="Entity store is not configured: set DATABASE_URL.",
            error_code="SERVICE_UNAVAILABLE",
        )
