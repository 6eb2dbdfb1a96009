"""
┌──────────────────────────────────────────────────────────────┐
│                    Exception Handling Flow                   │
│                                                              │
│  [Service] → [Classify] → [Log] → [Router] → [Client]        │
│                                                              │
│  Error Types: Validation → Auth → Not Found → Read-only      │
│               → Conflict                                     │
│  HTTP Status: 400 → 401/403 → 404 → 405 → 409                │
└──────────────────────────────────────────────────────────────┘

Exception classes for the component gallery
Flow: Error occurrence → Classification → Logging → HTTP response → Client handling
"""

from typing import Any, Dict, Optional

import structlog

logger = structlog.get_logger()


class GalleryException(Exception):
    """
    Base exception class for the gallery backend.

    Every subclass carries the HTTP status the routers answer with, an
    optional machine-readable error code and a details mapping. Instances
    are logged when they are created.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        """Initialize base exception."""
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code

        # Log the exception
        logger.error(
            "Gallery exception occurred",
            error_type=self.__class__.__name__,
            message=message,
            error_code=error_code,
            status_code=status_code,
            details=details
        )


class ValidationError(GalleryException):
    """Invalid input. Answered with 400 Bad Request."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        error_code: str = "VALIDATION_ERROR"
    ):
        """Initialize validation error."""
        details = {}
        if field:
            details["field"] = field
        if value is not None:
            details["invalid_value"] = str(value)

        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
            status_code=400
        )
        self.field = field
        self.value = value


class NotFoundError(GalleryException):
    """Resource lookup failed. Answered with 404 Not Found."""

    def __init__(
        self,
        message: str,
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        error_code: str = "NOT_FOUND"
    ):
        """Initialize not found error."""
        details = {}
        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id

        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
            status_code=404
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class AuthenticationError(GalleryException):
    """No caller identity on the request. Answered with 401 Unauthorized."""

    def __init__(
        self,
        message: str = "Authentication required",
        error_code: str = "AUTHENTICATION_REQUIRED"
    ):
        """Initialize authentication error."""
        super().__init__(
            message=message,
            error_code=error_code,
            status_code=401
        )


class AuthorizationError(GalleryException):
    """Caller lacks the required role. Answered with 403 Forbidden."""

    def __init__(
        self,
        message: str = "Insufficient permissions",
        required_role: Optional[str] = None,
        error_code: str = "INSUFFICIENT_PERMISSIONS"
    ):
        """Initialize authorization error."""
        details = {}
        if required_role:
            details["required_role"] = required_role

        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
            status_code=403
        )
        self.required_role = required_role


class CatalogReadOnlyError(GalleryException):
    """
    Write attempted against the static registry.

    The static catalog has no persistence, so create/update/delete,
    favorites, users and version history are unavailable. Answered with
    405 Method Not Allowed.
    """

    def __init__(
        self,
        message: str = "The static catalog is read-only",
        operation: Optional[str] = None,
        error_code: str = "CATALOG_READ_ONLY"
    ):
        """Initialize read-only catalog error."""
        details = {}
        if operation:
            details["operation"] = operation

        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
            status_code=405
        )
        self.operation = operation


class ConflictError(GalleryException):
    """Unique constraint or duplicate resource. Answered with 409 Conflict."""

    def __init__(
        self,
        message: str,
        conflicting_resource: Optional[str] = None,
        error_code: str = "RESOURCE_CONFLICT"
    ):
        """Initialize conflict error."""
        details = {}
        if conflicting_resource:
            details["conflicting_resource"] = conflicting_resource

        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
            status_code=409
        )
        self.conflicting_resource = conflicting_resource
