"""
Exception hierarchy for the Circonus client.

Provides layered exception structure for client-side validation, HTTP
transport and per-resource failures. All exceptions include context for
observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the client
"""

from typing import Any


class CirconusClientException(Exception):
    """Base exception for all Circonus client errors."""

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


class ConfigurationError(CirconusClientException):
    """Raised when client settings are missing or unusable."""

    pass


class ValidationError(CirconusClientException):
    """Raised when input validation fails before any request is sent."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class InvalidCIDError(ValidationError):
    """Raised when a CID is empty or does not match the resource pattern."""

    def __init__(
        self,
        message: str,
        cid: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize invalid CID error.

        Args:
            message: Error message
            cid: The rejected CID (after prefix normalisation, if any)
            details: Additional context
        """
        details = details or {}
        if cid:
            details["cid"] = cid
        super().__init__(message, field="cid", details=details)


class InvalidConfigError(ValidationError):
    """Raised when a resource record is missing (None)."""

    pass


class APIError(CirconusClientException):
    """Base exception for HTTP-level failures talking to the API."""

    def __init__(
        self,
        message: str,
        method: str | None = None,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize API error.

        Args:
            message: Error message
            method: HTTP method of the failed request
            path: Request path relative to the base URL
            details: Additional context
        """
        details = details or {}
        if method:
            details["method"] = method
        if path:
            details["path"] = path
        self.method = method
        self.path = path
        super().__init__(message, details)


class APIResponseError(APIError):
    """Raised when the API answers with a non-success status code."""

    def __init__(
        self,
        status_code: int,
        body: str = "",
        method: str | None = None,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize API response error.

        Args:
            status_code: HTTP status code returned by the API
            body: Response body text (usually a JSON error document)
            method: HTTP method of the failed request
            path: Request path relative to the base URL
            details: Additional context
        """
        details = details or {}
        details["status_code"] = status_code
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"API response code {status_code}: {body}",
            method=method,
            path=path,
            details=details,
        )


class APITransportError(APIError):
    """Raised when a request cannot be completed (connect, read, TLS)."""

    pass


class ResourceError(CirconusClientException):
    """Base exception for resource binding failures."""

    def __init__(
        self,
        message: str,
        resource: str | None = None,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize resource error.

        Args:
            message: Error message
            resource: Resource name (e.g. "outlier report")
            operation: Operation that failed (fetch, create, update, delete, search)
            details: Additional context
        """
        details = details or {}
        if resource:
            details["resource"] = resource
        if operation:
            details["operation"] = operation
        self.resource = resource
        self.operation = operation
        super().__init__(message, details)


class ResourceRequestError(ResourceError):
    """Raised when the HTTP call behind a resource operation fails."""

    pass


class ResourceParseError(ResourceError):
    """Raised when an API response cannot be parsed into resource records."""

    pass
