"""
Restaurant Ordering API: Custom Exception Hierarchy
======================================================

What:  Application-specific exceptions for every failure the API reports.
Why:   Services raise typed exceptions; global handlers (registered in
       main.py) turn them into the uniform `{status, message}` envelope with
       the right HTTP status code.
How:   Each exception carries a client-safe message and an optional context
       dict that is logged but never returned (unless error detail is
       explicitly enabled for DatabaseError).

Exception Hierarchy:
    RestaurantAPIError (base)
    ├── ValidationError              → 400 bad_request
    ├── AuthError                    → 401 error
    │   ├── MissingCredentialsError
    │   ├── MalformedCredentialsError
    │   ├── InvalidTokenError
    │   └── InvalidLoginError
    ├── NotFoundError                → 404 not_found
    ├── ConflictError                → 409 conflict
    └── DatabaseError                → 500 error

Auth gate failures share one public message. The subclass (and `reason`)
only shows up in server logs, so callers cannot probe which part of their
credentials was wrong.
"""

from typing import Any, Dict, Optional


class RestaurantAPIError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, not returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(RestaurantAPIError):
    """
    Raised when client input fails validation.

    When:    Missing required fields, non-numeric ids, empty update bodies,
             invalid enum values, invalid pagination in strict routers.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class AuthError(RestaurantAPIError):
    """
    Raised when a request cannot be attributed to an authenticated caller.

    HTTP:    401 Unauthorized
    """

    reason = "unauthorized"

    def __init__(
        self,
        message: str = "Unauthorized",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class MissingCredentialsError(AuthError):
    """No Authorization header was sent."""

    reason = "missing_credentials"


class MalformedCredentialsError(AuthError):
    """Authorization header is not `Bearer <token>`."""

    reason = "malformed_credentials"


class InvalidTokenError(AuthError):
    """Token signature, expiry or claims failed verification."""

    reason = "invalid_token"


class InvalidLoginError(AuthError):
    """Unknown username or wrong password on /login."""

    reason = "invalid_login"

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(message="Invalid username or password", context=context)


class NotFoundError(RestaurantAPIError):
    """
    Raised when a requested row does not exist.

    When:    GET/PUT/DELETE by id with no matching row (zero rows returned or
             zero rows affected).
    HTTP:    404 Not Found

    The message is always "<Entity> not found", e.g. "Menu not found".
    """

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)
        self.resource = resource


class ConflictError(RestaurantAPIError):
    """
    Raised when a write would violate a uniqueness or integrity rule.

    When:    Duplicate username/email on user creation, or the database
             rejects a write with an integrity violation.
    HTTP:    409 Conflict
    """

    def __init__(
        self,
        message: str = "Resource already exists",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(RestaurantAPIError):
    """
    Raised when a database statement fails unexpectedly.

    HTTP:    500 Internal Server Error

    Security Note:
        The client sees "Database error". The driver's text is kept in
        context["detail"] and only returned when EXPOSE_ERROR_DETAIL is on.
    """

    def __init__(
        self,
        message: str = "Database error",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
