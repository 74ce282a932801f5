"""
Postboard Backend — Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for each failure a handler can report.
Why:   Handlers raise typed errors; the global handlers registered in main.py
       turn each type into one HTTP status and one JSON error shape. No
       handler builds error responses itself.
How:   Each exception carries a client-safe message and an optional context
       dict. The context is logged, never returned for server-side errors.

Exception Hierarchy:
    PostboardError (base)
    ├── ValidationError          → 400 Bad Request (missing/out-of-range input)
    ├── ConflictError            → 400 Bad Request (username/email already taken)
    ├── AuthError                → 400 Bad Request (password mismatch)
    ├── NotFoundError            → 404 Not Found
    ├── RateLimitExceededError   → 429 Too Many Requests
    └── InternalError            → 500 Internal Server Error (store/connectivity)

Status convention:
    NotFoundError maps to 404 for every endpoint, login included. The
    credential mismatch keeps 400 so clients can tell "no such account"
    from "wrong password".
"""

from typing import Any, Dict, Optional


class PostboardError(Exception):
    """
    Base exception for all Postboard application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, returned only for client errors)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(PostboardError):
    """
    Raised when a request body fails the handler's field checks.

    When:    A required field is missing or blank, a string is too long or
             too short, or `age` is outside [1, 150].
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "All fields are required",
            "details": {"missing": ["password"]}
        }
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


class ConflictError(PostboardError):
    """
    Raised when a user with the same email or username already exists.

    Raised both by the pre-insert lookup and when the database rejects the
    insert on its unique constraints (two registrations racing each other).
    HTTP: 400 Bad Request
    """

    def __init__(
        self,
        message: str = "User already exists!",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class AuthError(PostboardError):
    """Supplied password does not match the stored hash. HTTP 400."""

    def __init__(
        self,
        message: str = "Invalid credentials",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(PostboardError):
    """
    Raised when no record matches a lookup.

    The store returns None for missing rows; the service converts that into
    this exception so the 404 is decided in one place.
    """

    def __init__(
        self,
        resource: str = "resource",
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        super().__init__(
            message=message or f"The requested {resource} was not found",
            context=ctx,
        )
        self.resource = resource


class InternalError(PostboardError):
    """
    Raised when a store operation fails unexpectedly.

    When:    Connection lost mid-query, deadlock, driver error.
    HTTP:    500 Internal Server Error

    The client always receives the generic message. The original error type
    and detail live in `context` and are only written to the server log.
    """

    def __init__(
        self,
        message: str = "An internal error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class RateLimitExceededError(PostboardError):
    """
    Raised when a client exceeds the per-IP request quota on user endpoints.

    HTTP: 429 Too Many Requests, with a Retry-After header.
    """

    def __init__(
        self,
        retry_after: int = 60,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = (
            f"Too many requests. Please wait {retry_after} seconds before retrying."
        )
        ctx = context or {}
        ctx["retry_after"] = retry_after
        super().__init__(message=message, context=ctx)
        self.retry_after = retry_after
