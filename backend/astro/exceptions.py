"""
Astro — Custom Exception Hierarchy
===================================

What:  Application-specific exceptions for the error scenarios of the API
       and of the client-side stores.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch the server-side
       ones and return structured JSON error responses.
Who:   Raised by services, middleware and `astro.client`.

Exception Hierarchy:
    AstroError (base)
    ├── ValidationError          → 400 Bad Request (client can fix)
    ├── NotFoundError            → 404 Not Found
    ├── ConflictError            → 409 Conflict
    ├── FileStorageError         → 500 Internal Server Error
    ├── DatabaseError            → 500 Internal Server Error
    ├── RateLimitExceededError   → 429 Too Many Requests
    ├── ApiError                 ← raised client-side for non-2xx responses
    └── ModalTransitionError     ← raised client-side for an illegal modal move
"""

from typing import Any, Dict, Optional


class AstroError(Exception):
    """
    Base exception for all Astro application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged; only some handlers return it)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(AstroError):
    """
    Raised when client input fails a business rule.

    HTTP:    400 Bad Request

    `errors` maps field name → message so a form can show every problem at
    once (e.g. {"name": "...", "url": "..."}).
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        errors: Optional[Dict[str, str]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        if errors:
            ctx["errors"] = errors
        super().__init__(message=message, context=ctx)
        self.field = field
        self.errors = errors or ({field: message} if field else {})


class NotFoundError(AstroError):
    """
    Raised when a requested resource does not exist.

    SQLAlchemy returns None for missing records; the service layer converts
    that None into this exception and the handler turns it into a 404.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class ConflictError(AstroError):
    """
    Raised when a write collides with existing state.

    When:    Creating a theme whose id already exists, deleting a category
             that still holds services.
    HTTP:    409 Conflict
    """

    def __init__(
        self,
        message: str = "The request conflicts with existing data",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class FileStorageError(AstroError):
    """Raised when logo file system operations fail (disk full, permissions)."""

    def __init__(
        self,
        message: str = "File storage operation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(AstroError):
    """
    Raised when database operations fail unexpectedly.

    The message returned to the client is always generic; the SQL level
    detail only goes to the server log.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class RateLimitExceededError(AstroError):
    """Raised when a client exceeds the per-IP request rate limit."""

    def __init__(
        self,
        retry_after: int = 60,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = (
            f"Rate limit exceeded. Please wait {retry_after} seconds before making more requests."
        )
        ctx = context or {}
        ctx["retry_after"] = retry_after
        super().__init__(message=message, context=ctx)
        self.retry_after = retry_after


class ApiError(AstroError):
    """
    Raised by `astro.client` when the backend answers with a non-2xx status.

    Mirrors the server's error body: {error, message, details, request_id}.
    """

    def __init__(
        self,
        status_code: int,
        error: str = "unknown_error",
        message: str = "The server returned an error",
        details: Optional[Dict[str, Any]] = None,
        request_id: Optional[str] = None,
    ):
        super().__init__(message=message, context=details)
        self.status_code = status_code
        self.error = error
        self.details = details or {}
        self.request_id = request_id

    @property
    def field_errors(self) -> Dict[str, str]:
        """Per-field messages from a validation failure, if any."""
        errors = self.details.get("errors")
        return dict(errors) if isinstance(errors, dict) else {}


class ModalTransitionError(AstroError):
    """
    Raised by the client UI store for a modal transition that is not allowed,
    e.g. tucking a modal that is not collapsable or that is not open.
    """

    def __init__(
        self,
        modal_id: str,
        message: str = "Modal transition not allowed",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["modal_id"] = modal_id
        super().__init__(message=message, context=ctx)
        self.modal_id = modal_id
