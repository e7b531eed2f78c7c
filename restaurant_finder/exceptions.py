"""
Restaurant Finder - Custom Exception Hierarchy
===============================================

What:  Application-specific exceptions for the different failure scenarios.
How:   Each exception carries a client-safe message and an optional context
       dict. Global handlers registered in main.py translate them into JSON
       error responses with the right HTTP status code.
Who:   Raised by services, the storage gateway and route handlers.

Exception Hierarchy:
    RestaurantFinderError (base)
    ├── ValidationError          → 400 Bad Request
    │   └── UploadError          → 400 Bad Request ("Upload error: ..." prefix)
    ├── NotFoundError            → 404 Not Found
    ├── FileStorageError         → 500 Internal Server Error
    └── DatabaseError            → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class RestaurantFinderError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged; only returned for 4xx errors)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(RestaurantFinderError):
    """
    Raised when client input fails validation.

    When:    Missing upload, disallowed image type, malformed request.
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


class UploadError(ValidationError):
    """
    Raised by the multipart upload layer itself rather than the type filter.

    When:    File too large, file sent under an unexpected field name, or
             more than one file in a single-file request.
    HTTP:    400 Bad Request

    The message is prefixed with "Upload error: " so clients can tell these
    apart from type-filter rejections.
    """

    prefix = "Upload error: "

    def __init__(
        self,
        reason: str,
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=f"{self.prefix}{reason}", field=field, context=context)
        self.reason = reason


class NotFoundError(RestaurantFinderError):
    """
    Raised when a requested resource does not exist.

    When:    GET/PUT/DELETE /api/v1/restaurants/{id} with an unknown id,
             or a request for an upload that is not on disk.
    HTTP:    404 Not Found
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


class FileStorageError(RestaurantFinderError):
    """
    Raised when file system operations fail.

    When:    Disk full, permission denied, directory not writable.
    HTTP:    500 Internal Server Error
    """

    def __init__(
        self,
        message: str = "File storage operation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(RestaurantFinderError):
    """
    Raised when a storage query fails.

    When:    Connection lost, constraint violation, type rejected by the driver.
    HTTP:    500 Internal Server Error

    The response message is always generic; the failing operation and the
    driver error type are logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
