"""
Diabetes Diagnosis API — Custom Exception Hierarchy
=====================================================

What:  Application-specific exceptions for the error scenarios the API knows.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return JSON error bodies with the matching HTTP status code.
Who:   Raised by the query gateway and services; caught by global handlers.

Exception Hierarchy:
    DiabetesApiError (base)
    ├── ValidationError   → 400 Bad Request
    ├── AuthError         → 401 Unauthorized
    ├── NotFoundError     → 404 Not Found
    └── DatabaseError     → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class DiabetesApiError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, returned only where a handler
                  explicitly allows it)
    """

    status_code = 500

    def __init__(
        self,
        message: str = "Terjadi kesalahan pada server",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(DiabetesApiError):
    """
    Raised when a request body is missing a field or has the wrong shape.

    Only presence and type are checked; the values themselves are not
    validated further.
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Permintaan tidak valid",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class AuthError(DiabetesApiError):
    """Raised when admin credentials do not match any stored admin."""

    status_code = 401

    def __init__(
        self,
        message: str = "Login gagal",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(DiabetesApiError):
    """Raised for unmatched routes and missing resources."""

    status_code = 404

    def __init__(
        self,
        message: str = "Endpoint tidak ditemukan",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(DiabetesApiError):
    """
    Raised when the database is unreachable or rejects a statement.

    What:    Wraps any SQLAlchemy/driver error surfaced by the query gateway.
    HTTP:    500 Internal Server Error

    `detail` holds the driver's own message. The global handler returns it
    to the client only when `settings.expose_error_details` is on.
    """

    status_code = 500

    def __init__(
        self,
        message: str = "Kesalahan database",
        detail: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if detail:
            ctx["detail"] = detail
        super().__init__(message=message, context=ctx)
        self.detail = detail
