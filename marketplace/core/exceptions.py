"""
Application Exception Handling

AppException hierarchy for catalog errors with FastAPI integration.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


class AppException(Exception):
    """
    Base application exception for all error scenarios.

    Provides a consistent error response format across the API.

    Usage:
        raise AppException("Something broke", "INTERNAL_ERROR", 500)
        raise NotFoundError("Product not found", details={"item_id": 7})

    Error Codes:
        Client:
            - VALIDATION_ERROR (400 / 422)
            - NOT_FOUND (404)

        Server:
            - DECODE_ERROR (500)
            - UPLOAD_ERROR (500)
            - STORE_ERROR (500)
            - INTERNAL_ERROR (500)
    """

    default_code = "INTERNAL_ERROR"
    default_status = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (class default if None)
            status_code: HTTP status code (class default if None)
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code or self.default_code
        self.status_code = status_code or self.default_status
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        error_dict = {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "timestamp": self.timestamp
            }
        }

        if self.details:
            error_dict["error"]["details"] = self.details

        return error_dict


class ValidationError(AppException):
    """Malformed or missing client input."""

    default_code = "VALIDATION_ERROR"
    default_status = 400


class NotFoundError(AppException):
    """No row matched an id-scoped operation."""

    default_code = "NOT_FOUND"
    default_status = 404


class DecodeError(AppException):
    """Stored attribute text is corrupt; a server fault, not a client one."""

    default_code = "DECODE_ERROR"
    default_status = 500


class UploadError(AppException):
    """Object store or file stream failure during ingestion."""

    default_code = "UPLOAD_ERROR"
    default_status = 500


class StoreError(AppException):
    """Generic persistence-layer failure."""

    default_code = "STORE_ERROR"
    default_status = 500


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    FastAPI exception handler for AppException.

    Server-side failures are logged before being returned to the caller.
    """
    if exc.status_code >= 500:
        logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")

    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def request_validation_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Render FastAPI's own request validation failures in the same envelope."""
    errors = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ())),
            "message": error.get("msg", ""),
        }
        for error in exc.errors()
    ]
    error = ValidationError(
        "Request validation failed",
        status_code=422,
        details={"errors": errors}
    )
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def product_not_found(item_id: Optional[int] = None) -> NotFoundError:
    """Create product not found exception (fetch path)."""
    details = {"item_id": item_id} if item_id is not None else {}
    return NotFoundError("Product not found", details=details)


def item_not_found(item_id: Optional[int] = None) -> NotFoundError:
    """Create item not found exception (update and delete paths)."""
    details = {"item_id": item_id} if item_id is not None else {}
    return NotFoundError("Item not found", details=details)


def invalid_item_id(raw: Optional[str] = None) -> ValidationError:
    """Create invalid item id exception."""
    details = {"value": raw} if raw is not None else {}
    return ValidationError("Invalid item ID", details=details)


def invalid_product_id(raw: Optional[str] = None) -> ValidationError:
    """Create invalid product id exception."""
    details = {"value": raw} if raw is not None else {}
    return ValidationError("Invalid product ID", details=details)


def no_files_uploaded() -> ValidationError:
    """Create missing upload exception."""
    return ValidationError("No files uploaded")


def store_failure(action: str, error: Exception) -> StoreError:
    """Create store error carrying the underlying driver message."""
    return StoreError(f"Database {action} error: {error}")


def internal_error(message: str = "Internal server error") -> AppException:
    """Create internal server error exception."""
    return AppException(message, "INTERNAL_ERROR", 500)
