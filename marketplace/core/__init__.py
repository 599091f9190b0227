"""
==============================================================================
Core Package
==============================================================================

Core infrastructure shared by every layer.

Modules:
--------
- exceptions: AppException hierarchy, handlers and factory functions

Usage:
------
    from marketplace.core import exceptions
    raise exceptions.product_not_found(item_id)

==============================================================================
"""

from .exceptions import (
    AppException,
    DecodeError,
    NotFoundError,
    StoreError,
    UploadError,
    ValidationError,
    register_exception_handlers,
)

__all__ = [
    "AppException",
    "DecodeError",
    "NotFoundError",
    "StoreError",
    "UploadError",
    "ValidationError",
    "register_exception_handlers",
]
