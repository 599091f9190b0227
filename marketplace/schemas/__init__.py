"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Request and response schemas for the HTTP layer.

This package provides:
- Common: confirmation and health responses
- Product: product response and update request

==============================================================================
"""

from .common import HealthResponse, MessageResponse
from .product import ProductResponse, ProductUpdateRequest

__all__ = [
    # Common
    "HealthResponse",
    "MessageResponse",
    # Product
    "ProductResponse",
    "ProductUpdateRequest",
]
